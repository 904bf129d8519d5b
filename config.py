# health_insights_service/config.py
from types import MappingProxyType

# --- Body Metrics ---

# BMI bracket lower bounds. A value equal to a bound belongs to the upper bracket.
BMI_NORMAL_MIN = 18.5
BMI_OVERWEIGHT_MIN = 25.0
BMI_OBESE_MIN = 30.0

# Maps user-reported activity level to a TDEE multiplier.
ACTIVITY_LEVEL_MAPPING = MappingProxyType(
    {
        "sedentary": 1.2,
        "light": 1.375,
        "moderate": 1.55,
        "active": 1.725,
        "veryActive": 1.9,
    }
)
DEFAULT_ACTIVITY_LEVEL = 1.2

# 33 ml of water per kg of body weight, 250 ml glasses.
WATER_LITERS_PER_KG = 0.033
GLASSES_PER_LITER = 4

GUIDELINES = MappingProxyType(
    {
        "sleep": (
            "7-9 hours",
            "Adults typically need 7-9 hours of sleep per night",
        ),
        "steps": (
            "10,000 steps",
            "Aim for at least 10,000 steps per day for optimal health",
        ),
    }
)

# --- Food Calorie Estimation ---

# kcal per 100 g. Order matters only for readability; every match is summed.
FOOD_CALORIES_PER_100G = MappingProxyType(
    {
        # Proteins
        "chicken": 165,
        "beef": 250,
        "pork": 242,
        "fish": 206,
        "salmon": 208,
        "tuna": 132,
        "egg": 155,
        "tofu": 76,
        "shrimp": 99,
        # Carbs
        "rice": 130,
        "pasta": 131,
        "bread": 265,
        "potato": 77,
        "quinoa": 120,
        "oats": 389,
        "noodles": 138,
        "tortilla": 218,
        # Vegetables
        "broccoli": 34,
        "spinach": 23,
        "carrot": 41,
        "tomato": 18,
        "lettuce": 15,
        "cucumber": 16,
        "pepper": 31,
        "onion": 40,
        "mushroom": 22,
        # Fruits
        "apple": 52,
        "banana": 89,
        "orange": 47,
        "strawberry": 32,
        "grape": 69,
        "watermelon": 30,
        "mango": 60,
        "pineapple": 50,
        # Dairy
        "milk": 42,
        "cheese": 402,
        "yogurt": 59,
        "butter": 717,
        "cream": 345,
        # Others
        "oil": 884,
        "sugar": 387,
        "honey": 304,
        "nuts": 607,
        "avocado": 160,
        "salad": 50,
        "soup": 80,
        "sandwich": 250,
        "burger": 540,
        "pizza": 266,
    }
)

# Checked in this order; the first keyword found wins.
PORTION_SIZE_MULTIPLIERS = (("small", 0.7), ("large", 1.5), ("medium", 1.0))
DEFAULT_PORTION_MULTIPLIER = 1.0

# Explicit weights ("200g", "2 lb") are converted to multiples of 100 g.
PORTION_WEIGHT_PATTERN = r"(\d+)\s*(g|kg|oz|lb)"
# Grams are divided by 100; the other units are multiplied by these factors.
PORTION_GRAMS_DIVISOR = 100
PORTION_UNIT_TO_100G = MappingProxyType(
    {
        "kg": 10.0,
        "oz": 0.28,
        "lb": 4.54,
    }
)

# Used when no food in the table matches. Checked in this order.
MEAL_TYPE_FALLBACK_KCAL = (
    ("breakfast", 350),
    ("lunch", 550),
    ("dinner", 650),
    ("snack", 150),
)
DEFAULT_MEAL_KCAL = 400

SALAD_BONUS_KCAL = 100
FRIED_KEYWORDS = ("fried", "deep")
FRIED_MULTIPLIER = 1.3
LEAN_COOKING_KEYWORDS = ("grilled", "baked")
LEAN_COOKING_MULTIPLIER = 0.9

# --- Exercise Calorie Estimation ---

# kcal per minute for an average 70 kg person, by intensity. First match wins.
EXERCISE_CALORIES_PER_MINUTE = MappingProxyType(
    {
        "running": MappingProxyType({"low": 8, "medium": 11, "high": 15}),
        "jogging": MappingProxyType({"low": 6, "medium": 8, "high": 10}),
        "walking": MappingProxyType({"low": 3, "medium": 4, "high": 5}),
        "cycling": MappingProxyType({"low": 6, "medium": 9, "high": 12}),
        "swimming": MappingProxyType({"low": 7, "medium": 10, "high": 13}),
        "yoga": MappingProxyType({"low": 2, "medium": 3, "high": 4}),
        "pilates": MappingProxyType({"low": 3, "medium": 4, "high": 5}),
        "weightlifting": MappingProxyType({"low": 3, "medium": 5, "high": 7}),
        "gym": MappingProxyType({"low": 4, "medium": 6, "high": 8}),
        "aerobics": MappingProxyType({"low": 5, "medium": 7, "high": 9}),
        "dancing": MappingProxyType({"low": 4, "medium": 6, "high": 8}),
        "basketball": MappingProxyType({"low": 6, "medium": 8, "high": 10}),
        "soccer": MappingProxyType({"low": 7, "medium": 9, "high": 11}),
        "tennis": MappingProxyType({"low": 6, "medium": 8, "high": 10}),
        "hiking": MappingProxyType({"low": 5, "medium": 7, "high": 9}),
        "jump rope": MappingProxyType({"low": 10, "medium": 12, "high": 15}),
        "rowing": MappingProxyType({"low": 6, "medium": 9, "high": 12}),
        "boxing": MappingProxyType({"low": 8, "medium": 11, "high": 14}),
        "martial arts": MappingProxyType({"low": 7, "medium": 10, "high": 13}),
        "climbing": MappingProxyType({"low": 7, "medium": 10, "high": 13}),
        "elliptical": MappingProxyType({"low": 5, "medium": 7, "high": 9}),
        "stairs": MappingProxyType({"low": 6, "medium": 8, "high": 10}),
        "stretching": MappingProxyType({"low": 2, "medium": 2, "high": 3}),
    }
)
DEFAULT_CALORIES_PER_MINUTE = 5

# Applied in order, compounding.
EXERCISE_KEYWORD_ADJUSTMENTS = (
    (("intense", "hiit"), 1.3),
    (("light", "easy"), 0.8),
    (("cardio",), 1.1),
)

# --- Reminder Analysis ---

# Hour ranges are [start, end). Anything else is night.
MORNING_HOURS = (5, 12)
AFTERNOON_HOURS = (12, 17)
EVENING_HOURS = (17, 21)

ADHERENCE_BASE_SCORE = 50
ADHERENCE_POINTS_PER_REMINDER = 5
ADHERENCE_MAX_VOLUME_POINTS = 25
ADHERENCE_POINTS_PER_CATEGORY = 5
ADHERENCE_MAX_SCORE = 95

MIN_EXERCISE_REMINDERS = 2
MIN_NUTRITION_REMINDERS = 2
MIN_MORNING_REMINDERS = 2
MIN_TOTAL_REMINDERS = 5
# Share of high + critical reminders above which priorities look unbalanced.
HIGH_PRIORITY_SHARE_LIMIT = 0.7
COVERAGE_PERCENT_PER_REMINDER = 25

# --- Personalized Insights ---

SYSTOLIC_LIMIT = 130
DIASTOLIC_LIMIT = 80
HEART_RATE_HIGH = 100
HEART_RATE_ATHLETIC_LOW = 40
HEART_RATE_ATHLETIC_HIGH = 60
BLOOD_GLUCOSE_LIMIT = 100
INSIGHT_BMI_LIMIT = 25
STEPS_LOW = 5000
STEPS_HIGH = 10000
MAX_INSIGHTS = 3

# --- Daily Tracker ---

NET_CALORIE_TOLERANCE = 500
MIN_DAILY_MEALS = 3
MAX_DAILY_MEALS = 5
LOW_DAILY_INTAKE_KCAL = 1200
HIGH_DAILY_INTAKE_KCAL = 3000
MIN_EXERCISE_MINUTES = 30
HIGH_EXERCISE_MINUTES = 90
PROTEIN_TARGET_ACTIVE_G = 80
PROTEIN_TARGET_BASE_G = 60

# --- Health Summary ---

# "1y" is a calendar year and is handled separately.
SUMMARY_PERIOD_DAYS = MappingProxyType({"7d": 7, "30d": 30, "90d": 90})
YEAR_PERIOD = "1y"
DEFAULT_SUMMARY_PERIOD = "7d"
INSIGHT_LOOKBACK_DAYS = 30

# --- Firestore ---

USERS_COLLECTION = "users"
REMINDERS_COLLECTION = "reminders"
HEALTH_DATA_COLLECTION = "healthData"
REMINDER_ANALYSIS_COLLECTION = "reminderAnalysis"
INSIGHTS_COLLECTION = "insights"
BODY_METRICS_COLLECTION = "bodyMetrics"
HEALTH_SUMMARY_COLLECTION = "healthSummary"
