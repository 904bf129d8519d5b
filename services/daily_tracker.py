from typing import List

import config
from models.meal import (
    DailyLogSummary,
    ExerciseEntry,
    ExerciseIntensity,
    MealEntry,
    TrackerInsight,
    TrackerInsightType,
)
from services.reminder_analyzer import get_time_of_day


def _insight(insight_type: TrackerInsightType, message: str) -> TrackerInsight:
    return TrackerInsight(type=insight_type, message=message)


def _calorie_balance_insight(net_calories: int) -> TrackerInsight:
    if net_calories > config.NET_CALORIE_TOLERANCE:
        return _insight(
            TrackerInsightType.WARNING,
            f"High calorie surplus of {net_calories} calories detected. Consider "
            "adding more physical activity or reducing portion sizes to maintain "
            "balance.",
        )
    if net_calories < -config.NET_CALORIE_TOLERANCE:
        return _insight(
            TrackerInsightType.WARNING,
            f"Large calorie deficit of {abs(net_calories)} calories detected. "
            "Ensure you're eating enough to fuel your activities and support "
            "recovery.",
        )
    sign = "+" if net_calories > 0 else ""
    return _insight(
        TrackerInsightType.SUCCESS,
        f"Well-balanced calorie intake! Your net calories ({sign}{net_calories}) "
        "are within a healthy range.",
    )


def _meal_insights(meals: List[MealEntry], total_in: int) -> List[TrackerInsight]:
    insights = []
    count = len(meals)
    if count < config.MIN_DAILY_MEALS:
        insights.append(
            _insight(
                TrackerInsightType.INFO,
                f"You logged {count} meal(s) today. Consider eating 3-5 smaller "
                "meals throughout the day for sustained energy and better "
                "metabolism.",
            )
        )
    elif count <= config.MAX_DAILY_MEALS:
        insights.append(
            _insight(
                TrackerInsightType.SUCCESS,
                f"Great meal frequency! {count} meals help maintain steady "
                "energy levels and support metabolic health.",
            )
        )
    else:
        insights.append(
            _insight(
                TrackerInsightType.INFO,
                f"You logged {count} meals. While frequent eating can work for "
                "some, ensure you're not overeating. Focus on portion control.",
            )
        )

    if not any(get_time_of_day(m.time) == "morning" for m in meals):
        insights.append(
            _insight(
                TrackerInsightType.INFO,
                "No breakfast logged. Starting your day with a nutritious meal can "
                "boost metabolism and provide sustained energy throughout the "
                "morning.",
            )
        )

    if total_in < config.LOW_DAILY_INTAKE_KCAL:
        insights.append(
            _insight(
                TrackerInsightType.WARNING,
                f"Your total calorie intake ({total_in} cal) is quite low. Ensure "
                "you're meeting your body's nutritional needs.",
            )
        )
    elif total_in > config.HIGH_DAILY_INTAKE_KCAL:
        insights.append(
            _insight(
                TrackerInsightType.WARNING,
                f"Your total calorie intake ({total_in} cal) is high. Monitor "
                "portion sizes and consider your activity level.",
            )
        )
    return insights


def _exercise_insights(
    exercises: List[ExerciseEntry], minutes: int
) -> List[TrackerInsight]:
    insights = []
    if minutes < config.MIN_EXERCISE_MINUTES:
        insights.append(
            _insight(
                TrackerInsightType.INFO,
                f"Good start with {minutes} minutes of exercise! Try to reach 30+ "
                "minutes daily for optimal cardiovascular and metabolic health "
                "benefits.",
            )
        )
    elif minutes <= config.HIGH_EXERCISE_MINUTES:
        insights.append(
            _insight(
                TrackerInsightType.SUCCESS,
                f"Excellent! {minutes} minutes of exercise meets or exceeds the "
                "daily recommendation for maintaining good health.",
            )
        )
    else:
        insights.append(
            _insight(
                TrackerInsightType.SUCCESS,
                f"Outstanding! {minutes} minutes of exercise shows strong "
                "commitment. Ensure adequate rest and recovery between sessions.",
            )
        )

    high_count = sum(1 for e in exercises if e.intensity == ExerciseIntensity.HIGH)
    low_count = sum(1 for e in exercises if e.intensity == ExerciseIntensity.LOW)
    if high_count > 0:
        insights.append(
            _insight(
                TrackerInsightType.SUCCESS,
                f"{high_count} high-intensity workout(s) detected! Excellent for "
                "cardiovascular health, calorie burn, and building endurance.",
            )
        )
    if low_count == len(exercises):
        insights.append(
            _insight(
                TrackerInsightType.INFO,
                "All exercises were low intensity. Consider adding moderate or "
                "high-intensity activities 2-3 times per week for better results.",
            )
        )

    protein_g = (
        config.PROTEIN_TARGET_ACTIVE_G
        if minutes > config.MIN_EXERCISE_MINUTES
        else config.PROTEIN_TARGET_BASE_G
    )
    insights.append(
        _insight(
            TrackerInsightType.INFO,
            f"Based on your {minutes} minutes of activity, aim for approximately "
            f"{protein_g}g of protein today to support muscle recovery and growth.",
        )
    )
    return insights


GENERAL_TIPS = (
    "Hydration reminder: Drink at least 2 liters (8-10 glasses) of water "
    "throughout the day. Increase intake during and after exercise.",
    "Sleep is crucial for recovery and health. Aim for 7-9 hours of quality "
    "sleep each night to support your fitness and nutrition goals.",
)

EMPTY_LOG_TIPS = (
    "Start tracking your meals and exercises to receive personalized AI "
    "insights about your nutrition and fitness patterns.",
    "General tip: Eat a balanced diet with plenty of vegetables, lean proteins, "
    "whole grains, and healthy fats for optimal health.",
    "Aim for at least 30 minutes of moderate physical activity most days of the "
    "week to maintain cardiovascular health and fitness.",
)


def analyze_daily_log(
    meals: List[MealEntry], exercises: List[ExerciseEntry]
) -> DailyLogSummary:
    """Energy balance and feedback for one day of logged meals and exercises."""
    total_in = sum(m.calories for m in meals)
    total_out = sum(e.calories_burned for e in exercises)
    net_calories = total_in - total_out
    minutes = sum(e.duration for e in exercises)

    insights = []
    if meals and exercises:
        insights.append(_calorie_balance_insight(net_calories))
    if meals:
        insights.extend(_meal_insights(meals, total_in))
    if exercises:
        insights.extend(_exercise_insights(exercises, minutes))

    insights.extend(_insight(TrackerInsightType.INFO, tip) for tip in GENERAL_TIPS)
    if not meals and not exercises:
        insights.extend(
            _insight(TrackerInsightType.INFO, tip) for tip in EMPTY_LOG_TIPS
        )

    return DailyLogSummary(
        total_calories_in=total_in,
        total_calories_out=total_out,
        net_calories=net_calories,
        total_exercise_minutes=minutes,
        insights=insights,
    )
