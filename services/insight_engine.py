import logging
from typing import Iterable, List, Optional

import config
from models.insight import HealthMetrics, HealthRecord, Insight, InsightPriority
from utils.numbers import format_number, round_to, to_float

FALLBACK_INSIGHT = Insight(
    title="Maintain Healthy Habits",
    description=(
        "Your health metrics look good! Continue with regular check-ups, "
        "balanced nutrition, adequate sleep (7-9 hours), and consistent "
        "physical activity."
    ),
    priority=InsightPriority.LOW,
    category="wellness",
)


def _metric_field_for(data_type: str) -> Optional[str]:
    """Maps a free-text record type onto a HealthMetrics field name."""
    label = data_type.lower()
    if "blood" in label and "pressure" in label:
        if "systolic" in label:
            return "blood_pressure_systolic"
        if "diastolic" in label:
            return "blood_pressure_diastolic"
        return None
    if "heart" in label and "rate" in label:
        return "heart_rate"
    if "glucose" in label or ("blood" in label and "sugar" in label):
        return "blood_glucose"
    if "weight" in label or ("body" in label and "mass" in label):
        return "weight"
    if "height" in label:
        return "height"
    if "step" in label:
        return "steps"
    return None


def metrics_from_health_records(records: Iterable[HealthRecord]) -> HealthMetrics:
    """Collects the last value seen for each metric, in record order."""
    values = {}
    for record in records:
        field = _metric_field_for(record.data_type)
        if field is None:
            continue
        value = to_float(record.value)
        if value is None:
            logging.warning(
                f"Ignoring non-numeric {record.data_type} value: {record.value!r}"
            )
            continue
        values[field] = value
    return HealthMetrics(**values)


def _blood_pressure_insight(metrics: HealthMetrics) -> Optional[Insight]:
    systolic = metrics.blood_pressure_systolic
    diastolic = metrics.blood_pressure_diastolic
    if not systolic or not diastolic:
        return None
    if systolic > config.SYSTOLIC_LIMIT or diastolic > config.DIASTOLIC_LIMIT:
        return Insight(
            title="Blood Pressure Management",
            description=(
                f"Your blood pressure ({format_number(systolic)}/"
                f"{format_number(diastolic)}) is elevated. Consider reducing "
                "sodium intake, increasing physical activity, and managing "
                "stress. Consult your doctor for personalized advice."
            ),
            priority=InsightPriority.HIGH,
            category="wellness",
        )
    return None


def _heart_rate_insight(metrics: HealthMetrics) -> Optional[Insight]:
    heart_rate = metrics.heart_rate
    if not heart_rate:
        return None
    if heart_rate > config.HEART_RATE_HIGH:
        return Insight(
            title="Heart Rate Monitoring",
            description=(
                f"Your resting heart rate ({format_number(heart_rate)} bpm) is "
                "elevated. Focus on stress reduction, adequate sleep, and "
                "regular cardiovascular exercise to improve heart health."
            ),
            priority=InsightPriority.MEDIUM,
            category="exercise",
        )
    if config.HEART_RATE_ATHLETIC_LOW < heart_rate < config.HEART_RATE_ATHLETIC_HIGH:
        return Insight(
            title="Excellent Heart Health",
            description=(
                f"Your resting heart rate ({format_number(heart_rate)} bpm) "
                "indicates good cardiovascular fitness. Maintain your current "
                "exercise routine and healthy lifestyle."
            ),
            priority=InsightPriority.LOW,
            category="exercise",
        )
    return None


def _blood_glucose_insight(metrics: HealthMetrics) -> Optional[Insight]:
    glucose = metrics.blood_glucose
    if glucose and glucose > config.BLOOD_GLUCOSE_LIMIT:
        return Insight(
            title="Blood Sugar Management",
            description=(
                f"Your blood glucose ({format_number(glucose)} mg/dL) is "
                "elevated. Focus on balanced meals, reduce refined carbs, "
                "increase fiber intake, and maintain regular physical activity."
            ),
            priority=InsightPriority.HIGH,
            category="nutrition",
        )
    return None


def _weight_insight(metrics: HealthMetrics) -> Optional[Insight]:
    if not metrics.weight or not metrics.height:
        return None
    height_m = metrics.height / 100
    bmi = metrics.weight / (height_m * height_m)
    if bmi > config.INSIGHT_BMI_LIMIT:
        return Insight(
            title="Weight Management Focus",
            description=(
                f"Your BMI ({round_to(bmi, 1):.1f}) suggests focusing on "
                "balanced nutrition and regular exercise. Aim for 150 minutes "
                "of moderate activity weekly and a calorie-controlled diet."
            ),
            priority=InsightPriority.MEDIUM,
            category="wellness",
        )
    return None


def _steps_insight(metrics: HealthMetrics) -> Optional[Insight]:
    steps = metrics.steps
    if not steps:
        return None
    if steps < config.STEPS_LOW:
        return Insight(
            title="Increase Daily Movement",
            description=(
                f"Your daily steps ({format_number(steps)}) are below "
                "recommended levels. Aim for 7,000-10,000 steps daily. Try "
                "short walking breaks every hour and take stairs when possible."
            ),
            priority=InsightPriority.MEDIUM,
            category="exercise",
        )
    if steps > config.STEPS_HIGH:
        return Insight(
            title="Excellent Activity Level",
            description=(
                f"Great job! You're achieving {format_number(steps)} steps "
                "daily. Maintain this activity level and consider adding "
                "strength training for balanced fitness."
            ),
            priority=InsightPriority.LOW,
            category="exercise",
        )
    return None


INSIGHT_RULES = (
    _blood_pressure_insight,
    _heart_rate_insight,
    _blood_glucose_insight,
    _weight_insight,
    _steps_insight,
)


def generate_insights(metrics: Optional[HealthMetrics]) -> List[Insight]:
    """
    Evaluates the rules in order and keeps the first three that fire. When
    none fire, a single general wellness insight is returned.
    """
    metrics = metrics or HealthMetrics()
    insights = []
    for rule in INSIGHT_RULES:
        insight = rule(metrics)
        if insight is not None:
            insights.append(insight)
    if not insights:
        return [FALLBACK_INSIGHT.model_copy()]
    return insights[: config.MAX_INSIGHTS]
