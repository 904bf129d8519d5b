import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

import config
from models.body_metrics import (
    BMICategory,
    BMIResult,
    EnergyExpenditureResult,
    GuidelineResult,
    HydrationResult,
    MetricCalculation,
)
from models.profile import BodyMetrics, Sex
from utils.bmr_calculator import calculate_harris_benedict_bmr
from utils.numbers import round_half_up, round_to, to_float


def classify_bmi(bmi: float) -> BMICategory:
    if bmi < config.BMI_NORMAL_MIN:
        return BMICategory.UNDERWEIGHT
    if bmi < config.BMI_OVERWEIGHT_MIN:
        return BMICategory.NORMAL
    if bmi < config.BMI_OBESE_MIN:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def calculate_bmi(
    weight_kg: Optional[float], height_cm: Optional[float]
) -> Optional[BMIResult]:
    """
    Returns None when either measurement is missing. The category is taken
    from the unrounded value.
    """
    if not weight_kg or not height_cm:
        return None
    bmi = weight_kg / ((height_cm / 100) ** 2)
    return BMIResult(bmi=round_to(bmi, 1), category=classify_bmi(bmi))


def get_activity_multiplier(activity_level: Optional[str]) -> float:
    return config.ACTIVITY_LEVEL_MAPPING.get(
        activity_level or "", config.DEFAULT_ACTIVITY_LEVEL
    )


def calculate_energy_expenditure(
    metrics: Optional[BodyMetrics],
) -> Optional[EnergyExpenditureResult]:
    """BMR (Harris-Benedict) and TDEE, both rounded to whole kcal."""
    if metrics is None:
        return None
    bmr = calculate_harris_benedict_bmr(
        metrics.sex, metrics.age_years, metrics.height_cm, metrics.weight_kg
    )
    tdee = round_half_up(bmr * get_activity_multiplier(metrics.activity_level))
    return EnergyExpenditureResult(
        bmr=round_half_up(bmr),
        tdee=tdee,
        recommendation=f"{tdee} calories per day to maintain weight",
    )


def calculate_hydration(weight_kg: Optional[float]) -> Optional[HydrationResult]:
    if not weight_kg:
        return None
    # Glasses are derived from the already rounded litres.
    liters = round_to(weight_kg * config.WATER_LITERS_PER_KG, 1)
    return HydrationResult(
        daily_water_liters=liters,
        daily_water=f"{liters:.1f} liters",
        glasses=round_half_up(liters * config.GLASSES_PER_LITER),
    )


def get_guideline(metric: str) -> Optional[GuidelineResult]:
    guideline = config.GUIDELINES.get(metric)
    if guideline is None:
        return None
    recommended, note = guideline
    return GuidelineResult(recommended=recommended, note=note)


_NUMERIC_REQUEST_FIELDS = ("weight", "height", "age")


def _body_metrics_from_request(data: Dict[str, Any]) -> Optional[BodyMetrics]:
    required = ("weight", "height", "age", "gender", "activityLevel")
    if not all(data.get(key) for key in required):
        return None
    sex = Sex.MALE if data["gender"] == Sex.MALE.value else Sex.FEMALE
    try:
        return BodyMetrics(
            weight_kg=data["weight"],
            height_cm=data["height"],
            age_years=data["age"],
            sex=sex,
            activity_level=data["activityLevel"],
        )
    except ValidationError as e:
        logging.warning(f"Ignoring invalid body metrics: {e}")
        return None


def calculate_health_metric(metric: str, data: Dict[str, Any]) -> MetricCalculation:
    """
    Computes a named metric from request-style data
    (`weight`, `height`, `age`, `gender`, `activityLevel`).

    Supported metrics are 'bmi', 'calories', 'water', 'sleep' and 'steps'.
    Unknown metrics or missing fields give an empty `result`. Measurements may
    arrive as numeric strings; anything that does not parse counts as missing.
    """
    data = dict(data or {})
    for key in _NUMERIC_REQUEST_FIELDS:
        if data.get(key) is not None:
            value = to_float(data[key])
            if value is None:
                logging.warning(f"Ignoring non-numeric {key}: {data[key]!r}")
            data[key] = value
    result = None
    if metric == "bmi":
        result = calculate_bmi(data.get("weight"), data.get("height"))
    elif metric == "calories":
        result = calculate_energy_expenditure(_body_metrics_from_request(data))
    elif metric == "water":
        result = calculate_hydration(data.get("weight"))
    elif metric in config.GUIDELINES:
        result = get_guideline(metric)
    else:
        logging.warning(f"Unknown health metric requested: {metric}")

    if result is None:
        logging.debug(f"Insufficient data to calculate {metric}.")
        return MetricCalculation(metric=metric)
    return MetricCalculation(metric=metric, result=result.model_dump(by_alias=True))
