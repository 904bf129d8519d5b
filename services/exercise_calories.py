import logging
from typing import Union

import config
from models.meal import ExerciseDescription, ExerciseIntensity
from utils.numbers import round_half_up


def get_calories_per_minute(
    name: str, intensity: Union[ExerciseIntensity, str]
) -> float:
    """Base burn rate of the first known activity named in `name`."""
    search_text = (name or "").lower()
    try:
        intensity = ExerciseIntensity(intensity)
    except ValueError:
        logging.warning(f"Unknown exercise intensity '{intensity}', using medium.")
        intensity = ExerciseIntensity.MEDIUM

    for activity, rates in config.EXERCISE_CALORIES_PER_MINUTE.items():
        if activity in search_text:
            return rates[intensity.value]
    return config.DEFAULT_CALORIES_PER_MINUTE


def estimate_exercise_calories(
    name: str, duration_minutes: int, intensity: Union[ExerciseIntensity, str]
) -> int:
    calories_per_minute = get_calories_per_minute(name, intensity)
    search_text = (name or "").lower()
    for keywords, factor in config.EXERCISE_KEYWORD_ADJUSTMENTS:
        if any(keyword in search_text for keyword in keywords):
            calories_per_minute *= factor
    return round_half_up(calories_per_minute * duration_minutes)


def estimate_exercise(exercise: ExerciseDescription) -> int:
    return estimate_exercise_calories(
        exercise.name, exercise.duration_minutes, exercise.intensity
    )
