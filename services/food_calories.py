import logging
import re

import config
from models.meal import MealDescription
from utils.numbers import round_half_up

_WEIGHT_PATTERN = re.compile(config.PORTION_WEIGHT_PATTERN, re.IGNORECASE)


def get_portion_multiplier(portion: str) -> float:
    """
    Scales per-100 g values to the described portion. An explicit weight
    ('200g', '1 kg', '8oz') takes precedence over 'small', 'medium' or 'large'.
    """
    portion = portion or ""
    multiplier = config.DEFAULT_PORTION_MULTIPLIER
    lowered = portion.lower()
    for keyword, size_multiplier in config.PORTION_SIZE_MULTIPLIERS:
        if keyword in lowered:
            multiplier = size_multiplier
            break

    weight_match = _WEIGHT_PATTERN.search(portion)
    if weight_match:
        amount = int(weight_match.group(1))
        unit = weight_match.group(2).lower()
        if unit == "g":
            multiplier = amount / config.PORTION_GRAMS_DIVISOR
        else:
            multiplier = amount * config.PORTION_UNIT_TO_100G[unit]
    return multiplier


def _estimate_from_meal_type(search_text: str) -> float:
    for keyword, kcal in config.MEAL_TYPE_FALLBACK_KCAL:
        if keyword in search_text:
            return kcal
    return config.DEFAULT_MEAL_KCAL


def estimate_meal_calories(name: str, ingredients: str, portion: str) -> int:
    """
    Heuristic kcal estimate for a free-text meal description.

    Every food from the lookup table that appears in the name or ingredients
    contributes its per-100 g energy scaled by the portion. When nothing
    matches, a typical value for the meal type is used instead. Salads get a
    flat bonus for dressing and toppings, then the cooking method scales the
    total.
    """
    search_text = f"{name or ''} {ingredients or ''}".lower()
    multiplier = get_portion_multiplier(portion)

    total_calories = 0.0
    match_count = 0
    for food, calories_per_100g in config.FOOD_CALORIES_PER_100G.items():
        if food in search_text:
            total_calories += calories_per_100g * multiplier
            match_count += 1

    if match_count == 0:
        logging.debug(f"No known foods in '{search_text}', using meal type estimate.")
        total_calories = _estimate_from_meal_type(search_text) * multiplier

    if "salad" in search_text:
        total_calories += config.SALAD_BONUS_KCAL
    if any(keyword in search_text for keyword in config.FRIED_KEYWORDS):
        total_calories *= config.FRIED_MULTIPLIER
    if any(keyword in search_text for keyword in config.LEAN_COOKING_KEYWORDS):
        total_calories *= config.LEAN_COOKING_MULTIPLIER

    return round_half_up(total_calories)


def estimate_meal(meal: MealDescription) -> int:
    return estimate_meal_calories(meal.name, meal.ingredients, meal.portion)
