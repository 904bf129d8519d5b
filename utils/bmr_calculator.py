from models.profile import Sex


def calculate_harris_benedict_bmr(
    sex: Sex, age: float, height_cm: float, weight_kg: float
) -> float:
    """Calculates BMR using the revised Harris-Benedict equation."""
    if sex == Sex.MALE:
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    else:
        return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)
