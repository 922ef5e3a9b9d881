"""
Calculateurs fitness (fonctions pures).
Unités: poids en kg, taille en cm, âge en années, durée en minutes.
"""
from enum import Enum
from typing import Dict


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

WATER_FACTORS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.0,
    ActivityLevel.LIGHT: 1.2,
    ActivityLevel.MODERATE: 1.4,
    ActivityLevel.ACTIVE: 1.6,
    ActivityLevel.VERY_ACTIVE: 1.8,
}

GOAL_FACTORS: Dict[Goal, float] = {
    Goal.LOSE: 0.85,
    Goal.MAINTAIN: 1.0,
    Goal.GAIN: 1.15,
}

# Valeurs MET par activité
MET_VALUES: Dict[str, float] = {
    "walking": 3.8,
    "running": 8.3,
    "cycling": 7.5,
    "swimming": 8.0,
    "weightlifting": 3.0,
    "yoga": 2.5,
    "dancing": 4.5,
    "basketball": 8.0,
    "tennis": 7.0,
    "hiking": 6.0,
}


def bmi(weight_kg: float, height_cm: float) -> float:
    h = height_cm / 100
    return round(weight_kg / (h * h), 1)


def bmi_category(value: float) -> str:
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal weight"
    if value < 30:
        return "Overweight"
    return "Obese"


def body_fat(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    """Estimation à partir de l'IMC (formule de Deurenberg), bornée à 0..50 %."""
    offset = 16.2 if gender == Gender.MALE else 5.4
    estimate = 1.20 * bmi(weight_kg, height_cm) + 0.23 * age - offset
    return round(min(max(estimate, 0.0), 50.0), 1)


def ideal_weight(height_cm: float, gender: Gender) -> float:
    h = height_cm / 100
    factor = 22 if gender == Gender.MALE else 21
    return round(factor * h * h, 1)


def bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    """Mifflin-St Jeor."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == Gender.MALE else base - 161


def tdee(weight_kg: float, height_cm: float, age: int, gender: Gender,
         activity: ActivityLevel, goal: Goal = Goal.MAINTAIN) -> float:
    """Dépense énergétique journalière (non arrondie), ajustée à l'objectif."""
    base = bmr(weight_kg, height_cm, age, gender) * ACTIVITY_MULTIPLIERS[activity]
    return base * GOAL_FACTORS[goal]


def daily_calories(weight_kg: float, height_cm: float, age: int, gender: Gender,
                   activity: ActivityLevel) -> Dict[str, int]:
    maintain = round(tdee(weight_kg, height_cm, age, gender, activity))
    return {
        "maintain": maintain,
        "lose": round(maintain * GOAL_FACTORS[Goal.LOSE]),
        "gain": round(maintain * GOAL_FACTORS[Goal.GAIN]),
    }


def macros(weight_kg: float, calories: float) -> Dict[str, int]:
    protein = round(weight_kg * 2.2 * 1.2)
    fat = round(calories * 0.25 / 9)
    carbs = round((calories - protein * 4 - fat * 9) / 4)
    return {"protein": protein, "fat": fat, "carbs": carbs}


def water_intake_ml(weight_kg: float, activity: ActivityLevel) -> int:
    return round(weight_kg * 0.033 * WATER_FACTORS[activity] * 1000)


def water_glasses(ml: int) -> int:
    """Verres de 250 ml."""
    return round(ml / 250)


def calories_burned(activity: str, weight_kg: float, minutes: float) -> int:
    """KeyError si l'activité n'a pas de valeur MET connue."""
    return round(MET_VALUES[activity] * weight_kg * minutes / 60)
