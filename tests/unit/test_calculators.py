import pytest

from gym_backend.tools import calculators as calc
from gym_backend.tools.calculators import ActivityLevel, Gender, Goal


def test_bmi_and_category():
    assert calc.bmi(70, 175) == 22.9
    assert calc.bmi_category(18.4) == "Underweight"
    assert calc.bmi_category(22.9) == "Normal weight"
    assert calc.bmi_category(27) == "Overweight"
    assert calc.bmi_category(30) == "Obese"


def test_body_fat_is_clamped():
    assert calc.body_fat(70, 175, 30, Gender.MALE) == pytest.approx(18.2)
    assert calc.body_fat(30, 190, 10, Gender.MALE) == 0.0
    assert calc.body_fat(200, 150, 90, Gender.FEMALE) == 50.0


def test_ideal_weight():
    assert calc.ideal_weight(180, Gender.MALE) == 71.3
    assert calc.ideal_weight(165, Gender.FEMALE) == 57.2


def test_bmr_mifflin_st_jeor():
    assert calc.bmr(70, 175, 30, Gender.MALE) == pytest.approx(1648.75)
    assert calc.bmr(60, 165, 30, Gender.FEMALE) == pytest.approx(1320.25)


def test_tdee_goals_and_daily_calories():
    base = calc.bmr(70, 175, 30, Gender.MALE) * 1.55
    assert calc.tdee(70, 175, 30, Gender.MALE, ActivityLevel.MODERATE) == pytest.approx(base)
    assert calc.tdee(70, 175, 30, Gender.MALE, ActivityLevel.MODERATE, Goal.LOSE) == pytest.approx(base * 0.85)
    daily = calc.daily_calories(70, 175, 30, Gender.MALE, ActivityLevel.MODERATE)
    assert daily["maintain"] == 2556
    assert daily["lose"] == round(2556 * 0.85)
    assert daily["gain"] == round(2556 * 1.15)


def test_macros_split():
    m = calc.macros(70, 2000)
    assert m == {"protein": 185, "fat": 56, "carbs": 189}


def test_water_and_calories_burned():
    assert calc.water_intake_ml(70, ActivityLevel.SEDENTARY) == 2310
    assert calc.water_glasses(2310) == 9
    assert calc.calories_burned("running", 60, 60) == 498
    with pytest.raises(KeyError):
        calc.calories_burned("chess", 70, 30)
