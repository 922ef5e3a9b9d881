"""Calculateurs exposés en API (entrées validées par pydantic, 422 sinon)."""
from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from gym_backend.errors import ValidationError
from gym_backend.tools import calculators as calc
from gym_backend.tools.calculators import ActivityLevel, Gender, Goal

router = APIRouter(prefix="/api/v1/tools", tags=["Tools API"])


class BodyIn(BaseModel):
    weight: float = Field(gt=0, le=500)
    height: float = Field(gt=0, le=300)


class ProfileIn(BodyIn):
    age: int = Field(gt=0, le=120)
    gender: Gender


class CaloriesIn(ProfileIn):
    activity: ActivityLevel = ActivityLevel.MODERATE
    goal: Goal = Goal.MAINTAIN


class WaterIn(BaseModel):
    weight: float = Field(gt=0, le=500)
    activity: ActivityLevel = ActivityLevel.MODERATE


class BurnIn(BaseModel):
    activity: str
    weight: float = Field(gt=0, le=500)
    minutes: float = Field(gt=0, le=1440)

    @field_validator("activity")
    @classmethod
    def _lower(cls, v: str) -> str:
        return v.strip().lower()


@router.post("/bmi")
def bmi(body: BodyIn):
    value = calc.bmi(body.weight, body.height)
    return {"bmi": value, "category": calc.bmi_category(value)}

@router.post("/body-fat")
def body_fat(body: ProfileIn):
    return {"body_fat": calc.body_fat(body.weight, body.height, body.age, body.gender)}

@router.post("/ideal-weight")
def ideal_weight(body: ProfileIn):
    return {"ideal_weight": calc.ideal_weight(body.height, body.gender)}

@router.post("/calories")
def calories(body: CaloriesIn):
    """BMR, besoins journaliers ajustés à l'objectif et répartition des macros."""
    target = calc.tdee(body.weight, body.height, body.age, body.gender, body.activity, body.goal)
    return {
        "bmr": round(calc.bmr(body.weight, body.height, body.age, body.gender)),
        "calories": calc.daily_calories(body.weight, body.height, body.age, body.gender, body.activity),
        "tdee": round(target),
        "macros": calc.macros(body.weight, target),
    }

@router.post("/water")
def water(body: WaterIn):
    ml = calc.water_intake_ml(body.weight, body.activity)
    return {"water_ml": ml, "glasses": calc.water_glasses(ml)}

@router.post("/calories-burned")
def calories_burned(body: BurnIn):
    if body.activity not in calc.MET_VALUES:
        raise ValidationError(f"Unknown activity: {body.activity}", fields={"activity": "Unknown activity"})
    return {"calories_burned": calc.calories_burned(body.activity, body.weight, body.minutes)}

@router.get("/activities")
def activities():
    return {"activities": sorted(calc.MET_VALUES)}
