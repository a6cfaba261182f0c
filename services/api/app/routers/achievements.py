from fastapi import APIRouter

from app.achievements import ACHIEVEMENTS, Category, achievements_by_category, earned_achievements
from app.models import EvaluateAchievementsRequest, EvaluateAchievementsResult

router = APIRouter()


@router.get("/achievements")
def list_achievements(category: Category | None = None):
    catalog = achievements_by_category(category) if category else ACHIEVEMENTS
    return [a.to_dict() for a in catalog]


@router.post("/achievements/evaluate", response_model=EvaluateAchievementsResult)
def evaluate(payload: EvaluateAchievementsRequest):
    return EvaluateAchievementsResult(earned=earned_achievements(payload.metrics, payload.category))
