# backend/famapp/api/routes_tasks.py

from fastapi import APIRouter

from famapp.agents.smart_task_generator import SmartTaskGenerator
from famapp.core.config_loader import settings
from famapp.core.logger import logger
from famapp.models.task_models import CacheStats, TaskGenerationRequest, TaskGenerationResponse
from famapp.services.external_data_service import ExternalDataService
from famapp.utils.time_utils import days_until

router = APIRouter(prefix="/tasks", tags=["tasks"])

external_data = ExternalDataService()
generator = SmartTaskGenerator(external_data=external_data)


def _resolve_days(req: TaskGenerationRequest) -> int:
    if req.days_until_trip is not None:
        return max(0, req.days_until_trip)
    if req.trip.start_date is not None:
        return days_until(req.trip.start_date)
    return settings.default_days_until_trip


# --------------------------
# Task generation
# --------------------------
@router.post("/generate", response_model=TaskGenerationResponse)
async def generate_tasks(req: TaskGenerationRequest):
    days = _resolve_days(req)
    tasks = await generator.generate_tasks(req.trip, days)
    return TaskGenerationResponse(tasks=tasks, count=len(tasks), days_until_trip=days)


# --------------------------
# Cache maintenance
# --------------------------
@router.get("/cache/stats", response_model=CacheStats)
def cache_stats():
    return CacheStats(**external_data.get_cache_stats())


@router.post("/cache/cleanup")
def cache_cleanup():
    removed = external_data.cleanup_cache()
    return {"removed": removed}


@router.delete("/cache")
def cache_clear():
    external_data.clear_cache()
    logger.info("External data cache cleared")
    return {"status": "cleared"}
