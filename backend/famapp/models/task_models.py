# backend/famapp/models/task_models.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from famapp.models.trip_models import TripProfile


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class TaskIntelligence(BaseModel):
    reasoning: str       # why this task was suggested
    source: str          # which rule / data source triggered it


class SmartTask(BaseModel):
    id: str
    title: str
    subtitle: str
    category: str
    status: TaskStatus = TaskStatus.INCOMPLETE
    urgent: bool = False
    is_custom: bool = False
    priority: Priority
    days_before_trip: Optional[int] = Field(default=None, ge=0)   # reminder threshold
    intelligence: TaskIntelligence


# ----------------------------------------------------------
# API PAYLOADS
# ----------------------------------------------------------
class TaskGenerationRequest(BaseModel):
    trip: TripProfile
    days_until_trip: Optional[int] = None


class TaskGenerationResponse(BaseModel):
    tasks: List[SmartTask]
    count: int
    days_until_trip: int


class CacheStats(BaseModel):
    total_entries: int
    weather_entries: int
    holiday_entries: int
    country_entries: int
    expired_entries: int
