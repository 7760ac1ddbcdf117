"""Schedule router - FastAPI endpoints for schedule operations"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import (
    MessageResponse,
    ScheduleCreate,
    ScheduleCreatedResponse,
    ScheduleResponse,
)
from .service import ScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedules", tags=["Schedules"])


def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db)


@router.get("", response_model=list[ScheduleResponse])
def get_schedules(service: ScheduleService = Depends(get_schedule_service)):
    """Get all schedules"""
    return service.get_schedules()


@router.post("", response_model=ScheduleCreatedResponse, status_code=201)
def create_schedule(
    data: ScheduleCreate,
    service: ScheduleService = Depends(get_schedule_service),
):
    """Create a new schedule"""
    schedule_id = service.create_schedule(data)
    return ScheduleCreatedResponse(message="Schedule added successfully!", id=schedule_id)


@router.put("/{schedule_id}", response_model=MessageResponse)
def update_schedule(
    schedule_id: int,
    payload: Any = Body(None),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Update a schedule's NUMBER_OF_DAYS"""
    service.update_number_of_days(schedule_id, payload)
    return MessageResponse(message="Schedule updated successfully!")


@router.delete("/{schedule_id}", response_model=MessageResponse)
def delete_schedule(
    schedule_id: int,
    service: ScheduleService = Depends(get_schedule_service),
):
    """Delete a schedule"""
    service.delete_schedule(schedule_id)
    return MessageResponse(message="Schedule deleted successfully!")


__all__ = [
    "router",
    "get_schedules",
    "create_schedule",
    "update_schedule",
    "delete_schedule",
]
