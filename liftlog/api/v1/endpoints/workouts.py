"""Workout read endpoints, always scoped to the authenticated user."""

from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.constants import WORKOUT_NOT_FOUND
from liftlog.core.dates import InvalidDateError, parse_selected_date, resolve_timezone
from liftlog.db.session import get_db
from liftlog.schemas.workout import WorkoutCount, WorkoutRead
from liftlog.services.identity import get_current_user_id
from liftlog.services.workout_queries import WorkoutQueryService

logger = logging.getLogger(__name__)
router = APIRouter()

NO_STORE = "no-store"


def resolve_day(date_param: str | None, tz_param: str | None) -> tuple[date, ZoneInfo]:
    """Selected day and zone from query params; 422 on malformed input."""
    try:
        tz = resolve_timezone(tz_param)
        return parse_selected_date(date_param, tz), tz
    except InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=list[WorkoutRead])
async def list_workouts_for_date(
    response: Response,
    date_param: str | None = Query(None, alias="date", description="YYYY-MM-DD; defaults to today"),
    tz: str | None = Query(None, description="IANA time zone for the day boundary"),
    user_id: int | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Workouts on the selected local day, newest first, with exercises and sets in order."""
    day, zone = resolve_day(date_param, tz)
    response.headers["Cache-Control"] = NO_STORE
    return await WorkoutQueryService(db).get_workouts_for_date(user_id, day, zone)


@router.get("/count", response_model=WorkoutCount)
async def count_workouts(
    response: Response,
    start: datetime,
    end: datetime,
    tz: str | None = Query(None, description="Zone for bounds given without an offset"),
    user_id: int | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Number of workouts with start <= date <= end. Bounds are used as given."""
    try:
        zone = resolve_timezone(tz)
    except InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if start.tzinfo is None:
        start = start.replace(tzinfo=zone)
    if end.tzinfo is None:
        end = end.replace(tzinfo=zone)
    if start > end:
        raise HTTPException(status_code=422, detail="start must not be after end")
    response.headers["Cache-Control"] = NO_STORE
    count = await WorkoutQueryService(db).get_workout_count(user_id, start, end)
    return WorkoutCount(count=count)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    response: Response,
    workout_id: int = Path(..., ge=1, le=2**31 - 1),
    user_id: int | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """A single workout. Missing and not-owned are the same 404."""
    workout = await WorkoutQueryService(db).get_workout_by_id(user_id, workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail=WORKOUT_NOT_FOUND)
    response.headers["Cache-Control"] = NO_STORE
    return workout
