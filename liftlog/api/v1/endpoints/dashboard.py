"""Dashboard endpoint: a selected day with display-ready workout summaries."""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.api.v1.endpoints.workouts import NO_STORE, resolve_day
from liftlog.core.config import get_settings
from liftlog.core.dates import format_date_with_ordinal
from liftlog.db.session import get_db
from liftlog.schemas.dashboard import DashboardRead
from liftlog.services.identity import get_current_user_id
from liftlog.services.workout_queries import WorkoutQueryService
from liftlog.services.workout_summary import summarize_workout

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def get_dashboard(
    response: Response,
    date_param: str | None = Query(None, alias="date", description="YYYY-MM-DD; defaults to today"),
    tz: str | None = Query(None, description="IANA time zone for the day boundary"),
    user_id: int | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Echo the selected date and summarize each workout logged on it."""
    day, zone = resolve_day(date_param, tz)
    unit = get_settings().weight_unit
    workouts = await WorkoutQueryService(db).get_workouts_for_date(user_id, day, zone)
    response.headers["Cache-Control"] = NO_STORE
    return DashboardRead(
        selected_date=day,
        selected_date_display=format_date_with_ordinal(day),
        timezone=zone.key,
        workouts=[summarize_workout(w, zone, unit) for w in workouts],
    )
