import logging
import time
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from weekwise.application.planner_service import PlannerService
from weekwise.consts import VERSION
from weekwise.domain.errors import InvalidSlotError
from weekwise.domain.schedule.geometry import format_hour_label, iter_week_slots
from weekwise.domain.schedule.models import Day, Slot, SlotType
from weekwise.domain.schedule.ports import SystemClock

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("weekwise.server")

_planner: PlannerService | None = None


def get_planner() -> PlannerService:
    """The process-wide planner, loaded from storage on first use."""
    global _planner
    if _planner is None:
        from weekwise.application.config import resolve_config
        from weekwise.application.factory import get_planner_service

        _planner = get_planner_service(resolve_config())
    return _planner


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"WeekWise Server v{VERSION} starting up...")
    yield
    # Shutdown
    logger.info("WeekWise Server shutting down...")


app = FastAPI(
    title="WeekWise Server",
    description="Local JSON API for the WeekWise single-page planner.",
    version=VERSION,
    lifespan=lifespan,
)


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float


class SlotRequest(BaseModel):
    type: SlotType = SlotType.EMPTY
    title: str = ""
    notes: str = ""


class SlotResponse(BaseModel):
    day: Day
    hour: int
    label: str
    type: SlotType
    title: str
    notes: str


class CountsResponse(BaseModel):
    study: int
    essential: int
    nonessential: int
    empty: int


class DayStatisticsResponse(BaseModel):
    day: Day
    counts: CountsResponse
    raw_score: int
    filled_count: int
    max_possible: int
    score: int
    total_slots: int


class WeekStatisticsResponse(BaseModel):
    total_counts: CountsResponse
    scores: list[int]
    avg_score: int
    filled_total: int
    days: list[DayStatisticsResponse]


class ScoreBarResponse(BaseModel):
    label: str
    value: int
    fraction: float


class MixSegmentResponse(BaseModel):
    slot_type: SlotType
    label: str
    value: int
    fraction: float


class ChartsResponse(BaseModel):
    score_bars: list[ScoreBarResponse]
    mix_segments: list[MixSegmentResponse]
    summary_cards: list[tuple[str, str]]


class GridCellResponse(BaseModel):
    hour: int
    label: str
    slot: SlotRequest
    is_now: bool


class DayColumnResponse(BaseModel):
    day: Day
    subtitle: str
    cells: list[GridCellResponse]
    is_today: bool


def _slot_response(day: Day, hour: int, slot: Slot) -> SlotResponse:
    return SlotResponse(
        day=day,
        hour=hour,
        label=format_hour_label(hour),
        type=slot.type,
        title=slot.title,
        notes=slot.notes,
    )


start_time = time.time()


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Simple health check to verify server is reachable.
    """
    return HealthResponse(status="ok", version=VERSION, uptime_seconds=time.time() - start_time)


@app.get("/version")
async def get_version():
    return {"version": VERSION}


@app.get("/slots", response_model=list[SlotResponse])
async def list_slots():
    """Every non-default slot in the week, Monday first."""
    planner = get_planner()
    result = []
    for day, hour in iter_week_slots():
        slot = planner.get_slot(day, hour)
        if not slot.is_default:
            result.append(_slot_response(day, hour, slot))
    return result


@app.get("/slots/{day}/{hour}", response_model=SlotResponse)
async def get_slot(day: Day, hour: int):
    try:
        slot = get_planner().get_slot(day, hour)
    except InvalidSlotError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _slot_response(day, hour, slot)


@app.put("/slots/{day}/{hour}", response_model=SlotResponse)
async def put_slot(day: Day, hour: int, req: SlotRequest):
    """
    Save a slot. An empty type with blank title and notes removes the entry.
    """
    try:
        slot = get_planner().set_slot(day, hour, req.type, title=req.title, notes=req.notes)
    except InvalidSlotError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.info(f"Saved {day.value} {hour}: {slot.type.value}")
    return _slot_response(day, hour, slot)


@app.delete("/slots/{day}/{hour}")
async def delete_slot(day: Day, hour: int):
    try:
        get_planner().delete_slot(day, hour)
    except InvalidSlotError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"ok": True}


@app.delete("/slots")
async def clear_slots():
    """Wipe the whole week."""
    get_planner().clear()
    return {"ok": True}


@app.get("/stats/days/{day}", response_model=DayStatisticsResponse)
async def day_stats(day: Day):
    return DayStatisticsResponse.model_validate(asdict(get_planner().day_statistics(day)))


@app.get("/stats/week", response_model=WeekStatisticsResponse)
async def week_stats():
    try:
        week = get_planner().week_statistics()
        return WeekStatisticsResponse.model_validate(asdict(week))
    except Exception as e:
        logger.error(f"Week stats failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/stats/charts", response_model=ChartsResponse)
async def charts():
    return ChartsResponse.model_validate(asdict(get_planner().charts()))


@app.get("/grid", response_model=list[DayColumnResponse])
async def grid():
    """
    The editable grid with the current day and hour flagged.
    """
    columns = get_planner().grid(now=SystemClock().now())
    return [DayColumnResponse.model_validate(asdict(column)) for column in columns]
