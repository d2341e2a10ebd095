"""Interval Routes — POST/GET endpoints for calendar-aligned interval generation.

Invariants:
    - Both verbs accept the same IntervalRequest fields (JSON body vs. query string)
    - Routes never contain calendar logic (delegate to interval_service)
    - All returned datetimes are UTC

Design Decisions:
    - Settings injected via Depends(get_settings): tests override defaults per client
    - GET kept for cacheable, link-shareable requests; POST for programmatic clients
"""

import logging
from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from chrono_intervals.config import Settings, get_settings
from chrono_intervals.schemas.intervals import (
    IntervalOut, IntervalRequest, IntervalResponse,
)
from chrono_intervals.services.interval_service import generate_intervals

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/intervals", tags=["intervals"])


@router.post("", response_model=IntervalResponse)
async def create_intervals(
    body: IntervalRequest, settings: Settings = Depends(get_settings),
):
    """Generate intervals from a JSON body."""
    return _respond(body, settings)


@router.get("", response_model=IntervalResponse)
async def list_intervals(
    params: Annotated[IntervalRequest, Query()],
    settings: Settings = Depends(get_settings),
):
    """Generate intervals from query parameters."""
    return _respond(params, settings)


def _respond(request: IntervalRequest, settings: Settings) -> IntervalResponse:
    config, intervals = generate_intervals(request, settings)
    return IntervalResponse(
        grouping=config.grouping,
        offset_west_secs=config.offset_west_secs,
        precision_us=config.precision // timedelta(microseconds=1),
        extend_begin=config.extend_begin,
        extend_end=config.extend_end,
        count=len(intervals),
        intervals=[IntervalOut(start=i.start, end=i.end) for i in intervals],
    )
