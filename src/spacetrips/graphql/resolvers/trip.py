from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger

if TYPE_CHECKING:
    from ..context import RequestContext
    from ..types.launch import TripUpdateResponse

logger = get_logger(__name__)

BOOKED_MESSAGE = "trips booked successfully"
CANCELLED_MESSAGE = "trip cancelled"
CANCEL_FAILED_MESSAGE = "failed to cancel trip"


def parse_launch_id(value: Any) -> int | None:
    """Convert a GraphQL launch ID to a flight number, or None if it is not numeric."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _booking_failed_message(failed_ids: Sequence[Any]) -> str:
    if not failed_ids:
        return "trips could not be booked"
    return "the following launches couldn't be booked: " + ", ".join(
        str(launch_id) for launch_id in failed_ids
    )


async def book_trips(info: strawberry.Info, launch_ids: Sequence[Any]) -> TripUpdateResponse:
    """
    Book the current user onto each launch.

    Booking is best-effort per launch: launches that were booked stay booked
    when others fail, and the response lists whichever launches succeeded.
    """
    from ..types.launch import Launch as LaunchType
    from ..types.launch import TripUpdateResponse as TripUpdateResponseType

    context: RequestContext = info.context

    parsed = [parse_launch_id(launch_id) for launch_id in launch_ids]
    bookable = [launch_id for launch_id in parsed if launch_id is not None]

    trips = await context.user_api.book_trips(bookable) if bookable else []
    booked_ids = [trip.launch_id for trip in trips]
    launches = await context.launch_api.get_launches_by_ids(booked_ids) if booked_ids else []

    success = bool(trips) and len(trips) == len(launch_ids)
    if success:
        message = BOOKED_MESSAGE
    else:
        failed_ids = [
            raw
            for raw, launch_id in zip(launch_ids, parsed, strict=True)
            if launch_id is None or launch_id not in booked_ids
        ]
        message = _booking_failed_message(failed_ids)
        logger.info("Booking incomplete", requested=len(launch_ids), booked=len(trips))

    return TripUpdateResponseType(
        success=success,
        message=message,
        launches=[LaunchType.from_model(launch) for launch in launches],
    )


async def cancel_trip(info: strawberry.Info, launch_id: Any) -> TripUpdateResponse:
    """Cancel the current user's trip on a launch."""
    from ..types.launch import Launch as LaunchType
    from ..types.launch import TripUpdateResponse as TripUpdateResponseType

    context: RequestContext = info.context

    parsed = parse_launch_id(launch_id)
    cancelled = parsed is not None and await context.user_api.cancel_trip(parsed)
    if not cancelled:
        return TripUpdateResponseType(success=False, message=CANCEL_FAILED_MESSAGE, launches=[])

    launch = await context.launch_api.get_launch_by_id(parsed)
    return TripUpdateResponseType(
        success=True,
        message=CANCELLED_MESSAGE,
        launches=[LaunchType.from_model(launch)] if launch is not None else [],
    )
