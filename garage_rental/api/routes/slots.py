# garage_rental/api/routes/slots.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from garage_rental.db.base import get_db
from garage_rental.db.models.garage import Garage
from garage_rental.schemas.garage import GarageResponse, GarageSlotsResponse
from garage_rental.services import availability, pricing

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("", response_model=List[GarageSlotsResponse])
def get_slots(
    start_date: str = Query(..., alias="startDate", description="YYYY-MM-DD"),
    end_date: str = Query(..., alias="endDate", description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
):
    """
    Every garage with the number of pending/approved bookings touching
    [startDate, endDate] and the slots still free in that window.
    """
    query_start = pricing.parse_iso_date(start_date, "startDate")
    query_end = pricing.parse_iso_date(end_date, "endDate")
    if query_end < query_start:
        raise HTTPException(status_code=400, detail="endDate must be on or after startDate")

    garages = db.query(Garage).order_by(Garage.id).all()
    bookings = availability.active_bookings_query(db, query_start, query_end).all()

    result = []
    for g in garages:
        active = availability.active_booking_count(g, bookings, query_start, query_end)
        left = availability.slots_left(g, active)
        base = GarageResponse.model_validate(g).model_dump()
        result.append(GarageSlotsResponse(
            **base,
            active_bookings=active,
            slots_left=left,
            bookable=availability.is_bookable(g, left),
        ))
    return result
