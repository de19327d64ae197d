from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from sqlalchemy.orm import Session
from typing import Optional

from garage_rental.db.base import get_db
from garage_rental.db.models.booking import Booking
from garage_rental.db.models.user import User
from garage_rental.schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from garage_rental.core.security import get_actor, require_admin
from garage_rental.services import lifecycle
from garage_rental.services.lifecycle import Actor

router = APIRouter(prefix="/bookings", tags=["bookings"])


# Admin views all bookings

@router.get("", response_model=list[BookingResponse])
def list_bookings(
    status: Optional[str] = Query(None),
    garage_id: Optional[int] = Query(None, alias="garageId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    q = db.query(Booking)
    if status:
        q = q.filter(Booking.status == lifecycle.parse_status(status).value)
    if garage_id:
        q = q.filter(Booking.garage_id == garage_id)
    return q.order_by(Booking.created_at.desc(), Booking.id.desc()).all()


# User (or admin on a customer's behalf) creates booking

@router.post("", response_model=BookingResponse)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    return lifecycle.create_booking(db, actor, booking)


# User views their bookings

@router.get("/user", response_model=list[BookingResponse])
def my_bookings(
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    bookings = db.query(Booking).filter(
        Booking.user_id == actor.user_id
    ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    return bookings


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    return lifecycle.get_booking_for(db, actor, booking_id)


# Admin approves / rejects / removes booking

@router.patch("/{booking_id}", response_model=BookingResponse)
def update_booking_status(
    booking_id: int,
    payload: BookingUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    return lifecycle.change_status(db, actor, booking_id, payload.status, payload.removed_reason)


# Admin hard-deletes booking

@router.delete("/{booking_id}")
def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")

    db.delete(booking)
    db.commit()

    logger.info(f"Booking deleted: id={booking_id} by admin={admin.id}")
    return {"success": True}
