# garage_rental/api/routes/garages.py

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.orm import Session

from garage_rental.db.base import get_db
from garage_rental.db.models.amenity import Amenity
from garage_rental.db.models.booking import Booking
from garage_rental.db.models.garage import Garage
from garage_rental.db.models.user import User
from garage_rental.schemas.garage import (
    GarageAvailabilityUpdate,
    GarageCreate,
    GarageResponse,
    GarageUpdate,
)
from garage_rental.core.security import require_admin


router = APIRouter(prefix="/garages", tags=["garages"])


def _get_garage_or_404(db: Session, garage_id: int) -> Garage:
    garage = db.query(Garage).filter(Garage.id == garage_id).first()
    if not garage:
        raise HTTPException(status_code=404, detail="Garage not found")
    return garage


def _load_amenities(db: Session, amenity_ids: list[int]) -> list[Amenity]:
    if not amenity_ids:
        return []
    amenities = db.query(Amenity).filter(Amenity.id.in_(amenity_ids)).all()
    missing = set(amenity_ids) - {a.id for a in amenities}
    if missing:
        raise HTTPException(status_code=404, detail=f"Amenity not found: {sorted(missing)}")
    return amenities


# Public listing

@router.get("", response_model=list[GarageResponse])
def list_garages(db: Session = Depends(get_db)):
    return db.query(Garage).order_by(Garage.id).all()


@router.get("/{garage_id}", response_model=GarageResponse)
def get_garage(garage_id: int, db: Session = Depends(get_db)):
    return _get_garage_or_404(db, garage_id)


# Admin creates garage

@router.post("", response_model=GarageResponse)
def create_garage(
    garage_data: GarageCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    amenities = _load_amenities(db, garage_data.amenities)

    garage = Garage(
        title=garage_data.title,
        location=garage_data.location,
        description=garage_data.description,
        price_per_month=garage_data.price_per_month,
        slot=garage_data.slot,
        is_available=garage_data.is_available if garage_data.is_available is not None else True,
        images=garage_data.images,
        amenities=amenities,
    )

    db.add(garage)
    db.commit()
    db.refresh(garage)

    logger.info(f"Garage created: id={garage.id} by admin={admin.id}")
    return garage


# Admin updates garage

@router.patch("/{garage_id}", response_model=GarageResponse)
def update_garage(
    garage_id: int,
    update_data: GarageUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    garage = _get_garage_or_404(db, garage_id)

    fields = update_data.model_dump(exclude_unset=True)
    amenity_ids = fields.pop("amenities", None)

    # Update fields one-by-one
    for field, value in fields.items():
        setattr(garage, field, value)
    if "price_per_month" in fields:
        garage.price_per_day = None

    # amenity links are replaced wholesale when given
    if amenity_ids is not None:
        garage.amenities = _load_amenities(db, amenity_ids)

    db.commit()
    db.refresh(garage)

    logger.info(f"Garage updated: id={garage.id} fields={sorted(fields)} by admin={admin.id}")
    return garage


@router.patch("/{garage_id}/availability", response_model=GarageResponse)
def set_garage_availability(
    garage_id: int,
    payload: GarageAvailabilityUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    garage = _get_garage_or_404(db, garage_id)
    garage.is_available = payload.is_available
    db.commit()
    db.refresh(garage)

    logger.info(f"Garage {garage.id} {'enabled' if garage.is_available else 'disabled'} by admin={admin.id}")
    return garage


# Admin deletes garage

@router.delete("/{garage_id}")
def delete_garage(
    garage_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    garage = _get_garage_or_404(db, garage_id)

    referenced = db.query(Booking.id).filter(Booking.garage_id == garage.id).first()
    if referenced:
        raise HTTPException(status_code=400, detail="Garage has bookings and cannot be deleted")

    garage.amenities = []
    db.delete(garage)
    db.commit()

    logger.info(f"Garage deleted: id={garage_id} by admin={admin.id}")
    return {"success": True}
