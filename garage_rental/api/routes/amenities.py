# garage_rental/api/routes/amenities.py
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.orm import Session

from garage_rental.db.base import get_db
from garage_rental.db.models.amenity import Amenity
from garage_rental.db.models.user import User
from garage_rental.schemas.amenity import AmenityCreate, AmenityResponse
from garage_rental.core.security import require_admin

router = APIRouter(prefix="/amenities", tags=["amenities"])


@router.get("", response_model=list[AmenityResponse])
def list_amenities(db: Session = Depends(get_db)):
    return db.query(Amenity).order_by(Amenity.name).all()


@router.post("", response_model=AmenityResponse)
def create_amenity(
    payload: AmenityCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")

    existing = db.query(Amenity).filter(Amenity.name == name).first()
    if existing:
        raise HTTPException(status_code=400, detail="Amenity with this name already exists")

    amenity = Amenity(name=name, description=payload.description)
    db.add(amenity)
    db.commit()
    db.refresh(amenity)

    logger.info(f"Amenity created: id={amenity.id} name={amenity.name!r}")
    return amenity
