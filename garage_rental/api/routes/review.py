# garage_rental/api/routes/review.py
from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from sqlalchemy.orm import Session
from typing import List, Optional

from garage_rental.db.base import get_db
from garage_rental.db.models.garage import Garage
from garage_rental.db.models.review import Review
from garage_rental.db.models.user import User
from garage_rental.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from garage_rental.core.security import get_current_user

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _get_review_or_404(db: Session, review_id: int) -> Review:
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


# List reviews (public)
@router.get("", response_model=List[ReviewResponse])
def list_reviews(
    garage_id: Optional[int] = Query(None, alias="garageId"),
    db: Session = Depends(get_db),
):
    q = db.query(Review)
    if garage_id:
        q = q.filter(Review.garage_id == garage_id)
    return q.order_by(Review.created_at.desc(), Review.id.desc()).all()


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(review_id: int, db: Session = Depends(get_db)):
    return _get_review_or_404(db, review_id)


# Create review (any signed-in user)
# Booking completion is only checked by the UI; the API accepts any authenticated review.
@router.post("", response_model=ReviewResponse)
def create_review(
    review_in: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    garage = db.query(Garage).filter(Garage.id == review_in.garage_id).first()
    if not garage:
        raise HTTPException(status_code=404, detail="Garage not found")

    review = Review(
        user_id=current_user.id,
        garage_id=garage.id,
        rating=review_in.rating,
        comment=review_in.comment,
    )

    db.add(review)
    db.commit()
    db.refresh(review)

    logger.info(f"Review created: id={review.id} garage={garage.id} user={current_user.id}")
    return review


# Author edits their review
@router.patch("/{review_id}", response_model=ReviewResponse)
def update_review(
    review_id: int,
    review_in: ReviewUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    review = db.query(Review).filter(
        Review.id == review_id, Review.user_id == current_user.id
    ).first()
    if not review:
        raise HTTPException(status_code=404, detail="Review not found or unauthorized")

    fields = review_in.model_dump(exclude_unset=True)
    if fields.get("rating") is None:
        fields.pop("rating", None)
    for field, value in fields.items():
        setattr(review, field, value)

    db.commit()
    db.refresh(review)
    return review


# Author or admin deletes a review
@router.delete("/{review_id}")
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    review = _get_review_or_404(db, review_id)
    if review.user_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Not your review")

    db.delete(review)
    db.commit()

    logger.info(f"Review deleted: id={review_id} by user={current_user.id}")
    return {"success": True}
