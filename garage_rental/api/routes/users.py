# garage_rental/api/routes/users.py
from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.orm import Session
from typing import Optional, List

from garage_rental.db.base import get_db
from garage_rental.db.models.user import User
from garage_rental.schemas.user import NonLoginUserCreate, UserIdResponse, UserListItem
from garage_rental.core.security import require_admin

router = APIRouter(prefix="/users", tags=["users"])


# -------------------------
# List users (admin)
# -------------------------
@router.get("", response_model=List[UserListItem])
def list_users(
    role: Optional[str] = Query(None, description="user/admin"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    q = db.query(User)
    if role:
        q = q.filter(User.role == role)
    return q.order_by(User.name).all()


# --------------------------------------------------
# Create a customer who books through an admin
# --------------------------------------------------
@router.post("", response_model=UserIdResponse)
def create_user(
    payload: NonLoginUserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    # same email -> reuse the existing customer
    existing = db.query(User).filter(User.email == payload.email).first()
    if existing:
        return existing

    user = User(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        category=payload.category,
        password_hash=None,
        role="user",
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Non-login user created: id={user.id} by admin={admin.id}")
    return user
