from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.orm import Session

from garage_rental.db.base import get_db
from garage_rental.db.models.user import User
from garage_rental.schemas.user import LoginRequest, TokenResponse, UserCreate, UserResponse
from garage_rental.core.security import get_current_user, hash_password, token_for_user, verify_password

router = APIRouter(tags=["auth"])


def _authenticate(db: Session, email: str, password: str, admin_only: bool = False) -> User:
    q = db.query(User).filter(User.email == email)
    if admin_only:
        q = q.filter(User.role == "admin")
    user = q.first()

    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for {email}")
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return user


@router.post("/register", response_model=UserResponse)
def register(user: UserCreate, db: Session = Depends(get_db)):
    existing = db.query(User).filter(User.email == user.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = User(
        email=user.email,
        name=user.name,
        phone=user.phone,
        password_hash=hash_password(user.password),
        role="user",
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"User registered: id={new_user.id}")
    return new_user


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = _authenticate(db, credentials.email, credentials.password)
    return TokenResponse(access_token=token_for_user(user), user=UserResponse.model_validate(user))


@router.post("/admin/login", response_model=TokenResponse)
def admin_login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = _authenticate(db, credentials.email, credentials.password, admin_only=True)
    logger.info(f"Admin logged in: id={user.id}")
    return TokenResponse(access_token=token_for_user(user), user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
