import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from garage_rental.main import app
from garage_rental.db.base import Base, get_db
from garage_rental.db.models.booking import Booking
from garage_rental.db.models.garage import Garage
from garage_rental.db.models.user import User
from garage_rental.core.security import hash_password, token_for_user


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email, name="Someone", role="user", password="secret123"):
    user = User(
        email=email,
        name=name,
        role=role,
        password_hash=hash_password(password) if password else None,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_garage(db, title="Kuta Garage Space", price_per_month=100.0, slot=2, **kwargs):
    garage = Garage(
        title=title,
        location=kwargs.pop("location", "Kuta, Bali"),
        price_per_month=price_per_month,
        slot=slot,
        **kwargs,
    )
    db.add(garage)
    db.commit()
    db.refresh(garage)
    return garage


def make_booking(db, user, garage, start, end, status="approved", total_price=100.0):
    booking = Booking(
        user_id=user.id,
        garage_id=garage.id,
        start_date=start,
        end_date=end,
        status=status,
        total_price=total_price,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def auth_headers(user):
    return {"Authorization": f"Bearer {token_for_user(user)}"}


@pytest.fixture
def admin(db):
    return make_user(db, "admin@example.com", name="Admin User", role="admin", password="admin123")


@pytest.fixture
def user(db):
    return make_user(db, "user@example.com", name="Regular User", password="user123")


@pytest.fixture
def other_user(db):
    return make_user(db, "other@example.com", name="Other User")


@pytest.fixture
def garage(db):
    return make_garage(db)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def march():
    return date(2024, 3, 1), date(2024, 3, 31)
