from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from garage_rental.core.errors import BookingError, InternalError
from garage_rental.core.security import warn_if_default_secret
from garage_rental.core.logging import setup_logging
from garage_rental.db.base import Base, engine
from garage_rental.api.routes import auth
from garage_rental.api.routes import garages as garages_router
from garage_rental.api.routes import amenities as amenities_router
from garage_rental.api.routes import bookings as bookings_router
from garage_rental.api.routes import slots as slots_router
from garage_rental.api.routes import review as review_router
from garage_rental.api.routes import users as users_router
from garage_rental.api.routes import admin_dashboard as admin_dashboard_router


setup_logging()

app = FastAPI(title="Garage Rental API")


@app.on_event("startup")
def startup():
    warn_if_default_secret()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


@app.exception_handler(BookingError)
def booking_error_handler(request: Request, exc: BookingError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
def database_error_handler(request: Request, exc: SQLAlchemyError):
    # store details stay in the log, never in the response
    logger.opt(exception=exc).error(f"Database error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.get("/")
def root():
    return {"message": "Garage Rental API running"}


app.include_router(auth.router, prefix="/api/auth")
app.include_router(garages_router.router)
app.include_router(amenities_router.router)
app.include_router(bookings_router.router)
app.include_router(slots_router.router)
app.include_router(review_router.router)
app.include_router(users_router.router)
app.include_router(admin_dashboard_router.router)
