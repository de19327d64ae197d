# garage_rental/core/config.py
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./garage_rental.db")

DEFAULT_SECRET_KEY = "change-me-in-production-set-a-long-random-secret"
SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))  # 1 day

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# legacy listings were priced per day; a month is billed as 30 days
LEGACY_DAYS_PER_MONTH = 30
