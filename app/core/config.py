import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno

# Base de datos
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./altfolio.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# JWT
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))  # 24h

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

_seed = os.getenv("SIMULATION_SEED")
SIMULATION_SEED: Optional[int] = int(_seed) if _seed else None

# Reglas de negocio
MAX_AMOUNT = 1_000_000_000  # límite universal para montos
NON_ADMIN_INVESTMENT_CAP = 1_000_000  # tope para usuarios no admin
ASSET_NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
NOTES_MAX_LENGTH = 1000
USER_NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
