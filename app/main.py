import logging
from datetime import datetime
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.database import create_db_and_tables
from app.api import auth, dashboard, investments, users
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("app")

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("Altfolio API lista")
    yield

app = FastAPI(title="Altfolio API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(investments.router)
app.include_router(dashboard.router)
app.include_router(users.router)

# Errores inesperados: se registran completos pero no se exponen al cliente
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Error interno del servidor"})

@app.get("/")
def root():
    return {"message": "Altfolio API en ejecución"}

@app.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.utcnow().isoformat()}
