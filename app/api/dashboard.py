# app/api/dashboard.py

import random
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.config import SIMULATION_SEED
from app.database import get_session
from app.core.security import get_current_user
from app.models.user import User
from app.schemas.portfolio import (
    DashboardResponse,
    PerformanceResponse,
    RandomSimulationResponse,
    SimulationRequest,
    SimulationResult,
)
from app.services import dashboard as service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_simulation_rng() -> random.Random:
    return random.Random(SIMULATION_SEED)


@router.get("", response_model=DashboardResponse)
@router.get("/", response_model=DashboardResponse)
def get_dashboard(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.dashboard(session, user)


@router.get("/performance", response_model=PerformanceResponse)
def get_performance(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.performance(session, user)


@router.post("/simulate", response_model=SimulationResult)
def simulate_investment(
    payload: SimulationRequest,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.simulate(session, user, payload.investment_id, payload.new_value, payload.simulation_type)


@router.post("/simulate/random", response_model=RandomSimulationResponse)
def simulate_portfolio(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
    rng: random.Random = Depends(get_simulation_rng),
):
    return service.simulate_portfolio(session, user, rng)
