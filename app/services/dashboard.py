# app/services/dashboard.py

import logging
import random
from typing import Optional, Union
from uuid import UUID

from sqlmodel import Session

from app.core.config import MAX_AMOUNT
from app.core.exceptions import Forbidden, ValidationError
from app.models.user import User
from app.schemas.portfolio import (
    DashboardResponse,
    PerformanceResponse,
    RandomSimulationResponse,
    SimulationResult,
)
from app.services.investments import load_readable, to_investment_reads, visible_active_investments
from app.services.portfolio_metrics import (
    allocation_by_type,
    performance_breakdown,
    portfolio_totals,
    recent_investments,
    simulate_random_changes,
    simulate_value_change,
    top_performers,
)

logger = logging.getLogger(__name__)


def dashboard(session: Session, actor: User, limit: int = 5) -> DashboardResponse:
    investments = visible_active_investments(session, actor)
    return DashboardResponse(
        summary=portfolio_totals(investments),
        allocation=allocation_by_type(investments),
        recent_investments=to_investment_reads(session, recent_investments(investments, limit)),
        top_performers=to_investment_reads(session, top_performers(investments, limit)),
    )


def performance(session: Session, actor: User) -> PerformanceResponse:
    investments = visible_active_investments(session, actor)
    return PerformanceResponse(
        summary=portfolio_totals(investments),
        performance=performance_breakdown(investments),
    )


def simulate(
    session: Session,
    actor: User,
    investment_id: Union[UUID, str],
    new_value: float,
    simulation_type: Optional[str] = None,
) -> SimulationResult:
    if new_value is None or new_value < 0 or new_value > MAX_AMOUNT:
        raise ValidationError([{"field": "new_value", "message": "El nuevo valor debe estar entre 0 y 1,000 millones"}])

    investment = load_readable(session, actor, investment_id)
    return simulate_value_change(investment, new_value, simulation_type)


def simulate_portfolio(session: Session, actor: User, rng: random.Random) -> RandomSimulationResponse:
    """Simulación aleatoria (±5%) sobre todo el portafolio visible. Solo admin."""
    if not actor.is_admin:
        raise Forbidden("Las simulaciones de portafolio solo están disponibles para administradores.")

    investments = visible_active_investments(session, actor)
    logger.info("Simulación aleatoria sobre %d inversiones por %s", len(investments), actor.email)
    return simulate_random_changes(investments, rng)
