# app/services/portfolio_metrics.py
"""
Métricas y agregados del portafolio.

Estas funciones asumen que las inversiones ya vienen filtradas (activas y
visibles para quien consulta); aquí no se aplica ninguna regla de acceso.
"""

import random
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from app.schemas.portfolio import (
    AllocationEntry,
    InvestmentMetrics,
    PerformanceBreakdown,
    PerformerRead,
    PortfolioImpact,
    PortfolioTotals,
    RandomSimulationItem,
    RandomSimulationResponse,
    SimulationResult,
)

SIMULATION_RANGE = 0.05  # ±5%


def compute_roi(invested_amount: float, current_value: float) -> float:
    if invested_amount == 0:
        return 0.0
    return (current_value - invested_amount) / invested_amount * 100


def compute_metrics(investment) -> InvestmentMetrics:
    return InvestmentMetrics(
        roi=compute_roi(investment.invested_amount, investment.current_value),
        absolute_gain=investment.current_value - investment.invested_amount,
    )


def portfolio_totals(investments: Iterable) -> PortfolioTotals:
    total_invested = 0.0
    total_current_value = 0.0
    total_gain = 0.0
    count = 0

    for inv in investments:
        total_invested += inv.invested_amount
        total_current_value += inv.current_value
        total_gain += inv.current_value - inv.invested_amount
        count += 1

    total_roi = (total_gain / total_invested * 100) if total_invested > 0 else 0.0

    return PortfolioTotals(
        total_invested=total_invested,
        total_current_value=total_current_value,
        total_gain=total_gain,
        total_roi=total_roi,
        investment_count=count,
    )


def allocation_by_type(investments: Iterable) -> List[AllocationEntry]:
    """Agrupa por tipo de activo, ordenado por valor actual descendente."""
    groups: Dict = defaultdict(lambda: {"invested": 0.0, "current": 0.0, "count": 0})

    for inv in investments:
        group = groups[inv.asset_type]
        group["invested"] += inv.invested_amount
        group["current"] += inv.current_value
        group["count"] += 1

    entries = [
        AllocationEntry(
            asset_type=asset_type,
            total_invested=data["invested"],
            total_current_value=data["current"],
            count=data["count"],
        )
        for asset_type, data in groups.items()
    ]
    # sorted es estable: en empate se conserva el orden de aparición
    entries.sort(key=lambda e: e.total_current_value, reverse=True)
    return entries


def top_performers(investments: Iterable, limit: int = 5) -> list:
    ranked = sorted(investments, key=lambda inv: compute_metrics(inv).roi, reverse=True)
    return ranked[:limit]


def recent_investments(investments: Iterable, limit: int = 5) -> list:
    ranked = sorted(investments, key=lambda inv: inv.investment_date, reverse=True)
    return ranked[:limit]


def _performer(investment) -> PerformerRead:
    return PerformerRead(
        investment_id=investment.id,
        asset_name=investment.asset_name,
        roi=compute_metrics(investment).roi,
    )


def performance_breakdown(investments: Sequence) -> PerformanceBreakdown:
    if not investments:
        return PerformanceBreakdown()

    rois = [(inv, compute_metrics(inv).roi) for inv in investments]

    best = rois[0]
    worst = rois[0]
    for item in rois[1:]:
        if item[1] > best[1]:
            best = item
        if item[1] < worst[1]:
            worst = item

    return PerformanceBreakdown(
        positive_performers=sum(1 for _, roi in rois if roi > 0),
        negative_performers=sum(1 for _, roi in rois if roi < 0),
        neutral_performers=sum(1 for _, roi in rois if roi == 0),
        best_performer=_performer(best[0]),
        worst_performer=_performer(worst[0]),
    )


def simulate_value_change(
    investment,
    new_value: float,
    simulation_type: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SimulationResult:
    """Simula un nuevo valor actual para una inversión. No persiste nada."""
    old_value = investment.current_value
    old_roi = compute_roi(investment.invested_amount, old_value)
    new_roi = compute_roi(investment.invested_amount, new_value)

    return SimulationResult(
        investment_id=investment.id,
        asset_name=investment.asset_name,
        old_value=old_value,
        new_value=new_value,
        value_change=new_value - old_value,
        old_roi=old_roi,
        new_roi=new_roi,
        roi_change=new_roi - old_roi,
        simulation_type=simulation_type or "manual",
        timestamp=now or datetime.utcnow(),
    )


def simulate_random_changes(investments: Iterable, rng: random.Random) -> RandomSimulationResponse:
    """
    Aplica una variación aleatoria de ±5% al valor actual de cada inversión.

    Con un `rng` sembrado el resultado es reproducible.
    """
    results: List[RandomSimulationItem] = []
    total_original = 0.0
    total_simulated = 0.0

    for inv in investments:
        factor = 1 + rng.uniform(-SIMULATION_RANGE, SIMULATION_RANGE)
        simulated_value = inv.current_value * factor

        total_original += inv.current_value
        total_simulated += simulated_value

        results.append(RandomSimulationItem(
            investment_id=inv.id,
            asset_name=inv.asset_name,
            original_value=inv.current_value,
            simulated_value=simulated_value,
            change_percent=(factor - 1) * 100,
            new_roi=compute_roi(inv.invested_amount, simulated_value),
            new_gain=simulated_value - inv.invested_amount,
        ))

    change_percent = (
        (total_simulated - total_original) / total_original * 100
        if total_original > 0 else 0.0
    )

    return RandomSimulationResponse(
        simulation_results=results,
        portfolio_impact=PortfolioImpact(
            total_original_value=total_original,
            total_simulated_value=total_simulated,
            portfolio_change_percent=change_percent,
        ),
    )
