import random
from datetime import datetime
from types import SimpleNamespace
from uuid import uuid4

import pytest

from app.models.enums import AssetType
from app.services.portfolio_metrics import (
    allocation_by_type,
    compute_metrics,
    performance_breakdown,
    portfolio_totals,
    recent_investments,
    simulate_random_changes,
    simulate_value_change,
    top_performers,
)


def _inv(invested, current, asset_type=AssetType.startup, name="Asset", date=None):
    return SimpleNamespace(
        id=uuid4(),
        asset_name=name,
        asset_type=asset_type,
        invested_amount=invested,
        current_value=current,
        investment_date=date or datetime(2023, 1, 1),
    )


@pytest.fixture()
def mixed_portfolio():
    return [
        _inv(100000, 120000, AssetType.startup, "Startup A", datetime(2023, 1, 1)),
        _inv(50000, 45000, AssetType.crypto_fund, "Crypto Fund B", datetime(2023, 2, 1)),
        _inv(200000, 220000, AssetType.farmland, "Farmland C", datetime(2023, 3, 1)),
    ]


def test_compute_metrics_gain_and_roi():
    metrics = compute_metrics(_inv(100000, 120000))
    assert metrics.roi == pytest.approx(20.0)
    assert metrics.absolute_gain == 20000


def test_compute_metrics_zero_invested_has_zero_roi():
    metrics = compute_metrics(_inv(0, 5000))
    assert metrics.roi == 0
    assert metrics.absolute_gain == 5000


def test_compute_metrics_loss():
    metrics = compute_metrics(_inv(50000, 45000))
    assert metrics.roi == pytest.approx(-10.0)
    assert metrics.absolute_gain == -5000


def test_portfolio_totals_empty_is_all_zero():
    totals = portfolio_totals([])
    assert totals.model_dump() == {
        "total_invested": 0,
        "total_current_value": 0,
        "total_gain": 0,
        "total_roi": 0,
        "investment_count": 0,
    }


def test_portfolio_totals_mixed_portfolio(mixed_portfolio):
    totals = portfolio_totals(mixed_portfolio)
    assert totals.total_invested == 350000
    assert totals.total_current_value == 385000
    assert totals.total_gain == 35000
    assert totals.total_roi == pytest.approx(10.0)
    assert totals.investment_count == 3


def test_portfolio_totals_zero_invested_does_not_divide():
    totals = portfolio_totals([_inv(0, 100)])
    assert totals.total_roi == 0
    assert totals.total_gain == 100


def test_allocation_sorted_by_current_value(mixed_portfolio):
    allocation = allocation_by_type(mixed_portfolio)
    assert [e.asset_type for e in allocation] == [
        AssetType.farmland,
        AssetType.startup,
        AssetType.crypto_fund,
    ]
    assert allocation[0].total_current_value == 220000
    assert all(e.count == 1 for e in allocation)


def test_allocation_groups_and_matches_totals(mixed_portfolio):
    investments = mixed_portfolio + [_inv(10000, 15000, AssetType.startup)]
    allocation = allocation_by_type(investments)

    startup = next(e for e in allocation if e.asset_type == AssetType.startup)
    assert startup.count == 2
    assert startup.total_invested == 110000
    assert startup.total_current_value == 135000

    assert sum(e.total_invested for e in allocation) == portfolio_totals(investments).total_invested
    # Tipos sin inversiones no aparecen
    assert {e.asset_type for e in allocation} == {AssetType.startup, AssetType.crypto_fund, AssetType.farmland}


def test_allocation_ties_keep_input_order():
    investments = [
        _inv(10, 100, AssetType.collectible),
        _inv(20, 100, AssetType.other),
        _inv(30, 100, AssetType.farmland),
    ]
    allocation = allocation_by_type(investments)
    assert [e.asset_type for e in allocation] == [AssetType.collectible, AssetType.other, AssetType.farmland]


def test_allocation_empty():
    assert allocation_by_type([]) == []


def test_top_performers_and_recent(mixed_portfolio):
    top = top_performers(mixed_portfolio, limit=2)
    assert [i.asset_name for i in top] == ["Startup A", "Farmland C"]

    recent = recent_investments(mixed_portfolio, limit=2)
    assert [i.asset_name for i in recent] == ["Farmland C", "Crypto Fund B"]


def test_performance_breakdown(mixed_portfolio):
    investments = mixed_portfolio + [_inv(1000, 1000, AssetType.other, "Flat")]
    breakdown = performance_breakdown(investments)

    assert breakdown.positive_performers == 2
    assert breakdown.negative_performers == 1
    assert breakdown.neutral_performers == 1
    assert breakdown.best_performer.asset_name == "Startup A"
    assert breakdown.worst_performer.asset_name == "Crypto Fund B"
    assert breakdown.worst_performer.roi == pytest.approx(-10.0)


def test_performance_breakdown_empty():
    breakdown = performance_breakdown([])
    assert breakdown.best_performer is None
    assert breakdown.worst_performer is None
    assert breakdown.positive_performers == 0


def test_simulate_value_change():
    investment = _inv(100000, 120000, name="Startup A")
    now = datetime(2024, 5, 1, 12, 0)
    result = simulate_value_change(investment, 150000, now=now)

    assert result.old_value == 120000
    assert result.new_value == 150000
    assert result.value_change == 30000
    assert result.old_roi == pytest.approx(20.0)
    assert result.new_roi == pytest.approx(50.0)
    assert result.roi_change == pytest.approx(30.0)
    assert result.simulation_type == "manual"
    assert result.timestamp == now


def test_simulate_value_change_zero_invested():
    result = simulate_value_change(_inv(0, 0), 100)
    assert result.old_roi == 0
    assert result.new_roi == 0


def test_simulate_random_changes_is_reproducible_with_seed(mixed_portfolio):
    result = simulate_random_changes(mixed_portfolio, random.Random(42))
    again = simulate_random_changes(mixed_portfolio, random.Random(42))
    assert result == again

    replay = random.Random(42)
    for inv, item in zip(mixed_portfolio, result.simulation_results):
        factor = 1 + replay.uniform(-0.05, 0.05)
        assert item.simulated_value == inv.current_value * factor
        assert item.change_percent == pytest.approx((factor - 1) * 100)
        assert -5.0 <= item.change_percent <= 5.0
        assert item.new_gain == pytest.approx(item.simulated_value - inv.invested_amount)

    impact = result.portfolio_impact
    assert impact.total_original_value == 385000
    assert impact.total_simulated_value == pytest.approx(sum(i.simulated_value for i in result.simulation_results))
    assert result.simulation_type == "random"


def test_simulate_random_changes_empty_portfolio():
    result = simulate_random_changes([], random.Random(1))
    assert result.simulation_results == []
    assert result.portfolio_impact.portfolio_change_percent == 0
