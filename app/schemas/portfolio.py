# app/schemas/portfolio.py

from pydantic import BaseModel
from uuid import UUID
from typing import List, Optional
from datetime import datetime

from app.models.enums import AssetType
from app.schemas.investment import InvestmentRead

class InvestmentMetrics(BaseModel):
    roi: float
    absolute_gain: float

class PortfolioTotals(BaseModel):
    total_invested: float = 0.0
    total_current_value: float = 0.0
    total_gain: float = 0.0
    total_roi: float = 0.0
    investment_count: int = 0

class AllocationEntry(BaseModel):
    asset_type: AssetType
    total_invested: float
    total_current_value: float
    count: int

class PortfolioSummaryResponse(BaseModel):
    summary: PortfolioTotals
    allocation: List[AllocationEntry]

class DashboardResponse(PortfolioSummaryResponse):
    recent_investments: List[InvestmentRead]
    top_performers: List[InvestmentRead]

class PerformerRead(BaseModel):
    investment_id: UUID
    asset_name: str
    roi: float

class PerformanceBreakdown(BaseModel):
    positive_performers: int = 0
    negative_performers: int = 0
    neutral_performers: int = 0
    best_performer: Optional[PerformerRead] = None
    worst_performer: Optional[PerformerRead] = None

class PerformanceResponse(BaseModel):
    summary: PortfolioTotals
    performance: PerformanceBreakdown

class SimulationRequest(BaseModel):
    investment_id: UUID
    new_value: float
    simulation_type: Optional[str] = "manual"

class SimulationResult(BaseModel):
    investment_id: UUID
    asset_name: str
    old_value: float
    new_value: float
    value_change: float
    old_roi: float
    new_roi: float
    roi_change: float
    simulation_type: str
    timestamp: datetime

class RandomSimulationItem(BaseModel):
    investment_id: UUID
    asset_name: str
    original_value: float
    simulated_value: float
    change_percent: float
    new_roi: float
    new_gain: float

class PortfolioImpact(BaseModel):
    total_original_value: float
    total_simulated_value: float
    portfolio_change_percent: float

class RandomSimulationResponse(BaseModel):
    simulation_results: List[RandomSimulationItem]
    portfolio_impact: PortfolioImpact
    simulation_type: str = "random"
