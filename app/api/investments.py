# app/api/investments.py

from fastapi import APIRouter, Depends
from sqlmodel import Session
from uuid import UUID
from typing import List

from app.database import get_session
from app.core.security import get_current_user
from app.models.user import User
from app.schemas.investment import InvestmentCreate, InvestmentRead, InvestmentUpdate
from app.schemas.portfolio import PortfolioSummaryResponse
from app.services import investments as service

router = APIRouter(prefix="/investments", tags=["investments"])


@router.get("", response_model=List[InvestmentRead])
@router.get("/", response_model=List[InvestmentRead])
def list_investments(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Inversiones activas visibles para el usuario, de la más reciente a la más antigua."""
    return service.list_investments(session, user)


# Debe declararse antes de /{investment_id}
@router.get("/portfolio/summary", response_model=PortfolioSummaryResponse)
def get_portfolio_summary(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.portfolio_summary(session, user)


@router.get("/{investment_id}", response_model=InvestmentRead)
def get_investment(
    investment_id: UUID,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.get_investment(session, user, investment_id)


@router.post("", response_model=InvestmentRead, status_code=201)
@router.post("/", response_model=InvestmentRead, status_code=201)
def create_investment(
    investment_data: InvestmentCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.create_investment(session, user, investment_data)


@router.put("/{investment_id}", response_model=InvestmentRead)
def update_investment(
    investment_id: UUID,
    investment_data: InvestmentUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return service.update_investment(session, user, investment_id, investment_data)


@router.delete("/{investment_id}")
def delete_investment(
    investment_id: UUID,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    service.soft_delete_investment(session, user, investment_id)
    return {"message": "Inversión eliminada correctamente"}
