# app/services/investments.py
"""
Servicio de inversiones: valida, aplica las reglas de acceso y persiste.

Todas las operaciones reciben una sesión abierta y el usuario que actúa
(`actor`). Los errores se lanzan como excepciones de app.core.exceptions.
"""

import datetime as dt
import logging
from typing import Any, Dict, List, Union
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import (
    Forbidden,
    InvalidOwners,
    InvestmentInactive,
    NotFound,
    ValidationError,
)
from app.models.investment import Investment
from app.models.user import User
from app.schemas.investment import InvestmentRead, InvestmentRecord
from app.schemas.portfolio import PortfolioSummaryResponse
from app.schemas.user import OwnerRead
from app.services import access_policy
from app.services.portfolio_metrics import allocation_by_type, compute_metrics, portfolio_totals
from app.services.users import get_active_users_by_ids, get_users_by_ids

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "asset_name",
    "asset_type",
    "invested_amount",
    "current_value",
    "investment_date",
    "owners",
    "description",
    "notes",
)


# ---------------------------------------------------------------------------
# Validación
# ---------------------------------------------------------------------------

def validate_investment_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida un registro completo de inversión y devuelve los valores limpios.
    Lanza ValidationError con TODOS los campos inválidos a la vez.
    """
    try:
        record = InvestmentRecord.model_validate(data)
    except PydanticValidationError as exc:
        errors: List[Dict[str, str]] = []
        seen = set()
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            if field in seen:
                continue
            seen.add(field)
            errors.append({"field": field, "message": error["msg"]})
        raise ValidationError(errors)

    cleaned = record.model_dump()
    cleaned["owners"] = [str(owner_id) for owner_id in record.owners]
    return cleaned


def resolve_owners(session: Session, owner_ids: List[str]) -> List[User]:
    """Todos los propietarios deben existir y estar activos."""
    users = get_active_users_by_ids(session, owner_ids)
    found = {str(u.id) for u in users}
    missing = [owner_id for owner_id in owner_ids if owner_id not in found]
    if missing:
        raise InvalidOwners(missing)
    return users


# ---------------------------------------------------------------------------
# Lectura
# ---------------------------------------------------------------------------

def to_investment_reads(session: Session, investments: List[Investment]) -> List[InvestmentRead]:
    """Adjunta métricas derivadas y datos básicos de los propietarios."""
    owner_ids = {owner_id for inv in investments for owner_id in inv.owners}
    owners_by_id = {str(u.id): u for u in get_users_by_ids(session, owner_ids)}

    reads = []
    for inv in investments:
        metrics = compute_metrics(inv)
        owners = [
            OwnerRead.model_validate(owners_by_id[o], from_attributes=True)
            for o in inv.owners if o in owners_by_id
        ]
        reads.append(InvestmentRead(
            id=inv.id,
            asset_name=inv.asset_name,
            asset_type=inv.asset_type,
            invested_amount=inv.invested_amount,
            current_value=inv.current_value,
            investment_date=inv.investment_date,
            owners=owners,
            description=inv.description,
            notes=inv.notes,
            is_active=inv.is_active,
            roi=metrics.roi,
            absolute_gain=metrics.absolute_gain,
            created_at=inv.created_at,
            updated_at=inv.updated_at,
        ))
    return reads


def to_investment_read(session: Session, investment: Investment) -> InvestmentRead:
    return to_investment_reads(session, [investment])[0]


def visible_active_investments(session: Session, actor: User) -> List[Investment]:
    investments = session.exec(
        select(Investment)
        .where(Investment.is_active == True)
        .order_by(Investment.investment_date.desc())
    ).all()
    # Los owners viven en una columna JSON: el filtro por propietario se hace aquí
    return [inv for inv in investments if access_policy.can_read(actor, inv)]


def _load(session: Session, investment_id: Union[UUID, str]) -> Investment:
    try:
        key = investment_id if isinstance(investment_id, UUID) else UUID(str(investment_id))
    except ValueError:
        raise NotFound()

    investment = session.get(Investment, key)
    if not investment:
        raise NotFound()
    return investment


def load_readable(session: Session, actor: User, investment_id: Union[UUID, str]) -> Investment:
    # Primero existencia (404), luego permisos (403)
    investment = _load(session, investment_id)
    if not access_policy.can_read(actor, investment):
        raise Forbidden()
    return investment


def list_investments(session: Session, actor: User) -> List[InvestmentRead]:
    return to_investment_reads(session, visible_active_investments(session, actor))


def get_investment(session: Session, actor: User, investment_id: Union[UUID, str]) -> InvestmentRead:
    return to_investment_read(session, load_readable(session, actor, investment_id))


# ---------------------------------------------------------------------------
# Escritura
# ---------------------------------------------------------------------------

def _as_dict(data: Union[BaseModel, Dict[str, Any]], partial: bool) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


def _commit(session: Session, investment: Investment) -> None:
    try:
        session.add(investment)
        session.commit()
        session.refresh(investment)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error guardando la inversión %s", investment.id)
        raise


def create_investment(
    session: Session,
    actor: User,
    data: Union[BaseModel, Dict[str, Any]],
) -> InvestmentRead:
    values = _as_dict(data, partial=False)
    if values.get("investment_date") is None:
        values["investment_date"] = dt.datetime.utcnow()

    cleaned = validate_investment_data(values)
    resolve_owners(session, cleaned["owners"])
    access_policy.check_owner_set(actor, cleaned["owners"])
    access_policy.check_investment_cap(actor, cleaned["invested_amount"])

    now = dt.datetime.utcnow()
    investment = Investment(**cleaned, is_active=True, created_at=now, updated_at=now)
    _commit(session, investment)

    logger.info("Inversión %s creada por %s", investment.id, actor.email)
    return to_investment_read(session, investment)


def update_investment(
    session: Session,
    actor: User,
    investment_id: Union[UUID, str],
    partial: Union[BaseModel, Dict[str, Any]],
) -> InvestmentRead:
    investment = _load(session, investment_id)
    if not access_policy.can_modify(actor, investment):
        raise Forbidden()
    if not investment.is_active:
        raise InvestmentInactive()

    changes = {k: v for k, v in _as_dict(partial, partial=True).items() if k in EDITABLE_FIELDS}
    merged = {field: getattr(investment, field) for field in EDITABLE_FIELDS}
    merged.update(changes)

    cleaned = validate_investment_data(merged)
    resolve_owners(session, cleaned["owners"])
    access_policy.check_owner_set(actor, cleaned["owners"], existing_owners=investment.owners)
    access_policy.check_investment_cap(actor, cleaned["invested_amount"])

    for field, value in cleaned.items():
        setattr(investment, field, value)
    investment.updated_at = dt.datetime.utcnow()
    _commit(session, investment)

    logger.info("Inversión %s actualizada por %s (%s)", investment.id, actor.email, ", ".join(sorted(changes)))
    return to_investment_read(session, investment)


def soft_delete_investment(session: Session, actor: User, investment_id: Union[UUID, str]) -> None:
    investment = _load(session, investment_id)
    if not access_policy.can_modify(actor, investment):
        raise Forbidden()
    if not investment.is_active:
        return

    investment.is_active = False
    investment.updated_at = dt.datetime.utcnow()
    _commit(session, investment)
    logger.info("Inversión %s desactivada por %s", investment.id, actor.email)


def portfolio_summary(session: Session, actor: User) -> PortfolioSummaryResponse:
    investments = visible_active_investments(session, actor)
    return PortfolioSummaryResponse(
        summary=portfolio_totals(investments),
        allocation=allocation_by_type(investments),
    )
