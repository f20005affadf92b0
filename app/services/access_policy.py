# app/services/access_policy.py
"""
Reglas de acceso sobre inversiones.

Funciones puras: no tocan la base de datos. Un admin ve y modifica todo; un
viewer solo las inversiones donde figura como propietario.
"""

from typing import Iterable, Optional

from app.core.config import NON_ADMIN_INVESTMENT_CAP
from app.core.exceptions import ForbiddenOwnerRemoval, ForbiddenOwnerSet, InvestmentCapExceeded
from app.models.enums import UserRole


def _is_admin(actor) -> bool:
    return actor.role == UserRole.admin


def is_owner(actor, owners: Iterable) -> bool:
    actor_id = str(actor.id)
    return any(str(owner_id) == actor_id for owner_id in owners)


def can_read(actor, investment) -> bool:
    return _is_admin(actor) or is_owner(actor, investment.owners)


def can_modify(actor, investment) -> bool:
    # Lectura y escritura comparten la misma regla (no hay colaboradores de solo lectura)
    return _is_admin(actor) or is_owner(actor, investment.owners)


def check_owner_set(actor, proposed_owners: Iterable, existing_owners: Optional[Iterable] = None) -> None:
    """
    Valida el conjunto de propietarios propuesto.
    - Creación (sin existing_owners): un viewer debe incluirse a sí mismo.
    - Actualización: un viewer no puede quedar fuera, haya sido propietario o no.
    """
    if _is_admin(actor) or is_owner(actor, proposed_owners):
        return
    if existing_owners is None:
        raise ForbiddenOwnerSet()
    raise ForbiddenOwnerRemoval()


def can_exceed_investment_cap(actor) -> bool:
    return _is_admin(actor)


def check_investment_cap(actor, invested_amount: float) -> None:
    if invested_amount > NON_ADMIN_INVESTMENT_CAP and not can_exceed_investment_cap(actor):
        raise InvestmentCapExceeded()
