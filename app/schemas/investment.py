# app/schemas/investment.py

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import UUID
from typing import List, Optional

from app.core.config import (
    ASSET_NAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    MAX_AMOUNT,
    NOTES_MAX_LENGTH,
)
from app.models.enums import AssetType
from app.schemas.user import OwnerRead

class InvestmentCreate(BaseModel):
    asset_name: str
    asset_type: AssetType = AssetType.other
    invested_amount: float
    current_value: float
    investment_date: Optional[datetime] = None
    owners: List[UUID]
    description: Optional[str] = None
    notes: Optional[str] = None

class InvestmentUpdate(BaseModel):
    """Actualización parcial: solo se aplican los campos enviados."""
    asset_name: Optional[str] = None
    asset_type: Optional[AssetType] = None
    invested_amount: Optional[float] = None
    current_value: Optional[float] = None
    investment_date: Optional[datetime] = None
    owners: Optional[List[UUID]] = None
    description: Optional[str] = None
    notes: Optional[str] = None

class InvestmentRecord(BaseModel):
    """Registro completo tal como se guarda; se valida después de fusionar los cambios."""
    model_config = ConfigDict(str_strip_whitespace=True)

    asset_name: str = Field(..., min_length=1, max_length=ASSET_NAME_MAX_LENGTH)
    asset_type: AssetType = AssetType.other
    invested_amount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Monto invertido")
    current_value: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Valor actual")
    investment_date: datetime
    owners: List[UUID] = Field(..., min_length=1)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

    @field_validator("investment_date")
    @classmethod
    def naive_utc(cls, v):
        # Si viene aware, pásalo a UTC y quita tzinfo; si ya es naive, asume UTC
        return v.astimezone(timezone.utc).replace(tzinfo=None) if v.tzinfo else v

    @field_validator("owners")
    @classmethod
    def unique_owners(cls, v):
        return list(dict.fromkeys(v))

    @field_validator("description", "notes")
    @classmethod
    def blank_as_none(cls, v):
        return v or None

class InvestmentRead(BaseModel):
    id: UUID
    asset_name: str
    asset_type: AssetType
    invested_amount: float
    current_value: float
    investment_date: datetime
    owners: List[OwnerRead]
    description: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    roi: float
    absolute_gain: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
