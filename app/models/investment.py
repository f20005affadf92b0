from sqlmodel import SQLModel, Field
from sqlalchemy import JSON, Column
from uuid import UUID, uuid4
from typing import List, Optional
from datetime import datetime

from app.models.enums import AssetType

class Investment(SQLModel, table=True):
    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    asset_name: str
    asset_type: AssetType = Field(default=AssetType.other, index=True)
    invested_amount: float
    current_value: float
    investment_date: datetime = Field(default_factory=datetime.utcnow, index=True)
    # ids (str) de los usuarios propietarios; se reasigna completa al actualizar
    owners: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    description: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = Field(default=True, index=True)  # soft delete
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
