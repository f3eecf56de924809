# fundraising/application/dtos/target_dto.py
from decimal import Decimal

from pydantic import BaseModel, Field

from .money_dto import MoneyDTO


class TargetEvaluationRequest(BaseModel):
    amount: Decimal
    currency: str | None = None
    raised: Decimal = Field(default=Decimal("0"), ge=0)


class MilestoneDTO(BaseModel):
    percentage: int
    amount: MoneyDTO
    reached: bool


class TargetEvaluationDTO(BaseModel):
    target: MoneyDTO
    raised: MoneyDTO
    remaining: MoneyDTO
    progress: float
    is_achievable: bool
    is_mega_campaign: bool
    requires_approval: bool
    is_reached: bool
    is_exceeded: bool
    milestones: list[MilestoneDTO]
