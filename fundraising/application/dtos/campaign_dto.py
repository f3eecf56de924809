# fundraising/application/dtos/campaign_dto.py
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CampaignInputDTO(BaseModel):
    """Campaign-like record as posted by a presentation collaborator."""

    id: int = Field(default=1, gt=0)
    title: str = ""
    goal_amount: Decimal
    current_amount: Decimal = Decimal("0")
    donations_count: int = Field(default=0, ge=0)
    status: str = "draft"
    start_date: datetime | None = None
    end_date: datetime | None = None
    currency: str | None = None
    organization_id: int | None = None


class DonationSignalsInputDTO(BaseModel):
    raised: Decimal | None = None
    donor_count: int = Field(default=0, ge=0)
    largest_donation: Decimal | None = None
    recent_momentum: Decimal | None = None
    average_donation: Decimal | None = None


class CampaignOverviewRequest(BaseModel):
    campaign: CampaignInputDTO
    donations: DonationSignalsInputDTO | None = None
    now: datetime | None = None
