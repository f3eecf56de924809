# fundraising/domain/campaign/entities.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal

from fundraising.domain.shared.money import SUPPORTED_CURRENCIES, Money, to_decimal
from fundraising.domain.shared.records import parse_datetime

from .enums import CampaignStatus


@dataclass(frozen=True)
class CampaignRecord:
    """Campaign as handed over by a repository or an HTTP body.

    Amounts are Decimal in `currency`. Dates are optional: drafts usually have
    neither a start nor an end.
    """

    id: int
    goal_amount: Decimal
    current_amount: Decimal = Decimal("0")
    donations_count: int = 0
    status: CampaignStatus = CampaignStatus.DRAFT
    start_date: datetime | None = None
    end_date: datetime | None = None
    currency: str = "EUR"
    title: str = ""
    organization_id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "goal_amount", to_decimal(self.goal_amount))
        object.__setattr__(self, "current_amount", to_decimal(self.current_amount))
        currency = self.currency.strip().upper()
        if currency not in SUPPORTED_CURRENCIES:
            raise ValueError("Invalid currency code")
        object.__setattr__(self, "currency", currency)
        if self.donations_count < 0:
            raise ValueError("Donations count cannot be negative")

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
        default_currency: str = "EUR",
        tz: tzinfo | None = None,
    ) -> CampaignRecord:
        """Numeric strings become Decimal, status strings go through CampaignStatus,
        ISO dates become datetime (naive ones take `tz`)."""
        raw_status = data.get("status")
        if isinstance(raw_status, CampaignStatus):
            status = raw_status
        elif raw_status is None:
            status = CampaignStatus.DRAFT
        else:
            status = CampaignStatus.from_string(str(raw_status))

        org = data.get("organization_id")
        return cls(
            id=int(data.get("id") or 0),
            goal_amount=to_decimal(data.get("goal_amount") or 0),
            current_amount=to_decimal(data.get("current_amount") or 0),
            donations_count=int(data.get("donations_count") or 0),
            status=status,
            start_date=parse_datetime(data.get("start_date"), tz),
            end_date=parse_datetime(data.get("end_date"), tz),
            currency=str(data.get("currency") or default_currency),
            title=str(data.get("title") or ""),
            organization_id=int(org) if org is not None else None,
        )

    @property
    def money_goal(self) -> Money:
        return Money(self.goal_amount, self.currency)

    @property
    def money_raised(self) -> Money:
        return Money(self.current_amount, self.currency)

    @property
    def has_schedule(self) -> bool:
        return self.start_date is not None and self.end_date is not None
