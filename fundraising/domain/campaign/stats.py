# fundraising/domain/campaign/stats.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from fundraising.domain.shared.money import SUPPORTED_CURRENCIES, Money, to_decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class UserCampaignStats:
    """Per-user rollup snapshot. No identity beyond the values it holds."""

    total_campaigns: int
    active_campaigns: int
    completed_campaigns: int
    draft_campaigns: int
    total_amount_raised: Decimal
    total_goal_amount: Decimal
    total_donations: int
    average_success_rate: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        counts = (
            self.total_campaigns,
            self.active_campaigns,
            self.completed_campaigns,
            self.draft_campaigns,
            self.total_donations,
        )
        if any(c < 0 for c in counts):
            raise ValueError("Campaign counts cannot be negative")
        object.__setattr__(self, "total_amount_raised", to_decimal(self.total_amount_raised))
        object.__setattr__(self, "total_goal_amount", to_decimal(self.total_goal_amount))
        object.__setattr__(self, "average_success_rate", to_decimal(self.average_success_rate))
        currency = self.currency.strip().upper()
        if currency not in SUPPORTED_CURRENCIES:
            raise ValueError("Invalid currency code")
        object.__setattr__(self, "currency", currency)

    @classmethod
    def empty(cls, currency: str = "EUR") -> UserCampaignStats:
        return cls(0, 0, 0, 0, _ZERO, _ZERO, 0, _ZERO, currency)

    @property
    def progress_percentage(self) -> float:
        """Raised over goal, capped at 100. A user with no goal sits at 0."""
        if self.total_goal_amount <= _ZERO:
            return 0.0
        return float(min(_HUNDRED, self.total_amount_raised / self.total_goal_amount * _HUNDRED))

    @property
    def formatted_total_raised(self) -> str:
        return Money(self.total_amount_raised, self.currency).format(decimals=0)

    @property
    def formatted_total_goal(self) -> str:
        return Money(self.total_goal_amount, self.currency).format(decimals=0)

    @property
    def formatted_success_rate(self) -> str:
        rate = self.average_success_rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{rate}%"

    @property
    def has_active_campaigns(self) -> bool:
        return self.active_campaigns > 0

    @property
    def has_drafts(self) -> bool:
        return self.draft_campaigns > 0

    @property
    def total_published_campaigns(self) -> int:
        return self.total_campaigns - self.draft_campaigns

    def to_dict(self) -> dict[str, object]:
        return {
            "total_campaigns": self.total_campaigns,
            "active_campaigns": self.active_campaigns,
            "completed_campaigns": self.completed_campaigns,
            "draft_campaigns": self.draft_campaigns,
            "total_published_campaigns": self.total_published_campaigns,
            "total_amount_raised": str(self.total_amount_raised),
            "total_goal_amount": str(self.total_goal_amount),
            "total_donations": self.total_donations,
            "average_success_rate": str(self.average_success_rate),
            "progress_percentage": self.progress_percentage,
            "formatted_total_raised": self.formatted_total_raised,
            "formatted_total_goal": self.formatted_total_goal,
            "formatted_success_rate": self.formatted_success_rate,
            "has_active_campaigns": self.has_active_campaigns,
            "has_drafts": self.has_drafts,
        }
