# fundraising/domain/campaign/progress.py
#
# Read-side progress carriers: DonationProgress (what a donor sees on the
# campaign page) and CampaignProgress (what the organiser dashboard and the
# periodic jobs see).
#
# Design decisions:
#   - Both are rebuilt on every query from aggregate totals. Nothing here is
#     persisted and nothing reads a clock; day counters arrive already computed.
#   - DonationProgress keeps two views of the deadline: days_remaining is floored
#     at 0 for display while has_expired is taken from the sign of the value the
#     caller passed in. A campaign two days past its end shows "0 days" and
#     is still reported as expired.
#   - CampaignProgress is a carrier plus light derivation. Velocity, projection
#     and the on-track flags are supplied by the caller (normally
#     CampaignProgressCalculator); only percentage-style values are derived here.
#   - Optional money values (average, largest, momentum) are None when unknown,
#     never a zero Money: zero is a legitimate amount.
#
# Invariants:
#   - DonationProgress: raised, goal and every optional amount share a currency;
#     donor_count >= 0; days_remaining >= 0 after construction.
#   - CampaignProgress: campaign_id > 0, goal_amount > 0, current_amount >= 0.
from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from fundraising.domain.shared.money import CurrencyMismatchError, Money, to_decimal
from fundraising.domain.shared.records import record_value

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

# ADR: momentum thresholds as module constants (multiples of the average gift).
MOMENTUM_SURGING = Decimal("3")
MOMENTUM_INCREASING = Decimal("1.5")
MOMENTUM_SLOWING = Decimal("0.75")

ENDING_SOON_DAYS = 7

_URGENCY_COLORS: dict[str, str] = {
    "inactive": "gray",
    "expired": "gray",
    "critical": "red",
    "very-high": "orange",
    "high": "yellow",
    "medium": "blue",
    "normal": "green",
}


def _capped_percentage(current: Decimal, goal: Decimal) -> float:
    if goal <= _ZERO:
        return 0.0
    return float(min(_HUNDRED, current / goal * _HUNDRED))


@dataclass(frozen=True)
class DonationProgress:
    """Donation totals against a goal, plus deadline and momentum signals."""

    raised: Money
    goal: Money
    donor_count: int = 0
    days_remaining: int = 0
    is_active: bool = True
    average_donation: Money | None = None
    largest_donation: Money | None = None
    recent_momentum: Money | None = None
    has_expired: bool = field(init=False)

    def __post_init__(self) -> None:
        if self.raised.currency != self.goal.currency:
            raise CurrencyMismatchError("Raised and goal amounts must be in the same currency")
        for optional in (self.average_donation, self.largest_donation, self.recent_momentum):
            if optional is not None and optional.currency != self.goal.currency:
                raise CurrencyMismatchError("Donation amounts must be in the campaign currency")
        if self.donor_count < 0:
            raise ValueError("Donor count cannot be negative")
        object.__setattr__(self, "has_expired", self.days_remaining < 0)
        object.__setattr__(self, "days_remaining", max(0, self.days_remaining))

    @property
    def currency(self) -> str:
        return self.goal.currency

    @property
    def remaining(self) -> Money:
        return self.goal.subtract(self.raised)

    @property
    def percentage(self) -> float:
        return _capped_percentage(self.raised.amount, self.goal.amount)

    @property
    def has_reached_goal(self) -> bool:
        return self.raised.amount >= self.goal.amount

    @property
    def effective_average_donation(self) -> Money | None:
        """Supplied average, else raised / donors when both are positive."""
        if self.average_donation is not None:
            return self.average_donation
        if self.donor_count > 0 and self.raised.is_positive():
            return self.raised.divide(self.donor_count)
        return None

    # Deadline

    @property
    def is_ending_soon(self) -> bool:
        return self.is_active and 0 < self.days_remaining <= ENDING_SOON_DAYS

    @property
    def is_ending_today(self) -> bool:
        return self.is_active and self.days_remaining == 0

    @property
    def urgency_level(self) -> str:
        if not self.is_active:
            return "inactive"
        if self.has_expired:
            return "expired"
        days = self.days_remaining
        if days == 0:
            return "critical"
        if days <= 3:
            return "very-high"
        if days <= 7:
            return "high"
        if days <= 14:
            return "medium"
        return "normal"

    @property
    def urgency_color(self) -> str:
        return _URGENCY_COLORS[self.urgency_level]

    # Momentum

    @property
    def momentum_indicator(self) -> str:
        """surging / increasing / steady / slowing, relative to the average gift."""
        average = self.effective_average_donation
        if self.recent_momentum is None or average is None or average.is_zero():
            return "steady"
        ratio = self.recent_momentum.amount / average.amount
        if ratio >= MOMENTUM_SURGING:
            return "surging"
        if ratio >= MOMENTUM_INCREASING:
            return "increasing"
        if ratio < MOMENTUM_SLOWING:
            return "slowing"
        return "steady"

    @property
    def completion_estimate(self) -> int | None:
        """Days to close the gap at the recent daily pace; None if it won't make it."""
        if not self.is_active or self.has_reached_goal:
            return None
        if self.recent_momentum is None or not self.recent_momentum.is_positive():
            return None
        days = math.ceil(self.remaining.amount / self.recent_momentum.amount)
        if days > self.days_remaining:
            return None
        return days

    @property
    def needs_boost(self) -> bool:
        pct = self.percentage
        if (self.is_ending_soon or self.is_ending_today) and pct < 75:
            return True
        return self.momentum_indicator == "slowing" and pct < 90

    # Presentation

    def display_data(self) -> dict[str, object]:
        """Flat view with money already formatted for templates."""
        average = self.effective_average_donation
        return {
            "raised": self.raised.format(),
            "goal": self.goal.format(),
            "remaining": self.remaining.format(),
            "percentage": round(self.percentage, 1),
            "donor_count": self.donor_count,
            "days_remaining": self.days_remaining,
            "is_active": self.is_active,
            "has_expired": self.has_expired,
            "is_ending_soon": self.is_ending_soon,
            "is_ending_today": self.is_ending_today,
            "has_reached_goal": self.has_reached_goal,
            "urgency_level": self.urgency_level,
            "urgency_color": self.urgency_color,
            "momentum_indicator": self.momentum_indicator,
            "needs_boost": self.needs_boost,
            "completion_estimate": self.completion_estimate,
            "average_donation": average.format() if average is not None else None,
            "largest_donation": (
                self.largest_donation.format() if self.largest_donation is not None else None
            ),
        }

    def to_dict(self) -> dict[str, object]:
        data = self.display_data()
        average = self.effective_average_donation
        data.update(
            raised=self.raised.to_dict(),
            goal=self.goal.to_dict(),
            remaining=self.remaining.to_dict(),
            percentage=self.percentage,
            average_donation=average.to_dict() if average is not None else None,
            largest_donation=(
                self.largest_donation.to_dict() if self.largest_donation is not None else None
            ),
        )
        return data


@dataclass(frozen=True)
class CampaignProgress:
    """Organiser-facing progress snapshot. Amounts are Decimal in the campaign currency."""

    campaign_id: int
    goal_amount: Decimal
    current_amount: Decimal
    total_days: int
    days_elapsed: int
    days_remaining: int
    expected_progress: float
    velocity: Decimal
    projected_final_amount: Decimal
    is_on_track: bool
    is_likely_to_succeed: bool
    donations_count: int = 0

    def __post_init__(self) -> None:
        if self.campaign_id <= 0:
            raise ValueError("Campaign ID must be positive")
        goal = to_decimal(self.goal_amount)
        current = to_decimal(self.current_amount)
        if goal <= _ZERO:
            raise ValueError("Goal amount must be greater than zero")
        if current < _ZERO:
            raise ValueError("Current amount cannot be negative")
        object.__setattr__(self, "goal_amount", goal)
        object.__setattr__(self, "current_amount", current)
        object.__setattr__(self, "velocity", to_decimal(self.velocity))
        object.__setattr__(self, "projected_final_amount", to_decimal(self.projected_final_amount))
        object.__setattr__(self, "expected_progress", float(self.expected_progress))

    @classmethod
    def from_campaign(cls, record: object) -> CampaignProgress:
        """Display-only snapshot from a campaign-like record: 30-day window at day 0."""
        goal = to_decimal(record_value(record, "goal_amount", _ZERO))
        current = to_decimal(record_value(record, "current_amount", _ZERO))
        return cls(
            campaign_id=int(record_value(record, "id", 1)),
            goal_amount=goal,
            current_amount=current,
            total_days=30,
            days_elapsed=0,
            days_remaining=30,
            expected_progress=0.0,
            velocity=_ZERO,
            projected_final_amount=current,
            is_on_track=True,
            is_likely_to_succeed=current >= goal * Decimal("0.9"),
            donations_count=int(record_value(record, "donations_count", 0)),
        )

    @classmethod
    def create_for_testing(
        cls,
        current: Decimal | int | float | str,
        goal: Decimal | int | float | str,
    ) -> CampaignProgress:
        """30-day campaign observed at day 15."""
        current_dec = to_decimal(current)
        goal_dec = to_decimal(goal)
        total_days, days_elapsed = 30, 15
        velocity = current_dec / days_elapsed
        projected = velocity * total_days
        expected = 50.0
        percentage = _capped_percentage(current_dec, goal_dec)
        return cls(
            campaign_id=1,
            goal_amount=goal_dec,
            current_amount=current_dec,
            total_days=total_days,
            days_elapsed=days_elapsed,
            days_remaining=total_days - days_elapsed,
            expected_progress=expected,
            velocity=velocity,
            projected_final_amount=projected,
            is_on_track=percentage >= expected * 0.9,
            is_likely_to_succeed=projected >= goal_dec * Decimal("0.9"),
        )

    @property
    def percentage(self) -> float:
        return _capped_percentage(self.current_amount, self.goal_amount)

    @property
    def percentage_rounded(self) -> int:
        raw = min(_HUNDRED, self.current_amount / self.goal_amount * _HUNDRED)
        return int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @property
    def progress_ratio(self) -> float:
        return float(min(Decimal("1"), self.current_amount / self.goal_amount))

    @property
    def remaining_amount(self) -> Decimal:
        return max(_ZERO, self.goal_amount - self.current_amount)

    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.goal_amount

    @property
    def has_reached_goal(self) -> bool:
        return self.is_completed

    @property
    def is_behind_schedule(self) -> bool:
        return self.percentage < self.expected_progress

    @property
    def performance_status(self) -> str:
        if self.is_completed:
            return "completed"
        pct = self.percentage
        if self.is_on_track and self.is_likely_to_succeed and pct >= self.expected_progress:
            return "excellent"
        if self.is_on_track:
            return "good"
        if pct >= self.expected_progress * 0.5:
            return "fair"
        return "poor"

    def to_dict(self) -> dict[str, object]:
        return {
            "campaign_id": self.campaign_id,
            "goal_amount": str(self.goal_amount),
            "current_amount": str(self.current_amount),
            "remaining_amount": str(self.remaining_amount),
            "percentage": self.percentage,
            "percentage_rounded": self.percentage_rounded,
            "total_days": self.total_days,
            "days_elapsed": self.days_elapsed,
            "days_remaining": self.days_remaining,
            "expected_progress": self.expected_progress,
            "velocity": str(self.velocity),
            "projected_final_amount": str(self.projected_final_amount),
            "is_on_track": self.is_on_track,
            "is_likely_to_succeed": self.is_likely_to_succeed,
            "is_behind_schedule": self.is_behind_schedule,
            "has_reached_goal": self.has_reached_goal,
            "performance_status": self.performance_status,
            "donations_count": self.donations_count,
        }
