# fundraising/domain/campaign/value_objects.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from decimal import Decimal
from typing import cast

from fundraising.domain.shared.money import CurrencyMismatchError, Money, format_number, to_decimal
from fundraising.domain.shared.records import parse_datetime, record_value

_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class CampaignId:
    """Positive campaign identifier."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Campaign ID must be a positive integer")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# FundraisingTarget
# ---------------------------------------------------------------------------

# ADR: bounds as module constants, applied in the target's own currency.
TARGET_MINIMUM = Decimal("100")
TARGET_MAXIMUM = Decimal("10000000")
TARGET_RECOMMENDED_MINIMUM = Decimal("1000")
MEGA_CAMPAIGN_THRESHOLD = Decimal("1000000")
MILESTONE_PERCENTAGES: tuple[int, ...] = (25, 50, 75, 100)

_TARGET_CURRENCY_MISMATCH = "Currency mismatch between target and raised amount"


def _plain_amount(amount: Decimal) -> str:
    """100.00 / 10,000,000.00: fixed format for validation messages."""
    return format_number(amount, 2, ",", ".")


@dataclass(frozen=True)
class FundraisingTarget:
    """Validated campaign target. Edits replace the whole object."""

    money: Money

    def __post_init__(self) -> None:
        amount = self.money.amount
        currency = self.money.currency
        if amount < TARGET_MINIMUM:
            raise ValueError(
                f"Fundraising target must be at least {_plain_amount(TARGET_MINIMUM)} {currency}"
            )
        if amount > TARGET_MAXIMUM:
            raise ValueError(
                f"Fundraising target cannot exceed {_plain_amount(TARGET_MAXIMUM)} {currency}"
            )

    @classmethod
    def from_money(cls, money: Money) -> FundraisingTarget:
        return cls(money)

    @classmethod
    def from_amount(cls, amount: Decimal | int | float | str, currency: str = "EUR") -> FundraisingTarget:
        return cls(Money(to_decimal(amount), currency))

    @classmethod
    def minimum(cls, currency: str = "EUR") -> FundraisingTarget:
        return cls(Money(TARGET_MINIMUM, currency))

    @classmethod
    def maximum(cls, currency: str = "EUR") -> FundraisingTarget:
        return cls(Money(TARGET_MAXIMUM, currency))

    @classmethod
    def recommended_minimum(cls, currency: str = "EUR") -> FundraisingTarget:
        return cls(Money(TARGET_RECOMMENDED_MINIMUM, currency))

    @property
    def amount(self) -> Decimal:
        return self.money.amount

    @property
    def currency(self) -> str:
        return self.money.currency

    # Classification. achievable and requires_approval are complementary.

    @property
    def is_achievable(self) -> bool:
        return self.amount >= TARGET_RECOMMENDED_MINIMUM

    @property
    def is_mega_campaign(self) -> bool:
        return self.amount >= MEGA_CAMPAIGN_THRESHOLD

    @property
    def requires_approval(self) -> bool:
        return self.amount < TARGET_RECOMMENDED_MINIMUM

    # Progress against a raised amount in the same currency.

    def calculate_progress(self, raised: Money) -> float:
        """min(100, raised / target * 100)."""
        self._check_currency(raised)
        return float(min(_HUNDRED, raised.amount / self.amount * _HUNDRED))

    def calculate_remaining(self, raised: Money) -> Money:
        self._check_currency(raised)
        return self.money.subtract(raised)

    def is_reached(self, raised: Money) -> bool:
        self._check_currency(raised)
        return raised.amount >= self.amount

    def is_exceeded(self, raised: Money) -> bool:
        self._check_currency(raised)
        return raised.amount > self.amount

    # Milestones

    def milestones(self) -> dict[int, Money]:
        return {pct: self.money.percentage(pct) for pct in MILESTONE_PERCENTAGES}

    def has_milestone_been_reached(self, raised: Money, percentage: int) -> bool:
        if percentage < 1 or percentage > 100:
            raise ValueError("Milestone percentage must be between 1 and 100")
        self._check_currency(raised)
        return raised.amount >= self.amount * Decimal(percentage) / _HUNDRED

    # Comparison

    def equals(self, other: FundraisingTarget) -> bool:
        return self.money.equals(other.money)

    def is_greater_than(self, other: FundraisingTarget) -> bool:
        return self.money.greater_than(other.money)

    def format(self) -> str:
        return self.money.format()

    def to_dict(self) -> dict[str, object]:
        return {
            "amount": str(self.amount),
            "currency": self.currency,
            "formatted": self.format(),
            "is_achievable": self.is_achievable,
            "is_mega_campaign": self.is_mega_campaign,
            "requires_approval": self.requires_approval,
            "milestones": {pct: m.format() for pct, m in self.milestones().items()},
        }

    def _check_currency(self, raised: Money) -> None:
        if raised.currency != self.currency:
            raise CurrencyMismatchError(_TARGET_CURRENCY_MISMATCH)

    def __str__(self) -> str:
        return self.format()


# ---------------------------------------------------------------------------
# Goal
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Goal:
    """Target/current accumulator without the target range rules.

    add_amount() returns a new Goal; the instance itself never changes.
    """

    target_amount: Money
    current_amount: Money

    def __post_init__(self) -> None:
        if not self.target_amount.is_positive():
            raise ValueError("Goal target amount must be positive")
        if self.target_amount.currency != self.current_amount.currency:
            raise CurrencyMismatchError("Goal target and current amounts must have the same currency")

    @classmethod
    def create(
        cls,
        target: Decimal | int | float | str,
        current: Decimal | int | float | str = 0,
        currency: str = "USD",
    ) -> Goal:
        return cls(Money(to_decimal(target), currency), Money(to_decimal(current), currency))

    @property
    def currency(self) -> str:
        return self.target_amount.currency

    @property
    def progress_percentage(self) -> float:
        ratio = self.current_amount.amount / self.target_amount.amount * _HUNDRED
        return float(min(_HUNDRED, ratio))

    @property
    def remaining_amount(self) -> Money:
        return self.target_amount.subtract(self.current_amount)

    @property
    def has_reached_target(self) -> bool:
        return self.current_amount.amount >= self.target_amount.amount

    def add_amount(self, amount: Money) -> Goal:
        if amount.currency != self.currency:
            raise CurrencyMismatchError("Cannot add amount with different currency to goal")
        return replace(self, current_amount=self.current_amount.add(amount))

    def equals(self, other: Goal) -> bool:
        return self.target_amount.equals(other.target_amount) and self.current_amount.equals(
            other.current_amount
        )

    def __str__(self) -> str:
        return f"{self.current_amount.format()} / {self.target_amount.format()} ({self.progress_percentage:.1f}%)"


# ---------------------------------------------------------------------------
# TimeRemaining
# ---------------------------------------------------------------------------

_MICROS_PER_MINUTE = 60 * 1_000_000
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE
_MICROS_PER_DAY = 24 * _MICROS_PER_HOUR

# No deadline behaves like "never urgent".
NO_DEADLINE_HORIZON = timedelta(days=36525)

_URGENCY_COLORS: dict[str, str] = {
    "expired": "red",
    "critical": "red",
    "urgent": "orange",
    "warning": "yellow",
    "normal": "green",
}


def _truncated_units(delta: timedelta, unit_micros: int) -> int:
    """Whole units in `delta`, truncated toward zero (never floored)."""
    micros = delta // timedelta(microseconds=1)
    whole = abs(micros) // unit_micros
    return whole if micros >= 0 else -whole


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


@dataclass(frozen=True)
class TimeRemaining:
    """Deadline vs. reference instant. Nothing stored besides the two instants.

    Both datetimes must be naive or both timezone-aware. When they share the
    same tzinfo the difference is wall-clock (a DST change does not shorten the
    day); otherwise it is the absolute difference between instants.
    """

    end_date: datetime
    current_date: datetime | None = None

    def __post_init__(self) -> None:
        current = self.current_date
        if current is None:
            # Only clock read in the domain.
            current = datetime.now(self.end_date.tzinfo)
            object.__setattr__(self, "current_date", current)
        if (self.end_date.tzinfo is None) != (current.tzinfo is None):
            raise ValueError("end_date and current_date must both be naive or both timezone-aware")

    @classmethod
    def from_campaign(cls, record: object, current_date: datetime | None = None) -> TimeRemaining:
        """Build from any record exposing `end_date`. No deadline -> ~100 years out."""
        tz = current_date.tzinfo if current_date is not None else None
        end_date = parse_datetime(record_value(record, "end_date"), tz)
        if end_date is None:
            base = current_date if current_date is not None else datetime.now()
            end_date = base + NO_DEADLINE_HORIZON
        return cls(end_date, current_date)

    @property
    def _delta(self) -> timedelta:
        # current_date is always set by __post_init__
        return self.end_date - cast(datetime, self.current_date)

    @property
    def days_remaining(self) -> int:
        return _truncated_units(self._delta, _MICROS_PER_DAY)

    @property
    def hours_remaining(self) -> int:
        return _truncated_units(self._delta, _MICROS_PER_HOUR)

    @property
    def minutes_remaining(self) -> int:
        return _truncated_units(self._delta, _MICROS_PER_MINUTE)

    @property
    def is_expired(self) -> bool:
        """Instant comparison, independent of the day rounding used for display."""
        return self._delta < timedelta(0)

    def is_expiring_soon(self, threshold_days: int = 7) -> bool:
        return not self.is_expired and self.days_remaining <= threshold_days

    @property
    def time_remaining_text(self) -> str:
        if self.is_expired:
            return "Expired"
        days = self.days_remaining
        if days >= 1:
            return f"{_plural(days, 'day')} remaining"
        hours = self.hours_remaining
        if hours >= 1:
            return f"{_plural(hours, 'hour')} remaining"
        return f"{_plural(self.minutes_remaining, 'minute')} remaining"

    @property
    def urgency_level(self) -> str:
        if self.is_expired:
            return "expired"
        days = self.days_remaining
        if days <= 1:
            return "critical"
        if days <= 3:
            return "urgent"
        if days <= 7:
            return "warning"
        return "normal"

    @property
    def urgency_color(self) -> str:
        return _URGENCY_COLORS[self.urgency_level]

    def to_dict(self) -> dict[str, object]:
        return {
            "end_date": self.end_date.isoformat(),
            "days_remaining": self.days_remaining,
            "hours_remaining": self.hours_remaining,
            "minutes_remaining": self.minutes_remaining,
            "is_expired": self.is_expired,
            "is_expiring_soon": self.is_expiring_soon(),
            "text": self.time_remaining_text,
            "urgency_level": self.urgency_level,
            "urgency_color": self.urgency_color,
        }
