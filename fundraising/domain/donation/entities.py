# fundraising/domain/donation/entities.py
from __future__ import annotations

from dataclasses import dataclass

from fundraising.domain.shared.money import CurrencyMismatchError, Money


@dataclass(frozen=True)
class DonationSignals:
    """Aggregate donation figures for one campaign, all in one currency.

    recent_momentum is the amount raised per day over the recent window.
    """

    raised: Money
    donor_count: int = 0
    largest_donation: Money | None = None
    recent_momentum: Money | None = None
    average_donation: Money | None = None

    def __post_init__(self) -> None:
        if self.donor_count < 0:
            raise ValueError("Donor count cannot be negative")
        for optional in (self.largest_donation, self.recent_momentum, self.average_donation):
            if optional is not None and optional.currency != self.raised.currency:
                raise CurrencyMismatchError("Donation amounts must be in the campaign currency")

    @classmethod
    def none(cls, currency: str = "EUR") -> DonationSignals:
        return cls(Money.zero(currency))

    @property
    def currency(self) -> str:
        return self.raised.currency
