# fundraising/domain/donation/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import DonationSignals


class DonationRepository(Protocol):
    def signals_for_campaign(self, campaign_id: int) -> DonationSignals: ...

    def total_donations_for_user(self, user_id: int) -> int: ...
