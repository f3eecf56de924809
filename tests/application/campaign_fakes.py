# tests/application/campaign_fakes.py
from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.donation.entities import DonationSignals
from fundraising.domain.shared.money import Money

NOW = datetime(2025, 6, 16, tzinfo=UTC)
START = datetime(2025, 6, 1, tzinfo=UTC)


class InMemoryCampaignRepo:
    """Fake CampaignRepository backed by a list. user_id lives in a side table."""

    def __init__(self, records: Sequence[CampaignRecord], owners: dict[int, int] | None = None) -> None:
        self._records = list(records)
        self._owners = owners or {}

    def find_by_id(self, campaign_id: int) -> CampaignRecord | None:
        return next((r for r in self._records if r.id == campaign_id), None)

    def find_by_ids(self, campaign_ids: Sequence[int]) -> list[CampaignRecord]:
        return [r for r in self._records if r.id in campaign_ids]

    def find_by_organization_id(self, organization_id: int) -> list[CampaignRecord]:
        return [r for r in self._records if r.organization_id == organization_id]

    def find_by_status(self, status: CampaignStatus) -> list[CampaignRecord]:
        return [r for r in self._records if r.status is status]

    def find_by_user_id(self, user_id: int) -> list[CampaignRecord]:
        return [r for r in self._records if self._owners.get(r.id) == user_id]


class InMemoryDonationRepo:
    def __init__(self, signals: dict[int, DonationSignals], user_totals: dict[int, int] | None = None) -> None:
        self._signals = signals
        self._user_totals = user_totals or {}

    def signals_for_campaign(self, campaign_id: int) -> DonationSignals:
        return self._signals.get(campaign_id, DonationSignals.none())

    def total_donations_for_user(self, user_id: int) -> int:
        return self._user_totals.get(user_id, 0)


def make_record(
    campaign_id: int,
    current: str,
    goal: str = "10000",
    status: CampaignStatus = CampaignStatus.ACTIVE,
    days: int = 30,
    donations: int = 10,
    organization_id: int | None = 1,
) -> CampaignRecord:
    return CampaignRecord(
        id=campaign_id,
        goal_amount=Decimal(goal),
        current_amount=Decimal(current),
        donations_count=donations,
        status=status,
        start_date=START,
        end_date=START + timedelta(days=days),
        title=f"Campaign {campaign_id}",
        organization_id=organization_id,
    )
