# tests/application/conftest.py
from __future__ import annotations

from decimal import Decimal

import pytest

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.donation.entities import DonationSignals
from fundraising.domain.shared.money import Money
from campaign_fakes import NOW, InMemoryCampaignRepo, InMemoryDonationRepo, make_record


@pytest.fixture()
def records() -> list[CampaignRecord]:
    return [
        # day 15 of 30: 50% expected
        make_record(1, "2000"),
        make_record(2, "9500"),
        make_record(3, "6000", days=20),
        make_record(4, "4000", days=18),
        make_record(5, "10000", status=CampaignStatus.COMPLETED),
        make_record(6, "0", status=CampaignStatus.DRAFT, donations=0, organization_id=2),
    ]


@pytest.fixture()
def campaign_repo(records: list[CampaignRecord]) -> InMemoryCampaignRepo:
    return InMemoryCampaignRepo(records, owners={1: 100, 2: 100, 5: 100, 6: 100, 3: 200})


@pytest.fixture()
def donation_repo() -> InMemoryDonationRepo:
    return InMemoryDonationRepo(
        signals={
            2: DonationSignals(
                raised=Money(Decimal("9500"), "EUR"),
                donor_count=95,
                largest_donation=Money(Decimal("1500"), "EUR"),
                recent_momentum=Money(Decimal("400"), "EUR"),
            ),
        },
        user_totals={100: 321},
    )


@pytest.fixture()
def clock():
    return lambda: NOW
