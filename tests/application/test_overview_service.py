# tests/application/test_overview_service.py
from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

import pytest

from fundraising.application.services.overview_service import CampaignOverviewService
from fundraising.application.services.progress_service import CampaignNotFoundError
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.campaign.services import RECOMMENDATION_EXCELLENT
from fundraising.domain.donation.entities import DonationSignals
from fundraising.domain.shared.money import CurrencyMismatchError, Money

from campaign_fakes import NOW, make_record


@pytest.fixture()
def service(campaign_repo, donation_repo) -> CampaignOverviewService:
    return CampaignOverviewService(campaign_repo=campaign_repo, donation_repo=donation_repo)


def test_overview_of_strong_campaign(service):
    """Near-goal campaign with surging donations."""
    overview = service.overview_for_campaign(2, NOW)
    assert overview.status.value == "active"
    assert overview.time_remaining.days_remaining == 15
    assert overview.time_remaining.urgency_level == "normal"

    donation = overview.donation_progress
    assert donation.percentage == pytest.approx(95.0)
    assert donation.urgency_level == "normal"
    assert donation.momentum_indicator == "surging"
    assert donation.completion_estimate == 2
    assert donation.average_donation is not None
    assert donation.average_donation.formatted == "€100,00"
    assert not donation.needs_boost

    assert overview.target is not None
    assert overview.target.is_achievable
    assert overview.milestones_reached == [25, 50, 75]
    assert overview.metrics.performance_score == 100.0
    assert overview.health_status == "excellent"
    assert overview.recommendations == [RECOMMENDATION_EXCELLENT]


def test_overview_without_signals_uses_empty_signals(service):
    """Missing donation signals read as nothing raised yet."""
    overview = service.overview_for_campaign(1, NOW)
    assert overview.donation_progress.raised.amount == "0"
    assert overview.campaign_progress.current_amount == "2000"
    assert overview.campaign_progress.is_behind_schedule


def test_overview_of_inactive_campaign():
    """Completed campaigns report inactive urgency."""
    record = make_record(5, "10000", status=CampaignStatus.COMPLETED)
    overview = CampaignOverviewService().overview(record, DonationSignals(record.money_raised, 40), NOW)
    assert overview.donation_progress.urgency_level == "inactive"
    assert overview.campaign_progress.performance_status == "completed"
    assert overview.milestones_reached == [25, 50, 75, 100]


def test_goal_outside_target_range_has_no_target_block():
    """Legacy goals under the minimum get no target block."""
    record = make_record(3, "20", goal="50")
    overview = CampaignOverviewService().overview(record, DonationSignals(record.money_raised), NOW)
    assert overview.target is None
    assert overview.milestones_reached == []


def test_expiring_soon_threshold_is_configurable():
    """The expiring-soon window comes from the service."""
    record = make_record(3, "6000", days=20)
    signals = DonationSignals(record.money_raised)
    assert CampaignOverviewService().overview(record, signals, NOW).time_remaining.is_expiring_soon
    narrow = CampaignOverviewService(expiring_soon_days=3)
    assert not narrow.overview(record, signals, NOW).time_remaining.is_expiring_soon


def test_signals_in_other_currency_rejected():
    """Signals in another currency raise."""
    record = make_record(1, "2000")
    with pytest.raises(CurrencyMismatchError):
        CampaignOverviewService().overview(record, DonationSignals(Money(Decimal("10"), "USD")), NOW)


def test_unknown_campaign(service):
    """Unknown ids raise CampaignNotFoundError."""
    with pytest.raises(CampaignNotFoundError):
        service.overview_for_campaign(99, NOW)


def test_repository_variant_requires_repositories():
    """Lookup by id needs both repositories."""
    with pytest.raises(RuntimeError):
        CampaignOverviewService().overview_for_campaign(1, NOW)


def test_campaign_ended_hours_ago_is_expired_everywhere():
    """Ending a few hours before now reports expiry in every block, not "ending today"."""
    record = replace(make_record(1, "2000"), end_date=NOW - timedelta(hours=5))
    overview = CampaignOverviewService().overview(record, DonationSignals(record.money_raised), NOW)
    assert overview.time_remaining.is_expired
    assert overview.time_remaining.hours_remaining == -5
    assert overview.donation_progress.has_expired
    assert overview.donation_progress.days_remaining == 0
    assert overview.donation_progress.urgency_level == "expired"
    assert overview.donation_progress.urgency_color == "gray"


def test_campaign_ending_later_today_is_not_expired():
    """Five hours left is day 0 but still running."""
    record = replace(make_record(1, "2000"), end_date=NOW + timedelta(hours=5))
    overview = CampaignOverviewService().overview(record, DonationSignals(record.money_raised), NOW)
    assert not overview.time_remaining.is_expired
    assert not overview.donation_progress.has_expired
    assert overview.donation_progress.urgency_level == "critical"
    assert overview.donation_progress.is_ending_today
