# tests/application/test_progress_service.py
from dataclasses import replace
from datetime import timedelta

import pytest

from fundraising.application.services.progress_service import (
    CampaignNotFoundError,
    CampaignProgressService,
)
from fundraising.domain.campaign.enums import CampaignStatus

from campaign_fakes import NOW, InMemoryCampaignRepo, make_record


@pytest.fixture()
def service(campaign_repo, clock) -> CampaignProgressService:
    return CampaignProgressService(campaign_repo, clock=clock)


def test_campaign_progress(service):
    """Progress for one campaign at the injected clock."""
    progress = service.campaign_progress(1)
    assert progress.days_elapsed == 15
    assert progress.percentage == pytest.approx(20.0)
    assert progress.is_behind_schedule


def test_campaign_progress_not_found(service):
    """Unknown ids raise CampaignNotFoundError."""
    with pytest.raises(CampaignNotFoundError, match="Campaign with ID 99 not found"):
        service.campaign_progress(99)


def test_multiple_campaign_progress_skips_unknown_ids(service):
    """Unknown ids are left out of the batch."""
    result = service.multiple_campaign_progress([1, 2, 99])
    assert set(result) == {1, 2}
    assert result[2].percentage == pytest.approx(95.0)


def test_organization_summary(service):
    """Totals across an organisation's campaigns."""
    summary = service.organization_summary(1)
    assert summary.total_campaigns == 5
    assert summary.active_campaigns == 4
    assert summary.completed_campaigns == 1
    assert summary.total_goal_amount == "50000"
    assert summary.total_raised_amount == "31500"
    assert summary.overall_progress_percentage == pytest.approx(63.0)
    assert len(summary.campaigns_progress) == 5


def test_organization_summary_empty(service):
    """An organisation without campaigns sums to zero."""
    summary = service.organization_summary(999)
    assert summary.total_campaigns == 0
    assert summary.overall_progress_percentage == 0.0


def test_behind_schedule_only_active(service):
    """Only active campaigns trailing schedule are listed."""
    behind = service.behind_schedule()
    assert [b.campaign_id for b in behind] == [1, 3, 4]
    first = behind[0]
    assert first.expected_progress == 50.0
    assert first.progress_deficit == pytest.approx(30.0)
    assert first.status == "active"


def test_approaching_deadline_sorted_soonest_first(service):
    """Campaigns ending within a week, soonest first."""
    items = service.approaching_deadline()
    assert [(i.campaign_id, i.days_remaining) for i in items] == [(4, 3), (3, 5)]
    assert not items[0].is_likely_to_succeed


def test_approaching_deadline_custom_threshold(service):
    """The deadline window is configurable."""
    assert [i.campaign_id for i in service.approaching_deadline(days_threshold=4)] == [4]


def test_top_performing_sorted_by_percentage(service):
    """Active campaigns ranked by progress."""
    top = service.top_performing()
    assert [t.campaign_id for t in top] == [2, 3, 4, 1]
    assert [t.campaign_id for t in service.top_performing(limit=2)] == [2, 3]


def test_request_transition_validates(service):
    """Requested status changes go through the state machine."""
    assert service.request_transition(1, "paused") is CampaignStatus.PAUSED
    assert service.request_transition(1, CampaignStatus.COMPLETED) is CampaignStatus.COMPLETED
    with pytest.raises(ValueError, match="Cannot transition from Completed to Active status"):
        service.request_transition(5, CampaignStatus.ACTIVE)
    with pytest.raises(CampaignNotFoundError):
        service.request_transition(99, "paused")


def test_suggested_status(clock):
    """Reached goals complete, passed deadlines expire."""
    repo = InMemoryCampaignRepo(
        [
            make_record(1, "2000"),
            make_record(7, "10000"),
            make_record(8, "100", days=10),
            make_record(9, "100", days=10, status=CampaignStatus.PAUSED),
        ]
    )
    service = CampaignProgressService(repo, clock=clock)
    assert service.suggested_status(1) is None
    assert service.suggested_status(7) is CampaignStatus.COMPLETED
    assert service.suggested_status(8) is CampaignStatus.EXPIRED
    assert service.suggested_status(9) is None


@pytest.fixture()
def attention_service(clock) -> CampaignProgressService:
    repo = InMemoryCampaignRepo(
        [
            make_record(1, "500", donations=2),
            make_record(2, "6000", donations=10),
            replace(make_record(3, "3000", donations=1), start_date=NOW - timedelta(days=5)),
            replace(make_record(4, "0", donations=0), start_date=NOW - timedelta(days=3)),
            make_record(5, "100", donations=0, status=CampaignStatus.PAUSED),
        ]
    )
    return CampaignProgressService(repo, clock=clock)


def test_low_engagement(attention_service):
    """Fewer than one donation per three active days is flagged."""
    items = attention_service.low_engagement()
    assert [i.campaign_id for i in items] == [1, 3]
    first, second = items
    assert first.days_active == 15
    assert first.expected_donations == 5
    assert first.engagement_ratio == 0.4
    assert first.current_progress == pytest.approx(5.0)
    assert second.days_active == 5
    assert second.expected_donations == 2
    assert second.engagement_ratio == 0.6


def test_low_engagement_ignores_first_three_days(attention_service):
    """Three days in, no donations is not yet low engagement."""
    assert 4 not in [i.campaign_id for i in attention_service.low_engagement()]


def test_stalled_campaigns(attention_service):
    """Over a week active and under 10% of the goal."""
    items = attention_service.stalled()
    assert [i.campaign_id for i in items] == [1]
    stalled = items[0]
    assert stalled.days_active == 15
    assert stalled.current_progress == pytest.approx(5.0)
    assert stalled.current_amount == "500"
    assert stalled.days_remaining == 15


def test_needing_attention_aggregates_lists(attention_service):
    """One report with every attention list."""
    report = attention_service.needing_attention()
    assert set(report.model_dump()) == {
        "behind_schedule",
        "approaching_deadline",
        "low_engagement",
        "stalled_campaigns",
    }
    assert 1 in [b.campaign_id for b in report.behind_schedule]
    assert report.approaching_deadline == []
    assert [i.campaign_id for i in report.low_engagement] == [1, 3]
    assert [i.campaign_id for i in report.stalled_campaigns] == [1]
