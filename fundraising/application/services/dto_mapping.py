# fundraising/application/services/dto_mapping.py
#
# Conversions between domain values and the pydantic DTOs.
#
# Design decisions:
#   - Kept apart from the services so every service renders Money, status and
#     progress the same way.
#   - Input DTOs become domain objects here, so domain validation (negative
#     money, unknown status, bad currency) raises ValueError before any service
#     logic runs.
from __future__ import annotations

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.campaign.progress import CampaignProgress, DonationProgress
from fundraising.domain.campaign.services import PerformanceMetrics
from fundraising.domain.campaign.value_objects import TimeRemaining
from fundraising.domain.donation.entities import DonationSignals
from fundraising.domain.shared.money import Money

from ..dtos.campaign_dto import CampaignInputDTO, DonationSignalsInputDTO
from ..dtos.money_dto import MoneyDTO
from ..dtos.progress_dto import (
    CampaignProgressDTO,
    DonationProgressDTO,
    PerformanceMetricsDTO,
    TimeRemainingDTO,
)
from ..dtos.status_dto import StatusDTO


def money_dto(money: Money) -> MoneyDTO:
    return MoneyDTO(amount=str(money.amount), currency=money.currency, formatted=money.format())


def optional_money_dto(money: Money | None) -> MoneyDTO | None:
    return money_dto(money) if money is not None else None


def status_dto(status: CampaignStatus) -> StatusDTO:
    return StatusDTO(
        value=status.value,
        label=status.label,
        color=status.color,
        description=status.description,
        is_active=status.is_active,
        can_accept_donations=status.can_accept_donations,
        is_final=status.is_final,
        requires_approval=status.requires_approval,
        transitions=[t.value for t in status.valid_transitions],
    )


def time_remaining_dto(time_remaining: TimeRemaining, expiring_soon_days: int = 7) -> TimeRemainingDTO:
    return TimeRemainingDTO(
        end_date=time_remaining.end_date.isoformat(),
        days_remaining=time_remaining.days_remaining,
        hours_remaining=time_remaining.hours_remaining,
        minutes_remaining=time_remaining.minutes_remaining,
        is_expired=time_remaining.is_expired,
        is_expiring_soon=time_remaining.is_expiring_soon(expiring_soon_days),
        text=time_remaining.time_remaining_text,
        urgency_level=time_remaining.urgency_level,
        urgency_color=time_remaining.urgency_color,
    )


def donation_progress_dto(progress: DonationProgress) -> DonationProgressDTO:
    return DonationProgressDTO(
        raised=money_dto(progress.raised),
        goal=money_dto(progress.goal),
        remaining=money_dto(progress.remaining),
        percentage=progress.percentage,
        donor_count=progress.donor_count,
        days_remaining=progress.days_remaining,
        is_active=progress.is_active,
        has_expired=progress.has_expired,
        is_ending_soon=progress.is_ending_soon,
        is_ending_today=progress.is_ending_today,
        has_reached_goal=progress.has_reached_goal,
        urgency_level=progress.urgency_level,
        urgency_color=progress.urgency_color,
        momentum_indicator=progress.momentum_indicator,
        needs_boost=progress.needs_boost,
        completion_estimate=progress.completion_estimate,
        average_donation=optional_money_dto(progress.effective_average_donation),
        largest_donation=optional_money_dto(progress.largest_donation),
    )


def campaign_progress_dto(progress: CampaignProgress) -> CampaignProgressDTO:
    return CampaignProgressDTO(**progress.to_dict())  # type: ignore[arg-type]


def metrics_dto(metrics: PerformanceMetrics) -> PerformanceMetricsDTO:
    return PerformanceMetricsDTO(**metrics.to_dict())


def record_from_input(dto: CampaignInputDTO, default_currency: str = "EUR") -> CampaignRecord:
    return CampaignRecord(
        id=dto.id,
        goal_amount=dto.goal_amount,
        current_amount=dto.current_amount,
        donations_count=dto.donations_count,
        status=CampaignStatus.from_string(dto.status),
        start_date=dto.start_date,
        end_date=dto.end_date,
        currency=dto.currency or default_currency,
        title=dto.title,
        organization_id=dto.organization_id,
    )


def signals_from_input(dto: DonationSignalsInputDTO | None, record: CampaignRecord) -> DonationSignals:
    """Missing signals fall back to the record's own raised total."""
    currency = record.currency
    if dto is None:
        return DonationSignals(record.money_raised, donor_count=record.donations_count)

    def _optional(value: object) -> Money | None:
        return Money(value, currency) if value is not None else None  # type: ignore[arg-type]

    raised = dto.raised if dto.raised is not None else record.current_amount
    return DonationSignals(
        raised=Money(raised, currency),
        donor_count=dto.donor_count,
        largest_donation=_optional(dto.largest_donation),
        recent_momentum=_optional(dto.recent_momentum),
        average_donation=_optional(dto.average_donation),
    )
