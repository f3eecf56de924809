# fundraising/application/services/user_stats_service.py
from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from fundraising.domain.campaign.entities import CampaignRecord
from fundraising.domain.campaign.enums import CampaignStatus
from fundraising.domain.campaign.repository import CampaignRepository
from fundraising.domain.campaign.stats import UserCampaignStats
from fundraising.domain.donation.repository import DonationRepository
from fundraising.domain.shared.money import CurrencyMismatchError

from ..dtos.stats_dto import UserCampaignStatsDTO

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def build_user_campaign_stats(
    records: Sequence[CampaignRecord],
    donations_total: int | None = None,
    currency: str = "EUR",
) -> UserCampaignStats:
    """Roll campaign records up into one snapshot.

    The success rate is the mean capped progress of published (non-draft)
    campaigns. Records in different currencies cannot be summed.
    """
    currencies = {r.currency for r in records}
    if len(currencies) > 1:
        raise CurrencyMismatchError("Campaigns in different currencies cannot be rolled up")
    if currencies:
        currency = currencies.pop()

    published = [r for r in records if r.status is not CampaignStatus.DRAFT and r.goal_amount > _ZERO]
    if published:
        rates = [min(_HUNDRED, r.current_amount / r.goal_amount * _HUNDRED) for r in published]
        success_rate = (sum(rates, _ZERO) / len(rates)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    else:
        success_rate = _ZERO

    if donations_total is None:
        donations_total = sum(r.donations_count for r in records)

    return UserCampaignStats(
        total_campaigns=len(records),
        active_campaigns=sum(1 for r in records if r.status is CampaignStatus.ACTIVE),
        completed_campaigns=sum(1 for r in records if r.status is CampaignStatus.COMPLETED),
        draft_campaigns=sum(1 for r in records if r.status is CampaignStatus.DRAFT),
        total_amount_raised=sum((r.current_amount for r in records), _ZERO),
        total_goal_amount=sum((r.goal_amount for r in records), _ZERO),
        total_donations=donations_total,
        average_success_rate=success_rate,
        currency=currency,
    )


def stats_dto(stats: UserCampaignStats) -> UserCampaignStatsDTO:
    return UserCampaignStatsDTO(**stats.to_dict())  # type: ignore[arg-type]


class UserStatsService:
    def __init__(
        self,
        campaign_repo: CampaignRepository,
        donation_repo: DonationRepository,
        default_currency: str = "EUR",
    ) -> None:
        self._campaign_repo = campaign_repo
        self._donation_repo = donation_repo
        self._default_currency = default_currency

    def stats_for_user(self, user_id: int) -> UserCampaignStatsDTO:
        records = self._campaign_repo.find_by_user_id(user_id)
        stats = build_user_campaign_stats(
            records,
            donations_total=self._donation_repo.total_donations_for_user(user_id),
            currency=self._default_currency,
        )
        return stats_dto(stats)
