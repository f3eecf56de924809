# fundraising/interfaces/api/dependencies.py
from fundraising.application.services.overview_service import CampaignOverviewService
from fundraising.application.services.status_service import StatusService
from fundraising.application.services.target_service import TargetService
from fundraising.domain.campaign.services import CampaignProgressCalculator
from fundraising.infrastructure.config import get_settings


def get_status_service() -> StatusService:
    return StatusService()


def get_target_service() -> TargetService:
    return TargetService(default_currency=get_settings().default_currency)


def get_overview_service() -> CampaignOverviewService:
    return CampaignOverviewService(
        calculator=CampaignProgressCalculator(),
        expiring_soon_days=get_settings().expiring_soon_days,
    )


def get_default_currency() -> str:
    return get_settings().default_currency
