# fundraising/application/services/status_service.py
from __future__ import annotations

from fundraising.domain.campaign.enums import CampaignStatus

from ..dtos.status_dto import StatusDTO, TransitionCheckDTO
from .dto_mapping import status_dto


class StatusService:
    def list_statuses(self) -> list[StatusDTO]:
        return [status_dto(s) for s in CampaignStatus]

    def check_transition(self, source_raw: str, target_raw: str) -> TransitionCheckDTO:
        """Raises ValueError when either status string is unknown."""
        source = CampaignStatus.from_string(source_raw)
        target = CampaignStatus.from_string(target_raw)
        allowed = source.can_transition_to(target)
        return TransitionCheckDTO(
            source=source.value,
            target=target.value,
            allowed=allowed,
            message=None if allowed else source.transition_error_message(target),
        )
