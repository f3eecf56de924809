# fundraising/domain/campaign/repository.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import CampaignRecord
from .enums import CampaignStatus


class CampaignRepository(Protocol):
    def find_by_id(self, campaign_id: int) -> CampaignRecord | None: ...

    def find_by_ids(self, campaign_ids: Sequence[int]) -> list[CampaignRecord]: ...

    def find_by_organization_id(self, organization_id: int) -> list[CampaignRecord]: ...

    def find_by_status(self, status: CampaignStatus) -> list[CampaignRecord]: ...

    def find_by_user_id(self, user_id: int) -> list[CampaignRecord]: ...
