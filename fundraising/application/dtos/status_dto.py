# fundraising/application/dtos/status_dto.py
from pydantic import BaseModel


class StatusDTO(BaseModel):
    value: str
    label: str
    color: str
    description: str
    is_active: bool
    can_accept_donations: bool
    is_final: bool
    requires_approval: bool
    transitions: list[str]


class TransitionCheckDTO(BaseModel):
    source: str
    target: str
    allowed: bool
    message: str | None
