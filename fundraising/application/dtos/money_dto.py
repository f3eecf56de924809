# fundraising/application/dtos/money_dto.py
from pydantic import BaseModel


class MoneyDTO(BaseModel):
    amount: str
    currency: str
    formatted: str
