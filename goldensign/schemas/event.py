# goldensign/schemas/event.py
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class EventType(str, Enum):
    tournament = "tournament"
    course = "course"


def now_for(value):
    """'Agora' comparável com value: naive (hora local) ou aware (UTC)."""
    if value.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


class EventBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: EventType
    date: datetime
    max_participants: int = Field(..., ge=1, alias="maxParticipants")

    @field_validator('date', mode='before')
    def date_only_to_midnight(cls, v):
        """Aceita 'YYYY-MM-DD' como meia-noite desse dia."""
        if isinstance(v, str) and len(v.strip()) == 10:
            return v.strip() + "T00:00:00"
        return v

    class Config:
        populate_by_name = True
        extra = "forbid"
        str_strip_whitespace = True


class EventCreate(EventBase):
    @field_validator('date')
    def date_in_future(cls, v):
        if v <= now_for(v):
            raise ValueError("A data do evento deve estar no futuro")
        return v


class Event(EventBase):
    id: str = Field(..., min_length=1)
    created_at: datetime = Field(..., alias="createdAt")

    @model_validator(mode='before')
    @classmethod
    def drop_legacy_inscriptions(cls, data):
        # A versão do navegador gravava um array 'inscriptions' (sempre vazio) em cada evento
        if isinstance(data, dict) and "inscriptions" in data:
            data = {k: v for k, v in data.items() if k != "inscriptions"}
        return data

    class Config:
        populate_by_name = True
        extra = "forbid"
        str_strip_whitespace = True
        frozen = True
