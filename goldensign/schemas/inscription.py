# goldensign/schemas/inscription.py
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field


class InscriptionStatus(str, Enum):
    # Único status produzido hoje; inscrições são aceitas na hora
    accepted = "accepted"


class InscriptionBase(BaseModel):
    event_id: str = Field(..., min_length=1, alias="eventId")
    name: str = Field(..., min_length=1)
    # Registros já gravados podem ter emails que o navegador aceitou e o email-validator não
    email: str = Field(..., min_length=1)

    class Config:
        populate_by_name = True
        extra = "forbid"
        str_strip_whitespace = True


class InscriptionCreate(InscriptionBase):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr


class Inscription(InscriptionBase):
    id: str = Field(..., min_length=1)
    status: InscriptionStatus = InscriptionStatus.accepted
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True
        extra = "forbid"
        str_strip_whitespace = True
        frozen = True
