"""This module defines the models for calls for proposals (editais)."""

from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from caritas_sobral.models.forms import blank_to_none
from pydantic import BaseModel, Field, field_validator


class EditalStatus(StrEnum):
    """The lifecycle statuses of a call for proposals, as stored."""

    OPEN = "Aberto"
    """Accepting proposals."""
    IN_PROGRESS = "Em andamento"
    """The deadline has passed and the proposals are being evaluated."""
    FINISHED = "Finalizado"
    """The deadline has passed."""
    CANCELLED = "Cancelado"
    """Cancelled by an editor. Never changed by derivation."""


class Edital(BaseModel):
    """A call for proposals read from the database.

    Attributes:
        id: The record identifier.
        nome: The display name.
        data_publicacao: The publication date.
        status: The status last chosen by an editor (or pre-derived on save).
        data_finalizacao: The optional deadline.
        documento_url: The public URL of the uploaded PDF.
        descricao: Optional free text.
        created_at: Creation instant.
        updated_at: Last update instant.
    """

    id: UUID
    nome: str
    data_publicacao: date
    status: EditalStatus
    data_finalizacao: date | None = None
    documento_url: str | None = None
    descricao: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EditalView(BaseModel):
    """An edital paired with the status every viewer must see."""

    edital: Edital
    display_status: EditalStatus


class EditalForm(BaseModel):
    """The payload submitted by the create and edit forms."""

    nome: str = Field(min_length=3)
    data_publicacao: date
    status: EditalStatus = EditalStatus.OPEN
    data_finalizacao: date | None = None
    descricao: str | None = None

    @field_validator("nome", mode="before")
    @classmethod
    def strip_nome(cls, value: object) -> object:
        """Strips surrounding whitespace and checks the minimum length."""
        if isinstance(value, str):
            value = value.strip()
            if len(value) < 3:
                raise ValueError("O nome deve ter pelo menos 3 caracteres.")
        return value

    @field_validator("data_finalizacao", "descricao", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        """Treats untouched optional inputs as missing."""
        return blank_to_none(value)
