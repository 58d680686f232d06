"""This module defines the models for physical assets and their movements."""

import re
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from uuid import UUID

from caritas_sobral.models.forms import blank_to_none
from pydantic import BaseModel, field_validator

THOUSANDS_ONLY = re.compile(r"\d{1,3}(\.\d{3})+")

EARLIEST_MOVEMENT_DATE = date(1900, 1, 1)


class TipoBem(StrEnum):
    """The asset categories offered by the asset form."""

    TECNOLOGIA = "Tecnologia / TI"
    MOVEIS = "Móveis e Utensílios"
    VEICULOS = "Veículos"
    MAQUINAS = "Máquinas e Equipamentos"
    IMOVEIS = "Imóveis"
    OUTROS = "Outros"


class EstadoConservacao(StrEnum):
    """The condition of an asset."""

    NOVO = "novo"
    BOM = "bom"
    REGULAR = "regular"
    DANIFICADO = "danificado"
    INSERVIVEL = "inservivel"

    @property
    def label(self) -> str:
        """The human-readable name of the condition."""
        return ESTADO_LABELS[self]


ESTADO_LABELS = {
    EstadoConservacao.NOVO: "Novo",
    EstadoConservacao.BOM: "Bom",
    EstadoConservacao.REGULAR: "Regular",
    EstadoConservacao.DANIFICADO: "Danificado",
    EstadoConservacao.INSERVIVEL: "Inservível",
}


class BemPatrimonial(BaseModel):
    """An asset read from the database.

    The `localizacao_atual`, `responsavel_atual` and
    `data_ultima_movimentacao` fields mirror the most recent movement and are
    only written by the movement registration procedure.
    """

    id: UUID
    tipo: str
    nome: str
    numero_serie: str | None = None
    numero_tombamento: str
    estado: EstadoConservacao
    descricao: str | None = None
    valor: Decimal = Decimal("0")
    foto_url: str | None = None
    localizacao_atual: str | None = None
    responsavel_atual: str | None = None
    data_ultima_movimentacao: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BemPatrimonialForm(BaseModel):
    """The payload submitted by the asset create and edit forms."""

    tipo: TipoBem
    nome: str
    numero_serie: str | None = None
    numero_tombamento: str
    estado: EstadoConservacao = EstadoConservacao.BOM
    descricao: str | None = None
    valor: Decimal = Decimal("0")

    @field_validator("nome", "numero_tombamento", mode="before")
    @classmethod
    def strip_required(cls, value: object) -> object:
        """Strips required text fields, rejecting blank ones."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Campo obrigatório.")
        return value

    @field_validator("tipo", mode="before")
    @classmethod
    def check_tipo(cls, value: object) -> object:
        """Reports a missing category with a friendly message."""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("O tipo é obrigatório.")
        return value

    @field_validator("numero_serie", "descricao", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        """Treats untouched optional inputs as missing."""
        return blank_to_none(value)

    @field_validator("valor", mode="before")
    @classmethod
    def parse_valor(cls, value: object) -> object:
        """Accepts `1234.56` as well as the Brazilian `1.234,56` and `1.234` notations.

        A dot followed by groups of exactly three digits and no comma is a
        thousands separator.
        """
        if isinstance(value, str):
            value = value.strip() or "0"
            if "," in value or THOUSANDS_ONLY.fullmatch(value):
                value = value.replace(".", "").replace(",", ".")
        return value

    @field_validator("valor")
    @classmethod
    def check_valor(cls, value: Decimal) -> Decimal:
        """Rejects negative amounts."""
        if value < 0:
            raise ValueError("O valor não pode ser negativo.")
        return value


class Movimentacao(BaseModel):
    """One entry of the append-only movement history of an asset."""

    id: UUID
    bem_id: UUID
    setor: str
    responsavel: str
    data_movimentacao: date
    created_at: datetime | None = None


class MovimentacaoForm(BaseModel):
    """The payload submitted by the movement form.

    The latest acceptable date depends on "today" in the reference timezone,
    so it is checked by the service rather than here.
    """

    setor: str
    responsavel: str
    data_movimentacao: date

    @field_validator("setor", "responsavel", mode="before")
    @classmethod
    def strip_required(cls, value: object) -> object:
        """Strips required text fields, rejecting blank ones."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Campo obrigatório.")
        return value

    @field_validator("data_movimentacao")
    @classmethod
    def check_not_too_old(cls, value: date) -> date:
        """Rejects dates before 1900-01-01."""
        if value < EARLIEST_MOVEMENT_DATE:
            raise ValueError("A data não pode ser anterior a 01/01/1900.")
        return value


class RelatorioFiltros(BaseModel):
    """The filters of the asset report."""

    tipo: str | None = None
    estado: EstadoConservacao | None = None
    localizacao_atual: str | None = None

    @field_validator("tipo", "estado", "localizacao_atual", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        """Treats untouched filters as missing."""
        return blank_to_none(value)
