"""This module defines the models for news articles (notícias)."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from caritas_sobral.models.forms import blank_to_none
from pydantic import BaseModel, field_validator


class Noticia(BaseModel):
    """A news article read from the database."""

    id: UUID
    titulo: str
    resumo: str
    conteudo: str | None = None
    url: str | None = None
    imagem_url: str | None = None
    data_publicacao: date
    ativo: bool = True
    autor: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LinkKind(StrEnum):
    """Where the "read more" link of a news article points to."""

    EXTERNAL = "external"
    INTERNAL = "internal"


@dataclass(frozen=True)
class NoticiaLink:
    """The resolved destination of a news article.

    Attributes:
        kind: Whether the article links out or to its own detail page.
        href: The link target.
    """

    kind: LinkKind
    href: str

    @property
    def is_external(self) -> bool:
        """Whether the link leaves the site."""
        return self.kind is LinkKind.EXTERNAL


class NoticiaForm(BaseModel):
    """The payload submitted by the news create and edit forms."""

    titulo: str
    resumo: str
    conteudo: str | None = None
    url: str | None = None
    data_publicacao: date
    ativo: bool = True
    autor: str | None = None

    @field_validator("titulo", mode="before")
    @classmethod
    def check_titulo(cls, value: object) -> object:
        """Requires a title with at least 3 characters."""
        if isinstance(value, str):
            value = value.strip()
            if len(value) < 3:
                raise ValueError("Título é obrigatório (mínimo 3 caracteres).")
        return value

    @field_validator("resumo", mode="before")
    @classmethod
    def check_resumo(cls, value: object) -> object:
        """Requires a summary with at least 5 characters."""
        if isinstance(value, str):
            value = value.strip()
            if len(value) < 5:
                raise ValueError("Resumo é obrigatório (mínimo 5 caracteres).")
        return value

    @field_validator("conteudo", "url", "autor", mode="before")
    @classmethod
    def empty_as_none(cls, value: object) -> object:
        """Treats untouched optional inputs as missing."""
        return blank_to_none(value)

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str | None) -> str | None:
        """Rejects values that cannot be a web address."""
        if value is not None and (" " in value or "." not in value):
            raise ValueError("URL inválida.")
        return value
