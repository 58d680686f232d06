"""This module defines the use cases for news articles (notícias)."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from caritas_sobral.exceptions.errors import NotFoundError, ValidationFailedError
from caritas_sobral.models.forms import field_errors
from caritas_sobral.models.noticias import Noticia, NoticiaForm
from caritas_sobral.models.pagination import Page, clamp_page
from caritas_sobral.providers.cache import QueryCache
from caritas_sobral.providers.logging import Logger, LoggingProvider
from caritas_sobral.repositories.noticias import NoticiasRepository
from caritas_sobral.services.html_sanitizer import sanitize_html
from caritas_sobral.services.links import normalize_url
from caritas_sobral.services.remote import remote_operation
from caritas_sobral.services.uploads import UploadedFile, UploadService
from pydantic import ValidationError

CACHE_ENTITY = "noticias"


class NoticiasService:
    """Lists, creates, updates, hides and deletes news articles."""

    logger: Logger

    def __init__(self, repository: NoticiasRepository, upload_service: UploadService, cache: QueryCache) -> None:
        self.logger = LoggingProvider().get_logger()
        self.repository = repository
        self.upload_service = upload_service
        self.cache = cache

    def list_admin(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        ativo: bool | None = None,
    ) -> Page[Noticia]:
        """Lists articles for the admin area, most recently published first.

        Args:
            page: The requested page.
            page_size: The number of rows per page.
            busca: An optional substring of the title.
            ativo: Only visible (True) or hidden (False) articles; None for all.

        Returns:
            The requested page.
        """
        page = clamp_page(page)
        filters = {"scope": "admin", "busca": busca, "ativo": ativo, "page_size": page_size}

        def load() -> Page[Noticia]:
            with remote_operation("carregar as notícias"):
                return self.repository.list_page(page, page_size, busca=busca, ativo=ativo)

        return self.cache.get_or_load(CACHE_ENTITY, filters, page, load)

    def list_carousel(self, limit: int) -> list[Noticia]:
        """Returns the most recent visible articles for the home page."""

        def load() -> list[Noticia]:
            with remote_operation("carregar as notícias"):
                return self.repository.list_recent_active(limit)

        return self.cache.get_or_load(CACHE_ENTITY, {"scope": "carousel", "limit": limit}, 0, load)

    def get(self, noticia_id: UUID, only_active: bool = False) -> Noticia:
        """Fetches one article.

        Args:
            noticia_id: The record identifier.
            only_active: Treat hidden articles as missing (public pages).

        Raises:
            NotFoundError: If the article does not exist or is hidden.
        """
        with remote_operation("carregar a notícia"):
            noticia = self.repository.get_by_id(noticia_id, only_active=only_active)
        if noticia is None:
            raise NotFoundError("Notícia", noticia_id)
        return noticia

    @staticmethod
    def _validate(data: Mapping[str, Any]) -> NoticiaForm:
        try:
            return NoticiaForm.model_validate(dict(data))
        except ValidationError as e:
            raise ValidationFailedError(field_errors(e)) from e

    @staticmethod
    def _values(form: NoticiaForm, imagem_url: str | None) -> dict[str, Any]:
        return {
            "titulo": form.titulo,
            "resumo": form.resumo,
            "conteudo": sanitize_html(form.conteudo),
            "url": normalize_url(form.url) if form.url else None,
            "imagem_url": imagem_url,
            "data_publicacao": form.data_publicacao,
            "ativo": form.ativo,
            "autor": form.autor,
        }

    def create(self, data: Mapping[str, Any], imagem: UploadedFile | None) -> Noticia:
        """Creates an article.

        Args:
            data: The submitted form fields.
            imagem: An optional cover image.

        Returns:
            The stored article.

        Raises:
            ValidationFailedError: If a field is invalid.
            UploadError: If the image is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        form = self._validate(data)
        imagem_url = self.upload_service.upload_noticia_image(imagem) if imagem is not None else None
        with remote_operation("salvar a notícia"):
            noticia = self.repository.create(self._values(form, imagem_url))
        self.cache.invalidate(CACHE_ENTITY)
        return noticia

    def update(self, noticia_id: UUID, data: Mapping[str, Any], imagem: UploadedFile | None) -> Noticia:
        """Updates an article, keeping its image unless a new one is sent.

        Raises:
            NotFoundError: If the article does not exist.
            ValidationFailedError: If a field is invalid.
            UploadError: If the new image is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        current = self.get(noticia_id)
        form = self._validate(data)
        imagem_url = current.imagem_url
        if imagem is not None:
            imagem_url = self.upload_service.upload_noticia_image(imagem)
        with remote_operation("atualizar a notícia"):
            noticia = self.repository.update(noticia_id, self._values(form, imagem_url))
        if noticia is None:
            raise NotFoundError("Notícia", noticia_id)
        self.cache.invalidate(CACHE_ENTITY)
        return noticia

    def toggle_active(self, noticia_id: UUID) -> bool:
        """Flips the visibility of an article.

        Returns:
            The new visibility.
        """
        current = self.get(noticia_id)
        with remote_operation("atualizar a notícia"):
            self.repository.set_active(noticia_id, not current.ativo)
        self.cache.invalidate(CACHE_ENTITY)
        return not current.ativo

    def delete(self, noticia_id: UUID) -> None:
        """Deletes an article.

        Raises:
            NotFoundError: If the article does not exist.
        """
        with remote_operation("excluir a notícia"):
            deleted = self.repository.delete(noticia_id)
        if not deleted:
            raise NotFoundError("Notícia", noticia_id)
        self.cache.invalidate(CACHE_ENTITY)
