"""This module defines the use cases for calls for proposals (editais)."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from caritas_sobral.exceptions.errors import NotFoundError, ValidationFailedError
from caritas_sobral.models.editais import Edital, EditalForm, EditalStatus, EditalView
from caritas_sobral.models.forms import field_errors
from caritas_sobral.models.pagination import Page, clamp_page
from caritas_sobral.providers.cache import QueryCache
from caritas_sobral.providers.date import DateProvider
from caritas_sobral.providers.logging import Logger, LoggingProvider
from caritas_sobral.repositories.editais import EditaisRepository
from caritas_sobral.services.edital_status import can_set_in_progress, derive_status, resolve_status_for_write
from caritas_sobral.services.remote import remote_operation
from caritas_sobral.services.uploads import UploadedFile, UploadService
from pydantic import ValidationError

CACHE_ENTITY = "editais"


class EditaisService:
    """Lists, creates, updates and deletes editais.

    Every status shown by this service goes through `derive_status`, and
    every status it writes goes through `resolve_status_for_write`.
    """

    logger: Logger

    def __init__(
        self,
        repository: EditaisRepository,
        upload_service: UploadService,
        cache: QueryCache,
        date_provider: DateProvider,
    ) -> None:
        self.logger = LoggingProvider().get_logger()
        self.repository = repository
        self.upload_service = upload_service
        self.cache = cache
        self.date_provider = date_provider

    def to_view(self, edital: Edital) -> EditalView:
        """Pairs an edital with its derived status for today."""
        today = self.date_provider.today()
        return EditalView(
            edital=edital,
            display_status=derive_status(edital.status, edital.data_finalizacao, today),
        )

    def list_admin(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        status: EditalStatus | None = None,
    ) -> Page[EditalView]:
        """Lists editais for the admin area, newest first.

        The status filter matches the stored status.

        Args:
            page: The requested page.
            page_size: The number of rows per page.
            busca: An optional substring of the name.
            status: An optional stored status.

        Returns:
            The requested page, with derived statuses for display.
        """
        page = clamp_page(page)
        filters = {"scope": "admin", "busca": busca, "status": status, "page_size": page_size}

        def load() -> Page[Edital]:
            with remote_operation("carregar os editais"):
                return self.repository.list_page(page, page_size, busca=busca, status=status)

        result = self.cache.get_or_load(CACHE_ENTITY, filters, page, load)
        return Page[EditalView](
            items=[self.to_view(edital) for edital in result.items],
            count=result.count,
            page=result.page,
            page_size=result.page_size,
        )

    def list_public(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        status: EditalStatus | None = None,
    ) -> Page[EditalView]:
        """Lists editais for the public page, most recently published first.

        Unlike the admin list, the status filter matches the derived status,
        so an edital whose deadline passed is found under "Finalizado" even
        if it is still stored as "Aberto".

        Args:
            page: The requested page.
            page_size: The number of rows per page.
            busca: An optional substring of the name.
            status: An optional derived status.

        Returns:
            The requested page.
        """
        page = clamp_page(page)

        def load() -> list[Edital]:
            with remote_operation("carregar os editais"):
                return self.repository.list_for_public(busca=busca)

        editais = self.cache.get_or_load(CACHE_ENTITY, {"scope": "public", "busca": busca}, 0, load)
        views = [self.to_view(edital) for edital in editais]
        if status:
            views = [view for view in views if view.display_status is status]

        offset = Page.offset_for(page, page_size)
        return Page[EditalView](
            items=views[offset : offset + page_size],
            count=len(views),
            page=page,
            page_size=page_size,
        )

    def get(self, edital_id: UUID) -> Edital:
        """Fetches one edital.

        Raises:
            NotFoundError: If it does not exist.
        """
        with remote_operation("carregar o edital"):
            edital = self.repository.get_by_id(edital_id)
        if edital is None:
            raise NotFoundError("Edital", edital_id)
        return edital

    def _validate(self, data: Mapping[str, Any]) -> EditalForm:
        try:
            form = EditalForm.model_validate(dict(data))
        except ValidationError as e:
            raise ValidationFailedError(field_errors(e)) from e

        if form.status is EditalStatus.IN_PROGRESS:
            if not can_set_in_progress(form.data_finalizacao, self.date_provider.today()):
                raise ValidationFailedError(
                    {"status": '"Em andamento" só pode ser escolhido após a data de finalização.'}
                )
        return form

    def _values(self, form: EditalForm, documento_url: str | None) -> dict[str, Any]:
        status = resolve_status_for_write(form.status, form.data_finalizacao, self.date_provider.today())
        return {
            "nome": form.nome,
            "data_publicacao": form.data_publicacao,
            "status": status.value,
            "data_finalizacao": form.data_finalizacao,
            "documento_url": documento_url,
            "descricao": form.descricao,
        }

    def create(self, data: Mapping[str, Any], documento: UploadedFile | None) -> Edital:
        """Creates an edital.

        Args:
            data: The submitted form fields.
            documento: The PDF, which is required.

        Returns:
            The stored edital.

        Raises:
            ValidationFailedError: If a field is invalid or the PDF is missing.
            UploadError: If the PDF is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        try:
            form = self._validate(data)
        except ValidationFailedError as e:
            if documento is None:
                e.errors.setdefault("documento", "O documento do edital é obrigatório.")
            raise
        if documento is None:
            raise ValidationFailedError({"documento": "O documento do edital é obrigatório."})

        documento_url = self.upload_service.upload_edital_document(documento)
        values = self._values(form, documento_url)
        with remote_operation("salvar o edital"):
            edital = self.repository.create(values)
        self.cache.invalidate(CACHE_ENTITY)
        self.logger.info(f"Edital {edital.id} created with status {edital.status}.")
        return edital

    def update(self, edital_id: UUID, data: Mapping[str, Any], documento: UploadedFile | None) -> Edital:
        """Updates an edital, keeping its document unless a new one is sent.

        Raises:
            NotFoundError: If the edital does not exist.
            ValidationFailedError: If a field is invalid.
            UploadError: If the new PDF is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        current = self.get(edital_id)
        form = self._validate(data)
        documento_url = current.documento_url
        if documento is not None:
            documento_url = self.upload_service.upload_edital_document(documento)

        values = self._values(form, documento_url)
        with remote_operation("atualizar o edital"):
            edital = self.repository.update(edital_id, values)
        if edital is None:
            raise NotFoundError("Edital", edital_id)
        self.cache.invalidate(CACHE_ENTITY)
        return edital

    def delete(self, edital_id: UUID) -> None:
        """Deletes an edital.

        Raises:
            NotFoundError: If the edital does not exist.
        """
        with remote_operation("excluir o edital"):
            deleted = self.repository.delete(edital_id)
        if not deleted:
            raise NotFoundError("Edital", edital_id)
        self.cache.invalidate(CACHE_ENTITY)
