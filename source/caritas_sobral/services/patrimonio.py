"""This module defines the use cases for the asset inventory (patrimônio)."""

import csv
import io
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any
from uuid import UUID

from caritas_sobral.exceptions.errors import NotFoundError, ValidationFailedError
from caritas_sobral.models.forms import field_errors
from caritas_sobral.models.pagination import Page, clamp_page
from caritas_sobral.models.patrimonio import (
    BemPatrimonial,
    BemPatrimonialForm,
    EstadoConservacao,
    Movimentacao,
    MovimentacaoForm,
    RelatorioFiltros,
)
from caritas_sobral.providers.cache import QueryCache
from caritas_sobral.providers.date import DateProvider
from caritas_sobral.providers.logging import Logger, LoggingProvider
from caritas_sobral.repositories.bens_patrimoniais import BensPatrimoniaisRepository
from caritas_sobral.repositories.movimentacoes import MovimentacoesRepository
from caritas_sobral.services.remote import remote_operation
from caritas_sobral.services.uploads import UploadedFile, UploadService
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

BENS_ENTITY = "bens_patrimoniais"
MOVIMENTACOES_ENTITY = "movimentacoes"
DUPLICATE_TOMBAMENTO_MESSAGE = "Já existe um bem com este número de tombamento."

REPORT_COLUMNS = [
    ("numero_tombamento", "Tombamento"),
    ("nome", "Nome"),
    ("tipo", "Tipo"),
    ("estado", "Estado"),
    ("localizacao_atual", "Localização"),
    ("responsavel_atual", "Responsável"),
    ("data_ultima_movimentacao", "Última movimentação"),
    ("valor", "Valor"),
]


def format_currency(value: Decimal | float | int | None) -> str:
    """Formats an amount in Brazilian reais, such as "R$ 1.234,56".

    Args:
        value: The amount.

    Returns:
        The formatted amount. Missing values are shown as zero.
    """
    amount = Decimal(str(value or 0)).quantize(Decimal("0.01"))
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {formatted}"


class PatrimonioService:
    """Manages assets, their movements and the inventory report."""

    logger: Logger

    def __init__(
        self,
        bens_repository: BensPatrimoniaisRepository,
        movimentacoes_repository: MovimentacoesRepository,
        upload_service: UploadService,
        cache: QueryCache,
        date_provider: DateProvider,
    ) -> None:
        self.logger = LoggingProvider().get_logger()
        self.bens_repository = bens_repository
        self.movimentacoes_repository = movimentacoes_repository
        self.upload_service = upload_service
        self.cache = cache
        self.date_provider = date_provider

    def list_bens(
        self,
        page: int,
        page_size: int,
        busca: str | None = None,
        estado: EstadoConservacao | None = None,
    ) -> Page[BemPatrimonial]:
        """Lists assets for the admin area.

        Args:
            page: The requested page.
            page_size: The number of rows per page.
            busca: An optional substring of the name or tag number.
            estado: An optional condition.

        Returns:
            The requested page.
        """
        page = clamp_page(page)
        filters = {"busca": busca, "estado": estado, "page_size": page_size}

        def load() -> Page[BemPatrimonial]:
            with remote_operation("carregar os bens"):
                return self.bens_repository.list_page(page, page_size, busca=busca, estado=estado)

        return self.cache.get_or_load(BENS_ENTITY, filters, page, load)

    def get_bem(self, bem_id: UUID) -> BemPatrimonial:
        """Fetches one asset.

        Raises:
            NotFoundError: If it does not exist.
        """

        def load() -> BemPatrimonial | None:
            with remote_operation("carregar o bem"):
                return self.bens_repository.get_by_id(bem_id)

        bem = self.cache.get_or_load(BENS_ENTITY, {"id": bem_id}, 0, load)
        if bem is None:
            raise NotFoundError("Bem patrimonial", bem_id)
        return bem

    def list_movimentacoes(self, bem_id: UUID) -> list[Movimentacao]:
        """Returns the movement history of an asset, most recent first."""

        def load() -> list[Movimentacao]:
            with remote_operation("carregar o histórico de movimentações"):
                return self.movimentacoes_repository.list_for_bem(bem_id)

        return self.cache.get_or_load(MOVIMENTACOES_ENTITY, {"bem_id": bem_id}, 0, load)

    def _validate_bem(self, data: Mapping[str, Any], exclude_id: UUID | None = None) -> BemPatrimonialForm:
        try:
            form = BemPatrimonialForm.model_validate(dict(data))
        except ValidationError as e:
            raise ValidationFailedError(field_errors(e)) from e

        with remote_operation("verificar o número de tombamento"):
            duplicated = self.bens_repository.tombamento_exists(form.numero_tombamento, exclude_id=exclude_id)
        if duplicated:
            raise ValidationFailedError({"numero_tombamento": DUPLICATE_TOMBAMENTO_MESSAGE})
        return form

    @staticmethod
    def _values(form: BemPatrimonialForm, foto_url: str | None) -> dict[str, Any]:
        return {
            "tipo": form.tipo.value,
            "nome": form.nome,
            "numero_serie": form.numero_serie,
            "numero_tombamento": form.numero_tombamento,
            "estado": form.estado.value,
            "descricao": form.descricao,
            "valor": form.valor,
            "foto_url": foto_url,
        }

    def _save(self, action: str, write: Callable[[], BemPatrimonial | None]) -> BemPatrimonial | None:
        """Runs an insert or update, reporting a tag number race as a field error."""
        try:
            with remote_operation(action):
                try:
                    return write()
                except IntegrityError as e:
                    if "numero_tombamento" in str(e.orig):
                        raise ValidationFailedError({"numero_tombamento": DUPLICATE_TOMBAMENTO_MESSAGE}) from e
                    raise
        finally:
            self.cache.invalidate(BENS_ENTITY)

    def create_bem(self, data: Mapping[str, Any], foto: UploadedFile | None) -> BemPatrimonial:
        """Registers a new asset.

        Args:
            data: The submitted form fields.
            foto: An optional photo.

        Returns:
            The stored asset.

        Raises:
            ValidationFailedError: If a field is invalid or the tag number is taken.
            UploadError: If the photo is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        form = self._validate_bem(data)
        foto_url = self.upload_service.upload_bem_photo(foto) if foto is not None else None
        values = self._values(form, foto_url)
        return self._save("salvar o bem", lambda: self.bens_repository.create(values))

    def update_bem(self, bem_id: UUID, data: Mapping[str, Any], foto: UploadedFile | None) -> BemPatrimonial:
        """Updates an asset, keeping its photo unless a new one is sent.

        Raises:
            NotFoundError: If the asset does not exist.
            ValidationFailedError: If a field is invalid or the tag number is taken.
            UploadError: If the photo is rejected.
            RemoteOperationError: If the storage or the database fails.
        """
        current = self.get_bem(bem_id)
        form = self._validate_bem(data, exclude_id=bem_id)
        foto_url = current.foto_url
        if foto is not None:
            foto_url = self.upload_service.upload_bem_photo(foto)
        values = self._values(form, foto_url)
        bem = self._save("atualizar o bem", lambda: self.bens_repository.update(bem_id, values))
        if bem is None:
            raise NotFoundError("Bem patrimonial", bem_id)
        return bem

    def delete_bem(self, bem_id: UUID) -> None:
        """Deletes an asset and its movement history.

        Raises:
            NotFoundError: If the asset does not exist.
        """
        with remote_operation("excluir o bem"):
            deleted = self.bens_repository.delete(bem_id)
        if not deleted:
            raise NotFoundError("Bem patrimonial", bem_id)
        self.cache.invalidate(BENS_ENTITY)
        self.cache.invalidate(MOVIMENTACOES_ENTITY)

    def registrar_movimentacao(self, bem_id: UUID, data: Mapping[str, Any]) -> UUID:
        """Records a change of location for an asset.

        The movement is appended and the asset's current location, person in
        charge and last movement date are updated in one database
        transaction. Afterwards the cached asset and movement history are
        dropped so the next read reflects the change.

        Args:
            bem_id: The asset identifier.
            data: The submitted `setor`, `responsavel` and `data_movimentacao`.

        Returns:
            The identifier of the new movement.

        Raises:
            NotFoundError: If the asset does not exist.
            ValidationFailedError: If a field is invalid or the date is in the future.
            RemoteOperationError: If the database fails. Nothing is written.
        """
        self.get_bem(bem_id)
        try:
            form = MovimentacaoForm.model_validate(dict(data))
        except ValidationError as e:
            raise ValidationFailedError(field_errors(e)) from e
        if form.data_movimentacao > self.date_provider.today():
            raise ValidationFailedError({"data_movimentacao": "A data não pode estar no futuro."})

        with remote_operation("registrar a movimentação"):
            movimentacao_id = self.movimentacoes_repository.register(
                bem_id, form.setor, form.responsavel, form.data_movimentacao
            )
        self.cache.invalidate(MOVIMENTACOES_ENTITY)
        self.cache.invalidate(BENS_ENTITY)
        return movimentacao_id

    def relatorio(self, filtros: RelatorioFiltros) -> list[BemPatrimonial]:
        """Runs the inventory report. Always reads fresh data."""
        with remote_operation("gerar o relatório"):
            return self.bens_repository.list_for_report(filtros)

    @staticmethod
    def parse_filtros(data: Mapping[str, Any]) -> RelatorioFiltros:
        """Validates the report filters.

        Raises:
            ValidationFailedError: If the condition is not a known one.
        """
        try:
            return RelatorioFiltros.model_validate(dict(data))
        except ValidationError as e:
            raise ValidationFailedError(field_errors(e)) from e

    @staticmethod
    def relatorio_csv(bens: list[BemPatrimonial]) -> str:
        """Renders report rows as CSV for spreadsheet tools.

        Args:
            bens: The report rows.

        Returns:
            The CSV document, semicolon-separated as expected by
            Portuguese-locale spreadsheets.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=";")
        writer.writerow([label for _, label in REPORT_COLUMNS])
        for bem in bens:
            writer.writerow(
                [
                    bem.numero_tombamento,
                    bem.nome,
                    bem.tipo,
                    bem.estado.label,
                    bem.localizacao_atual or "",
                    bem.responsavel_atual or "",
                    DateProvider.format_date(bem.data_ultima_movimentacao)
                    if bem.data_ultima_movimentacao
                    else "",
                    format_currency(bem.valor),
                ]
            )
        return buffer.getvalue()
