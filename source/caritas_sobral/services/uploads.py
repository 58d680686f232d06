"""This module validates and stores the files attached to records."""

import time
import uuid
from dataclasses import dataclass

from caritas_sobral.exceptions.errors import UploadError
from caritas_sobral.providers.config import Config, ConfigProvider
from caritas_sobral.providers.file_type import FileTypeProvider
from caritas_sobral.providers.gcs import GcsProvider
from caritas_sobral.providers.logging import Logger, LoggingProvider
from caritas_sobral.services.remote import remote_operation

DOCUMENT_TYPES = {"application/pdf"}
NEWS_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}
ASSET_PHOTO_TYPES = {"image/jpeg", "image/png", "image/webp"}


@dataclass(frozen=True)
class UploadedFile:
    """A file received from a form.

    Attributes:
        filename: The name given by the browser. Only used in messages.
        content: The raw bytes.
    """

    filename: str
    content: bytes

    @property
    def size(self) -> int:
        """The size in bytes."""
        return len(self.content)


class UploadService:
    """Checks uploaded files against the accepted types and stores them.

    The type of a file is detected from its bytes. The size and type checks
    run before anything is sent to the storage, and the storage upload runs
    before any database row is written, so a rejected upload never leaves a
    partial record behind.
    """

    logger: Logger
    config: Config

    def __init__(self, gcs_provider: GcsProvider, file_type_provider: FileTypeProvider) -> None:
        self.logger = LoggingProvider().get_logger()
        self.config = ConfigProvider.get_config()
        self.gcs_provider = gcs_provider
        self.file_type_provider = file_type_provider

    @staticmethod
    def _unique_suffix() -> str:
        """Returns `<epoch milliseconds>-<8 hex characters>`."""
        return f"{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:8]}"

    def _check(self, upload: UploadedFile, accepted: set[str], max_bytes: int, formats_label: str) -> str:
        """Validates size and type, returning the detected MIME type."""
        if upload.size == 0:
            raise UploadError(f"O arquivo {upload.filename} está vazio.")
        if upload.size > max_bytes:
            max_mb = max_bytes / (1024 * 1024)
            raise UploadError(f"O arquivo {upload.filename} excede o tamanho máximo de {max_mb:.0f}MB.")
        mime_type = self.file_type_provider.infer_mime_type(upload.content)
        if mime_type not in accepted:
            self.logger.warning(f"Rejected upload {upload.filename!r} detected as {mime_type}.")
            raise UploadError(f"Formato não suportado. Apenas {formats_label} são aceitos.")
        return mime_type

    def _store(self, bucket: str, blob_name: str, upload: UploadedFile, mime_type: str) -> str:
        with remote_operation("enviar o arquivo"):
            return self.gcs_provider.upload_file(
                bucket,
                blob_name,
                upload.content,
                content_type=mime_type,
                cache_control=self.config.UPLOAD_CACHE_CONTROL,
            )

    def upload_edital_document(self, upload: UploadedFile) -> str:
        """Stores the PDF of a call for proposals.

        Args:
            upload: The uploaded file.

        Returns:
            The public URL of the stored document.

        Raises:
            UploadError: If the file is empty, too large or not a PDF.
            RemoteOperationError: If the storage rejects the upload.
        """
        mime_type = self._check(upload, DOCUMENT_TYPES, self.config.UPLOAD_MAX_DOCUMENT_BYTES, "arquivos PDF")
        blob_name = f"edital-{self._unique_suffix()}.pdf"
        return self._store(self.config.GCP_GCS_BUCKET_EDITAIS, blob_name, upload, mime_type)

    def upload_noticia_image(self, upload: UploadedFile) -> str:
        """Stores the cover image of a news article.

        Args:
            upload: The uploaded file.

        Returns:
            The public URL of the stored image.

        Raises:
            UploadError: If the file is empty, too large or not an image.
            RemoteOperationError: If the storage rejects the upload.
        """
        mime_type = self._check(
            upload, NEWS_IMAGE_TYPES, self.config.UPLOAD_MAX_IMAGE_BYTES, "imagens JPG, PNG, WEBP ou GIF"
        )
        extension = self.file_type_provider.infer_extension(upload.content)
        blob_name = f"noticia-{self._unique_suffix()}.{extension}"
        return self._store(self.config.GCP_GCS_BUCKET_NOTICIAS, blob_name, upload, mime_type)

    def upload_bem_photo(self, upload: UploadedFile) -> str:
        """Stores the photo of an asset.

        Args:
            upload: The uploaded file.

        Returns:
            The public URL of the stored photo.

        Raises:
            UploadError: If the file is empty, too large or not an image.
            RemoteOperationError: If the storage rejects the upload.
        """
        mime_type = self._check(
            upload, ASSET_PHOTO_TYPES, self.config.UPLOAD_MAX_IMAGE_BYTES, "os formatos .jpg, .jpeg, .png e .webp"
        )
        extension = self.file_type_provider.infer_extension(upload.content)
        blob_name = f"public/{uuid.uuid4()}.{extension}"
        return self._store(self.config.GCP_GCS_BUCKET_PATRIMONIO, blob_name, upload, mime_type)
