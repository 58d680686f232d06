"""This module provides a service for identifying file types."""

import magic
from caritas_sobral.providers.logging import Logger, LoggingProvider

MIME_TO_EXTENSION = {
    "application/pdf": "pdf",
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class FileTypeProvider:
    """A provider for inferring file types from their content.

    Uploaded files are checked against their bytes instead of the browser's
    declared content type or the file name, which are both user controlled.
    """

    def __init__(self) -> None:
        """Initializes the FileTypeProvider."""
        self.logger: Logger = LoggingProvider().get_logger()

    def infer_mime_type(self, content: bytes) -> str | None:
        """Infers the MIME type of a file from its content.

        Args:
            content: The byte content of the file.

        Returns:
            The MIME type (e.g., "application/pdf"), or None if the type
            could not be determined.
        """
        if not content:
            return None
        try:
            return str(magic.from_buffer(content, mime=True))
        except Exception as e:
            self.logger.error(f"Failed to infer file type: {e}", exc_info=True)
            return None

    def infer_extension(self, content: bytes) -> str | None:
        """Infers the file extension from its content.

        Args:
            content: The byte content of the file.

        Returns:
            The inferred file extension without the dot (e.g., "pdf"), or
            None if the type is unknown or not one the site accepts.
        """
        mime_type = self.infer_mime_type(content)
        if mime_type is None:
            return None
        return MIME_TO_EXTENSION.get(mime_type)
