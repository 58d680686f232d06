"""This module provides a Google Cloud Storage (GCS) provider.

Every uploaded file (call-for-proposals PDFs, news images, asset photos)
lives in a public bucket, so the provider also knows how to turn a blob
name into the URL stored in the database.
"""

from urllib.parse import quote

from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.logging import Logger, LoggingProvider
from google.auth.credentials import AnonymousCredentials
from google.cloud.storage import Client


class GcsProvider:
    """A provider for interacting with Google Cloud Storage."""

    _client: Client | None = None

    def __init__(self) -> None:
        """Initializes the provider."""
        self.logger: Logger = LoggingProvider().get_logger()

    def get_client(self) -> Client:
        """Returns a GCS client, creating one if it doesn't exist.

        Returns:
            A GCS client.
        """
        if not self._client:
            config = ConfigProvider.get_config()
            if config.GCP_GCS_HOST:
                self._client = Client(
                    credentials=AnonymousCredentials(),
                    project=config.GCP_PROJECT,
                    client_options={"api_endpoint": config.GCP_GCS_HOST},
                )
            else:
                self._client = Client(project=config.GCP_PROJECT)
        return self._client

    def upload_file(
        self,
        bucket_name: str,
        destination_blob_name: str,
        content: bytes,
        content_type: str,
        cache_control: str | None = None,
    ) -> str:
        """Uploads a file to a GCS bucket and returns its public URL.

        Args:
            bucket_name: The name of the GCS bucket.
            destination_blob_name: The name of the blob to create.
            content: The content of the file to upload.
            content_type: The content type of the file.
            cache_control: An optional Cache-Control header for the object.

        Returns:
            The publicly resolvable URL of the uploaded object.
        """
        self.logger.info(f"Uploading {len(content)} bytes to gs://{bucket_name}/{destination_blob_name}.")
        client = self.get_client()
        bucket = client.bucket(bucket_name)
        blob = bucket.blob(destination_blob_name)
        if cache_control:
            blob.cache_control = cache_control
        blob.upload_from_string(content, content_type=content_type, if_generation_match=0)
        return self.get_public_url(bucket_name, destination_blob_name)

    def delete_file(self, bucket_name: str, blob_name: str) -> None:
        """Deletes a blob from a GCS bucket.

        Args:
            bucket_name: The name of the GCS bucket.
            blob_name: The name of the blob to delete.
        """
        self.logger.info(f"Deleting gs://{bucket_name}/{blob_name}.")
        client = self.get_client()
        client.bucket(bucket_name).blob(blob_name).delete()

    def get_public_url(self, bucket_name: str, blob_name: str) -> str:
        """Builds the public URL for a blob.

        Args:
            bucket_name: The name of the GCS bucket.
            blob_name: The name of the blob.

        Returns:
            The public URL of the blob.
        """
        config = ConfigProvider.get_config()
        base_url = (config.GCP_GCS_PUBLIC_URL or "https://storage.googleapis.com").rstrip("/")
        return f"{base_url}/{bucket_name}/{quote(blob_name)}"
