"""
Google Cloud Storage client for gcsnav.

Handles all HTTP interactions with the Cloud Storage JSON API.
Every failure leaves this module as one of the gcsnav error types.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import quote

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from ..config.gcp import BucketInfo, GcpConfiguration
from ..core.errors import ConfigurationError, DeleteError, ListingError, TransferError
from ..core.formatting import DELIMITER
from ..core.logging import debug_log


@dataclass
class StorageClientConfig:
    """Configuration for StorageClient."""
    timeout: int = 60
    page_size: int = 1000
    chunk_size: int = 32768


def _error_message(exc: Exception) -> str:
    """Short, user-facing description of a failed request."""
    if isinstance(exc, requests.exceptions.HTTPError) and exc.response is not None:
        response = exc.response
        try:
            detail = response.json().get("error", {}).get("message", "")
        except ValueError:
            detail = ""
        return f"HTTP {response.status_code}: {detail or response.reason}"
    return str(exc) or type(exc).__name__


class StorageClient:
    """
    Cloud Storage JSON API client.

    Credentials are checked when the client is built. The authorized
    session is created on first use and reused for every call in the session.
    """

    API_BASE = "https://storage.googleapis.com/storage/v1"
    UPLOAD_BASE = "https://storage.googleapis.com/upload/storage/v1"
    SCOPES = ["https://www.googleapis.com/auth/devstorage.read_write"]

    def __init__(
        self,
        configuration: GcpConfiguration,
        config: Optional[StorageClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the storage client.

        Args:
            configuration: Loaded GCP configuration (credentials + buckets)
            config: Client tuning (timeouts, page size)
            session: Pre-built session (tests); default is created lazily

        Raises:
            ConfigurationError: if the service account credentials are unusable
        """
        self.configuration = configuration
        self.config = config or StorageClientConfig()
        self._credentials = None if session is not None else self._load_credentials()
        self._session = session
        self._api_calls = 0

    @property
    def api_calls(self) -> int:
        """Total API calls made by this client."""
        return self._api_calls

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def _load_credentials(self) -> service_account.Credentials:
        try:
            return service_account.Credentials.from_service_account_info(
                self.configuration.credentials, scopes=self.SCOPES
            )
        except (ValueError, KeyError) as e:
            raise ConfigurationError(
                f"Invalid service account credentials in {self.configuration.credentials_file}: {e}"
            ) from e

    def _create_session(self) -> requests.Session:
        debug_log(f"STORAGE | session created for configuration {self.configuration.name}")
        return AuthorizedSession(self._credentials)

    def _bucket_url(self, bucket: str) -> str:
        return f"{self.API_BASE}/b/{quote(bucket, safe='')}/o"

    def _object_url(self, bucket: str, name: str) -> str:
        return f"{self._bucket_url(bucket)}/{quote(name, safe='')}"

    def _upload_url(self, bucket: str) -> str:
        return f"{self.UPLOAD_BASE}/b/{quote(bucket, safe='')}/o"

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """Make a request and raise on HTTP errors."""
        timeout = kwargs.pop("timeout", self.config.timeout)
        response = self.session.request(method, url, timeout=timeout, **kwargs)
        self._api_calls += 1
        response.raise_for_status()
        return response

    def _iter_pages(self, bucket: str, prefix: str, delimiter: Optional[str]) -> Iterator[dict]:
        """Yield raw listing pages until nextPageToken runs out."""
        page_token = None

        while True:
            params = {
                "prefix": prefix,
                "maxResults": self.config.page_size,
                "fields": "nextPageToken,prefixes,items(name,size)",
            }
            if delimiter:
                params["delimiter"] = delimiter
            if page_token:
                params["pageToken"] = page_token

            response = self._request("GET", self._bucket_url(bucket), params=params)
            data = response.json()
            yield data

            page_token = data.get("nextPageToken")
            if not page_token:
                break

    def list_objects(self, bucket: str, prefix: str) -> dict:
        """
        List folders and objects directly under a prefix.

        Args:
            bucket: Bucket name
            prefix: Folder prefix ("" for root, otherwise "/"-terminated)

        Returns:
            {"prefixes": [...], "items": [{"name": ..., "size": ...}, ...]},
            merged over all pages, in API order

        Raises:
            ListingError: on any request failure
        """
        prefixes: list[str] = []
        items: list[dict] = []
        try:
            for page in self._iter_pages(bucket, prefix, DELIMITER):
                prefixes.extend(page.get("prefixes", []))
                items.extend(page.get("items", []))
        except (requests.exceptions.RequestException, ValueError, GoogleAuthError) as e:
            raise ListingError(f"{bucket}/{prefix}: {_error_message(e)}") from e

        debug_log(f"LIST | gs://{bucket}/{prefix}: {len(prefixes)} prefixes, {len(items)} objects")
        return {"prefixes": prefixes, "items": items}

    def download_object(self, bucket: str, remote_path: str, local_path: Path) -> Path:
        """
        Download an object to a local file.

        Writes to a temp file next to the target and renames on success, so
        a failed download never leaves a partial file under the final name.

        Raises:
            TransferError: on request or file system failure
        """
        local_path = Path(local_path)
        tmp_path = local_path.with_name(f"_download_{local_path.name}")
        try:
            response = self._request(
                "GET", self._object_url(bucket, remote_path),
                params={"alt": "media"},
                stream=True,
            )
            with response, open(tmp_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                    if chunk:
                        f.write(chunk)
            tmp_path.replace(local_path)
        except (requests.exceptions.RequestException, OSError, GoogleAuthError) as e:
            tmp_path.unlink(missing_ok=True)
            raise TransferError(_error_message(e)) from e

        debug_log(f"DOWNLOAD | gs://{bucket}/{remote_path} -> {local_path}")
        return local_path

    def upload_object(self, bucket: str, local_path, remote_path: str) -> None:
        """
        Upload a local file to an object.

        Relative local paths are resolved against the working directory.

        Raises:
            TransferError: if the file is missing/unreadable or the request fails
        """
        path = Path(local_path).expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        if not path.is_file():
            raise TransferError(f"File not found: {path}")

        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            with open(path, "rb") as f:
                self._request(
                    "POST", self._upload_url(bucket),
                    params={"uploadType": "media", "name": remote_path},
                    headers={"Content-Type": content_type},
                    data=f,
                )
        except (requests.exceptions.RequestException, OSError, GoogleAuthError) as e:
            raise TransferError(_error_message(e)) from e

        debug_log(f"UPLOAD | {path} -> gs://{bucket}/{remote_path}")

    def create_folder(self, bucket: str, prefix: str) -> None:
        """
        Create a zero-byte folder marker object.

        Creating a marker that already exists simply overwrites it.

        Raises:
            TransferError: on request failure
        """
        if not prefix.endswith(DELIMITER):
            prefix += DELIMITER
        try:
            self._request(
                "POST", self._upload_url(bucket),
                params={"uploadType": "media", "name": prefix},
                headers={"Content-Type": "application/x-directory"},
                data=b"",
            )
        except (requests.exceptions.RequestException, GoogleAuthError) as e:
            raise TransferError(_error_message(e)) from e

        debug_log(f"MKDIR | gs://{bucket}/{prefix}")

    def delete_object(self, bucket: str, path: str) -> None:
        """
        Delete a single object.

        Raises:
            DeleteError: on request failure (including a missing object)
        """
        try:
            self._request("DELETE", self._object_url(bucket, path))
        except (requests.exceptions.RequestException, GoogleAuthError) as e:
            raise DeleteError(_error_message(e)) from e

        debug_log(f"DELETE | gs://{bucket}/{path}")

    def delete_objects_by_prefix(self, bucket: str, prefix: str) -> int:
        """
        Delete every object whose key starts with prefix (recursive).

        The folder marker, if any, is deleted with the rest. A prefix that
        matches nothing deletes nothing and returns 0.

        Returns:
            Number of objects deleted

        Raises:
            DeleteError: on empty/non-folder prefix or request failure
        """
        if not prefix or not prefix.endswith(DELIMITER):
            raise DeleteError(f"Refusing to delete by non-folder prefix: {prefix!r}")

        names = []
        try:
            for page in self._iter_pages(bucket, prefix, delimiter=None):
                names.extend(item["name"] for item in page.get("items", []))
        except (requests.exceptions.RequestException, ValueError, GoogleAuthError) as e:
            raise DeleteError(_error_message(e)) from e

        deleted = 0
        for name in names:
            try:
                self._request("DELETE", self._object_url(bucket, name))
            except (requests.exceptions.RequestException, GoogleAuthError) as e:
                raise DeleteError(f"{_error_message(e)} after deleting {deleted} of {len(names)}") from e
            deleted += 1

        debug_log(f"DELETE | gs://{bucket}/{prefix}: {deleted} objects")
        return deleted

    def list_buckets(self, configuration: Optional[GcpConfiguration] = None) -> list[BucketInfo]:
        """
        Buckets offered for navigation.

        Uses the configuration's "buckets" list, falling back to its
        defaultBucket. No API call is made.
        """
        configuration = configuration or self.configuration
        if configuration.buckets:
            return list(configuration.buckets)
        if configuration.default_bucket:
            return [BucketInfo(configuration.default_bucket)]
        return []
