"""API Client Abstractions for archive operations.

All HTTP functionality is contained within dedicated API client classes; the
tenant clients only describe which remote operations they expose.
"""

from .auth import AuthenticationService, StaticTokenProvider
from .base_client import (
    ArchiveAPIClient,
    APIClientError,
    ArchiveRequestError,
    AuthenticationError,
    MalformedResponseError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    UnexpectedResultError,
)
from .factory import ARCHIVE_CLIENTS, create_archive_client
from .file_extensions import get_file_extension
from .models import AccessToken, ArchiveErrorMessage, ArchivePayload
from .operations import ArchiveOperation, ArchiveOperationsClient
from .vestfold_client import VestfoldArchiveClient
from .vfk_client import VFKArchiveClient

__all__ = [
    # Base client
    "ArchiveAPIClient",
    "APIClientError",
    "ArchiveRequestError",
    "AuthenticationError",
    "MalformedResponseError",
    "NetworkConnectionError",
    "NetworkError",
    "NetworkTimeoutError",
    "UnexpectedResultError",
    # Authentication
    "AuthenticationService",
    "StaticTokenProvider",
    # Models
    "AccessToken",
    "ArchiveErrorMessage",
    "ArchivePayload",
    # Tenant clients
    "ArchiveOperation",
    "ArchiveOperationsClient",
    "VFKArchiveClient",
    "VestfoldArchiveClient",
    "ARCHIVE_CLIENTS",
    "create_archive_client",
    # File extensions
    "get_file_extension",
]
