"""Factory for tenant-specific archive clients."""

import logging
from typing import Dict, Optional, Type

from ..config import ArchiveConfig, load_config
from .auth import AuthenticationService
from .operations import ArchiveOperationsClient
from .vestfold_client import VestfoldArchiveClient
from .vfk_client import VFKArchiveClient

logger = logging.getLogger(__name__)

ARCHIVE_CLIENTS: Dict[str, Type[ArchiveOperationsClient]] = {
    VFKArchiveClient.variant: VFKArchiveClient,
    VestfoldArchiveClient.variant: VestfoldArchiveClient,
}


def create_archive_client(
    variant: str,
    auth_service: AuthenticationService,
    config: Optional[ArchiveConfig] = None,
) -> ArchiveOperationsClient:
    """Create the archive client for a tenant.

    Args:
        variant: Tenant name ("vfk" or "vestfold", case-insensitive)
        auth_service: Provider issuing bearer tokens
        config: Archive configuration; loaded from the environment when omitted

    Returns:
        Tenant-specific archive client

    Raises:
        ValueError: If the variant is unknown
        ArchiveConfigurationError: If configuration is missing or invalid
    """
    client_class = ARCHIVE_CLIENTS.get(variant.lower())
    if client_class is None:
        raise ValueError(
            f"Unknown archive variant {variant!r}. "
            f"Expected one of: {', '.join(sorted(ARCHIVE_CLIENTS))}"
        )

    if config is None:
        config = load_config()

    logger.debug(f"Creating {client_class.__name__} for {config.base_url}")
    return client_class(config=config, auth_service=auth_service)
