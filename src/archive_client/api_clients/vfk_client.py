"""VFK tenant archive client."""

from .operations import ArchiveOperationsClient


class VFKArchiveClient(ArchiveOperationsClient):
    """Archive client for the VFK tenant.

    Supports case and document creation, case and project listing, sign-off
    and enterprise/private person synchronization.
    """

    variant = "vfk"
