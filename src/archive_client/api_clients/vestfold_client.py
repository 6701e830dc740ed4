"""Vestfold tenant archive client."""

from typing import Any, List, Tuple

from .file_extensions import get_file_extension
from .operations import GET_DOCUMENTS, UPDATE_CASE, ArchiveOperationsClient


class VestfoldArchiveClient(ArchiveOperationsClient):
    """Archive client for the Vestfold tenant.

    Extends the common operation set with document listing, case updates and
    the archive file format classifier.
    """

    variant = "vestfold"

    async def get_documents(self, parameter: Any) -> List[Any]:
        """List documents matching the parameter (DocumentService.GetDocuments)."""
        return await self._list(GET_DOCUMENTS, parameter)

    async def update_case(self, parameter: Any) -> Any:
        """Update a case (CaseService.UpdateCase)."""
        return await self._single(UPDATE_CASE, parameter)

    def get_file_extension(self, filename: str) -> Tuple[str, str]:
        """Classify a filename into (archive format code, processing flag)."""
        return get_file_extension(filename)
