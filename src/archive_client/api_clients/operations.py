"""Typed archive operations shared by every tenant.

Each operation is a fixed (service, method) pair wrapped around an opaque
caller parameter, with an expectation on the shape of the result.
"""

import logging
from typing import Any, Dict, List, NamedTuple

from .base_client import ArchiveAPIClient, UnexpectedResultError, format_json
from .models import ArchivePayload

logger = logging.getLogger(__name__)


class ArchiveOperation(NamedTuple):
    """Remote service/method pair and the phrase used in failure messages."""

    service: str
    method: str
    description: str

    def payload(self, parameter: Any) -> ArchivePayload:
        return ArchivePayload(
            service=self.service, method=self.method, parameter=parameter
        )


CREATE_CASE = ArchiveOperation("CaseService", "CreateCase", "create case")
UPDATE_CASE = ArchiveOperation("CaseService", "UpdateCase", "update case")
GET_CASES = ArchiveOperation("CaseService", "GetCases", "get cases")
CREATE_DOCUMENT = ArchiveOperation(
    "DocumentService", "CreateDocument", "create document"
)
GET_DOCUMENTS = ArchiveOperation("DocumentService", "GetDocuments", "get documents")
SIGN_OFF = ArchiveOperation("DocumentService", "SignOffDocument", "sign off")
GET_PROJECTS = ArchiveOperation("ProjectService", "GetProjects", "get projects")


class ArchiveOperationsClient(ArchiveAPIClient):
    """Archive client exposing the operations common to all tenants."""

    @staticmethod
    def _unexpected_result(
        description: str, operation: str, label: str, value: Any
    ) -> UnexpectedResultError:
        message = f"Failed to {description} with {label} {format_json(value)}"
        logger.error(message)
        return UnexpectedResultError(message, operation=operation, parameter=value)

    async def _single(self, operation: ArchiveOperation, parameter: Any) -> Any:
        """Run an operation that must produce a non-null result."""
        result = await self.archive(operation.payload(parameter))
        if result is not None:
            return result

        raise self._unexpected_result(
            operation.description, operation.method, "Parameter", parameter
        )

    async def _list(self, operation: ArchiveOperation, parameter: Any) -> List[Any]:
        """Run an operation that must produce a JSON array."""
        result = await self.archive(operation.payload(parameter))
        if isinstance(result, list):
            return result

        raise self._unexpected_result(
            operation.description, operation.method, "Parameter", parameter
        )

    async def _custom(self, description: str, payload: Any, route: str) -> Any:
        """Run a custom-route call that must produce a non-null result."""
        result = await self.archive_custom(payload, route)
        if result is not None:
            return result

        raise self._unexpected_result(description, route, "Payload", payload)

    async def create_case(self, parameter: Any) -> Any:
        """Create a case (CaseService.CreateCase)."""
        return await self._single(CREATE_CASE, parameter)

    async def create_document(self, parameter: Any) -> Any:
        """Create a document (DocumentService.CreateDocument)."""
        return await self._single(CREATE_DOCUMENT, parameter)

    async def get_cases(self, parameter: Any) -> List[Any]:
        """List cases matching the parameter (CaseService.GetCases)."""
        return await self._list(GET_CASES, parameter)

    async def get_projects(self, parameter: Any) -> List[Any]:
        """List projects matching the parameter (ProjectService.GetProjects)."""
        return await self._list(GET_PROJECTS, parameter)

    async def sign_off(self, parameter: Any) -> Any:
        """Sign off a document (DocumentService.SignOffDocument)."""
        return await self._single(SIGN_OFF, parameter)

    async def sync_enterprise(self, organization_nr: str) -> Any:
        """Synchronize an enterprise contact by organization number."""
        payload: Dict[str, Any] = {"orgnr": organization_nr}
        return await self._custom(
            "sync enterprise", payload, self.config.sync_enterprise_route
        )

    async def sync_private_person(self, private_person: Any) -> Any:
        """Synchronize a private person contact; the object is posted as-is."""
        return await self._custom(
            "sync private person",
            private_person,
            self.config.sync_private_person_route,
        )
