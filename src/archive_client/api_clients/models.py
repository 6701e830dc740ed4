"""Wire models exchanged with the archive service."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python


class ArchivePayload(BaseModel):
    """Envelope posted to the default archive route."""

    model_config = ConfigDict(frozen=True)

    service: str = Field(..., min_length=1, description="Remote service name")
    method: str = Field(..., min_length=1, description="Remote method name")
    parameter: Optional[Any] = Field(
        None, description="Opaque caller-supplied parameter object"
    )


class ArchiveErrorMessage(BaseModel):
    """Error body returned by the archive service on non-success status."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(..., description="Human-readable failure description")
    data: Optional[Any] = Field(None, description="Optional failure details")


class AccessToken(BaseModel):
    """Bearer token issued by an authentication provider."""

    token: str = Field(..., description="Bearer token value")
    expires_on: Optional[datetime] = Field(None, description="Token expiry time")


def to_json_value(value: Any) -> Any:
    """Convert a caller-supplied object to plain JSON-compatible data.

    Accepts dicts, lists, scalars, pydantic models and dataclasses.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return to_jsonable_python(value, by_alias=True)
