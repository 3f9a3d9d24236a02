"""
Request and response schemas for the document filler.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError

FIELD_KEYS = ("fullName", "address", "date", "price")


class DocumentRequest(BaseModel):
    """
    Body of POST /generate-document.

    Every field is optional at the schema level so that a missing value is
    reported as the same caller error as an empty one.
    """
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(None, alias="fullName")
    address: Optional[str] = None
    date: Optional[str] = Field(None, description="Display text, not parsed")
    price: Optional[str] = Field(None, description="Display text, not parsed")


class FieldSet(BaseModel):
    """
    The four validated values drawn onto the template.

    Attributes:
        full_name: Full name of the buyer
        address: Property address
        date: Date as displayable text
        price: Price as displayable text
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_name: str = Field(..., alias="fullName")
    address: str
    date: str
    price: str

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "FieldSet":
        """
        Build a field set from raw request data.

        Raises:
            ValidationError: If any of the four fields is missing or falsy
        """
        if not isinstance(data, Mapping):
            raise ValidationError()
        values = {key: data.get(key) for key in FIELD_KEYS}
        if not all(values.values()):
            raise ValidationError()
        return cls(**{key: str(value) for key, value in values.items()})

    def value(self, key: str) -> str:
        """Look up a field by its wire name (e.g. ``fullName``)."""
        return self.model_dump(by_alias=True)[key]


class DownloadReference(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    download_url: str = Field(..., alias="downloadUrl")
    filename: str


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Document generated successfully"
    download_url: str = Field(..., alias="downloadUrl")
    filename: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "Server is running"


class EndpointsInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    health: str = "/health"
    generate_document: str = Field("/generate-document", alias="generateDocument")


class RootResponse(BaseModel):
    status: str = "success"
    message: str = "Backend is running!"
    timestamp: str
    endpoints: EndpointsInfo = Field(default_factory=EndpointsInfo)

    def as_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
