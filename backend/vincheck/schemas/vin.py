"""
Pydantic schemas for VIN API requests and responses.
"""

from pydantic import BaseModel, Field


class VINValidationResponse(BaseModel):
    """Outcome of validating a single VIN."""

    vin: str
    valid: bool
    error_kind: str | None = None  # "invalid_length", "illegal_character", ...
    error: str | None = None
    check_character: str | None = None
    expected_check_character: str | None = None  # only when the checksum is computable


class VINSections(BaseModel):
    wmi: str
    vds: str
    vis: str


class VINDescriptionResponse(BaseModel):
    """Decoded VIN details from offline reference tables."""

    region: str | None = None
    country: str | None = None
    manufacturer: str | None = None
    vehicle_parameters: str | None = None
    model_year: int | None = None
    factory_code: str | None = None
    serial_number: str | None = None


class VINDecodeResponse(BaseModel):
    vin: str
    sections: VINSections | None = None
    description: VINDescriptionResponse | None = None
    error_kind: str | None = None
    error: str | None = None


class VINBatchRequest(BaseModel):
    vins: list[str] = Field(default_factory=list)


class VINBatchResponse(BaseModel):
    results: list[VINValidationResponse] = Field(default_factory=list)
    valid_count: int = 0
    invalid_count: int = 0
