"""
VIN validation and decoding API routes.

Everything is computed locally: checksum validation plus offline
WMI/model-year tables.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from vincheck.config import settings
from vincheck.schemas.vin import (
    VINBatchRequest,
    VINBatchResponse,
    VINDecodeResponse,
    VINDescriptionResponse,
    VINSections,
    VINValidationResponse,
)
from vincheck.services.vin import normalize_vin
from vincheck.services.vin_description import decode_vin
from vincheck.services.vin_validator import (
    CHECK_POSITION,
    VINErrorKind,
    check_vin,
    compute_check_character,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vin", tags=["vin"])


def _validation_response(raw: str) -> VINValidationResponse:
    vin = normalize_vin(raw) if settings.normalize_input else raw
    kind = check_vin(vin)

    response = VINValidationResponse(vin=vin, valid=kind is None)
    if kind is not None:
        response.error_kind = kind.value
        response.error = kind.message
    # Position 9 and the expected value only make sense past the structural checks
    if kind in (None, VINErrorKind.ILLEGAL_CHECKSUM_CHARACTER, VINErrorKind.INVALID_CHECKSUM):
        response.check_character = vin[CHECK_POSITION - 1]
        response.expected_check_character = compute_check_character(vin)
    return response


@router.get("/validate", response_model=VINValidationResponse)
async def validate_vin_endpoint(
    vin: str = Query(..., description="VIN to validate"),
):
    """Check length, characters and check digit of a VIN."""
    return _validation_response(vin)


@router.post("/validate/batch", response_model=VINBatchResponse)
async def validate_vin_batch_endpoint(request: VINBatchRequest):
    """Validate up to max_batch_size VINs in one call."""
    if len(request.vins) > settings.max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"Batch of {len(request.vins)} VINs exceeds limit of {settings.max_batch_size}",
        )

    results = [_validation_response(raw) for raw in request.vins]
    valid_count = sum(1 for r in results if r.valid)
    logger.info(f"Validated batch of {len(results)} VINs ({valid_count} valid)")
    return VINBatchResponse(
        results=results,
        valid_count=valid_count,
        invalid_count=len(results) - valid_count,
    )


@router.get("/decode", response_model=VINDecodeResponse)
async def decode_vin_endpoint(
    vin: str = Query(..., description="17-character VIN to decode"),
):
    """Decode a VIN to region/country/make/model year from offline tables."""
    result = decode_vin(vin)
    if result.description is None:
        return VINDecodeResponse(vin=result.vin, error_kind=result.error_kind, error=result.error)

    d = result.description
    return VINDecodeResponse(
        vin=result.vin,
        sections=VINSections(wmi=d.wmi, vds=d.vds, vis=d.vis),
        description=VINDescriptionResponse(
            region=d.region,
            country=d.country,
            manufacturer=d.manufacturer,
            vehicle_parameters=d.vehicle_parameters,
            model_year=d.model_year,
            factory_code=d.factory_code,
            serial_number=d.serial_number,
        ),
    )
