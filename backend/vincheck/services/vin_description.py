"""
VIN description lookups and the decode entry point.

Decodes a validated VIN into region/country/make/model year using the
offline tables in vincheck.data.wmi_registry. No network lookups.
"""

import logging
from dataclasses import dataclass

from vincheck.config import settings
from vincheck.data.wmi_registry import (
    lookup_country,
    lookup_manufacturer,
    lookup_model_year,
    lookup_region,
)
from vincheck.services.vin import VIN, parse_vin
from vincheck.services.vin_validator import InvalidVINError

logger = logging.getLogger(__name__)


@dataclass
class VINDescription:
    vin: str
    wmi: str
    vds: str
    vis: str
    region: str | None = None
    country: str | None = None
    manufacturer: str | None = None
    vehicle_parameters: str | None = None
    model_year: int | None = None
    factory_code: str | None = None
    serial_number: str | None = None


@dataclass
class VINDecodeResult:
    vin: str
    description: VINDescription | None = None
    error_kind: str | None = None
    error: str | None = None


# WMI: first character is the zone, first two the country, all three the make
def get_region(vin: VIN) -> str | None:
    return lookup_region(vin.wmi)


def get_manufacturer_country(vin: VIN) -> str | None:
    return lookup_country(vin.wmi)


def get_manufacturer(vin: VIN) -> str | None:
    return lookup_manufacturer(vin.wmi)


def get_vehicle_parameters(vin: VIN) -> str:
    """VDS attributes (model, body, engine, ...) without the check character."""
    return vin.vds[:5]


def get_model_year(vin: VIN) -> int | None:
    """
    Model year from position 10.

    A letter at position 7 places the year in the 2010-2039 cycle, a digit
    in 1980-2009 (the North American passenger-car convention).
    """
    alphabetic_cycle = vin.full[6].isalpha()
    return lookup_model_year(vin.model_year_code, alphabetic_cycle)


def get_factory_code(vin: VIN) -> str:
    return vin.plant_code


def get_serial_number(vin: VIN) -> str:
    return vin.serial_number


def describe_vin(vin: VIN) -> VINDescription:
    return VINDescription(
        vin=vin.full,
        wmi=vin.wmi,
        vds=vin.vds,
        vis=vin.vis,
        region=get_region(vin),
        country=get_manufacturer_country(vin),
        manufacturer=get_manufacturer(vin),
        vehicle_parameters=get_vehicle_parameters(vin),
        model_year=get_model_year(vin),
        factory_code=get_factory_code(vin),
        serial_number=get_serial_number(vin),
    )


def decode_vin(raw: str, normalize: bool | None = None) -> VINDecodeResult:
    """
    Validate and describe a VIN.

    Invalid input never raises; the result carries error_kind/error instead.
    normalize defaults to settings.normalize_input.
    """
    if normalize is None:
        normalize = settings.normalize_input

    try:
        vin = parse_vin(raw, normalize=normalize)
    except InvalidVINError as e:
        logger.debug(f"VIN rejected ({e.kind.value}): {raw!r}")
        return VINDecodeResult(vin=e.vin, error_kind=e.kind.value, error=str(e))

    description = describe_vin(vin)
    logger.info(f"Decoded VIN {vin}: {description.manufacturer or 'unknown make'} {description.model_year or ''}".strip())
    return VINDecodeResult(vin=vin.full, description=description)
