"""
Validated VIN value object.

A VIN instance only exists for a string that passed every check in
vin_validator; construction either succeeds completely or raises
InvalidVINError.
"""

from dataclasses import dataclass, field

from vincheck.services.vin_validator import CHECK_POSITION, validate_vin


@dataclass(frozen=True)
class VIN:
    full: str
    wmi: str = field(init=False)
    vds: str = field(init=False)
    vis: str = field(init=False)

    def __post_init__(self):
        validate_vin(self.full)
        # frozen dataclass: derived sections are set once, here
        object.__setattr__(self, "wmi", self.full[0:3])
        object.__setattr__(self, "vds", self.full[3:9])
        object.__setattr__(self, "vis", self.full[9:17])

    @classmethod
    def parse(cls, raw: str) -> "VIN":
        """Build a VIN from a raw string, propagating InvalidVINError."""
        return cls(raw)

    @property
    def check_character(self) -> str:
        return self.full[CHECK_POSITION - 1]

    @property
    def model_year_code(self) -> str:
        """Position 10, first character of the VIS."""
        return self.vis[0]

    @property
    def plant_code(self) -> str:
        """Position 11, second character of the VIS."""
        return self.vis[1]

    @property
    def serial_number(self) -> str:
        """Last six characters of the VIS."""
        return self.vis[2:]

    def __str__(self) -> str:
        return self.full


def normalize_vin(raw: str) -> str:
    """Strip surrounding whitespace and upper-case."""
    if not raw:
        return ""
    return raw.strip().upper()


def parse_vin(raw: str, normalize: bool = False) -> VIN:
    """
    Parse a VIN, optionally normalizing it first.

    Without normalize the input is taken exactly as given, so lowercase
    letters and stray whitespace are rejected.
    """
    if normalize:
        raw = normalize_vin(raw)
    return VIN.parse(raw)
