"""
VIN validation and ISO 3779 check-digit arithmetic.

Four checks run in a fixed order and the first failure wins:
- length is exactly 17
- every character is a digit or an uppercase letter other than I, O, Q
- position 9 (the check character) is a digit or X
- position 9 matches the weighted modulo-11 checksum of the whole VIN

Input is case-sensitive. Callers that want "1hgcm..." accepted must
normalize before calling (see parse_vin(normalize=True)).
"""

from enum import Enum
from types import MappingProxyType

VIN_LENGTH = 17
CHECK_POSITION = 9  # 1-indexed

LEGAL_CHARACTERS = frozenset("0123456789ABCDEFGHJKLMNPRSTUVWXYZ")
CHECK_CHARACTERS = frozenset("0123456789X")

# Transliteration of letters to numeric values (digits map to themselves)
LETTER_VALUES = MappingProxyType(
    {
        "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8,
        "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "P": 7, "R": 9,
        "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
    }
)

# Weight per position 1..17; the check character itself weighs 0
POSITION_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)


class VINErrorKind(str, Enum):
    """Why a string is not a VIN, in the order the checks run."""

    INVALID_LENGTH = "invalid_length"
    ILLEGAL_CHARACTER = "illegal_character"
    ILLEGAL_CHECKSUM_CHARACTER = "illegal_checksum_character"
    INVALID_CHECKSUM = "invalid_checksum"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    VINErrorKind.INVALID_LENGTH: "Incorrect length of VIN.",
    VINErrorKind.ILLEGAL_CHARACTER: "VIN contains illegal characters.",
    VINErrorKind.ILLEGAL_CHECKSUM_CHARACTER: "VIN checksum character is illegal.",
    VINErrorKind.INVALID_CHECKSUM: "VIN has invalid checksum.",
}


class InvalidVINError(ValueError):
    """Raised when a string fails VIN validation."""

    def __init__(self, kind: VINErrorKind, vin: str = ""):
        self.kind = kind
        self.vin = vin
        super().__init__(kind.message)


def has_correct_length(vin: str) -> bool:
    return len(vin) == VIN_LENGTH


def contains_only_legal_characters(vin: str) -> bool:
    return all(ch in LEGAL_CHARACTERS for ch in vin)


def has_legal_check_character(vin: str) -> bool:
    return vin[CHECK_POSITION - 1] in CHECK_CHARACTERS


def transliterate(char: str) -> int:
    """Numeric value of a single legal VIN character."""
    if "0" <= char <= "9":
        return int(char)
    return LETTER_VALUES[char]


def compute_checksum(vin: str) -> int:
    """
    Weighted sum of all 17 positions modulo 11.

    Expects a 17-character string of legal characters; the character at
    the check position does not contribute (weight 0).
    """
    total = sum(transliterate(ch) * weight for ch, weight in zip(vin, POSITION_WEIGHTS))
    return total % 11


def compute_check_character(vin: str) -> str:
    """Expected check character for a VIN: a digit, or X for remainder 10."""
    remainder = compute_checksum(vin)
    return "X" if remainder == 10 else str(remainder)


def has_valid_checksum(vin: str) -> bool:
    return vin[CHECK_POSITION - 1] == compute_check_character(vin)


def check_vin(vin: str) -> VINErrorKind | None:
    """Run all checks. Returns the first failing kind, or None if the VIN is valid."""
    if not has_correct_length(vin):
        return VINErrorKind.INVALID_LENGTH
    if not contains_only_legal_characters(vin):
        return VINErrorKind.ILLEGAL_CHARACTER
    if not has_legal_check_character(vin):
        return VINErrorKind.ILLEGAL_CHECKSUM_CHARACTER
    if not has_valid_checksum(vin):
        return VINErrorKind.INVALID_CHECKSUM
    return None


def validate_vin(vin: str) -> None:
    """Raise InvalidVINError unless vin passes every check."""
    kind = check_vin(vin)
    if kind is not None:
        raise InvalidVINError(kind, vin)


def is_valid_vin(vin: str) -> bool:
    return check_vin(vin) is None
