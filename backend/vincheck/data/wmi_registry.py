"""
Offline reference tables for describing a VIN.

- Geographic region from the first WMI character
- Country from the first two WMI characters (ISO 3779 ranges)
- Manufacturer from the full WMI (common makes only)
- Model year codes (position 10), repeating every 30 years

Tables cover the common cases; anything missing resolves to None.
"""

# ISO 3779 order used for WMI ranges, e.g. "SA-SM" or "1A-10"
CHARACTER_ORDER = "ABCDEFGHJKLMNPRSTUVWXYZ1234567890"

# Model year codes in order starting at 1980 (no I, O, Q, U, Z or 0)
MODEL_YEAR_CODES = "ABCDEFGHJKLMNPRSTVWXY123456789"
MODEL_YEAR_BASE = 1980
MODEL_YEAR_CYCLE = 30

_REGIONS = {
    **dict.fromkeys("ABCDEFGH", "Africa"),
    **dict.fromkeys("JKLMNPR", "Asia"),
    **dict.fromkeys("STUVWXYZ", "Europe"),
    **dict.fromkeys("12345", "North America"),
    **dict.fromkeys("67", "Oceania"),
    **dict.fromkeys("890", "South America"),
}

# first character -> [(second char from, second char to, country)]
_COUNTRY_RANGES: dict[str, list[tuple[str, str, str]]] = {
    "A": [("A", "H", "South Africa"), ("J", "N", "Ivory Coast")],
    "B": [("A", "E", "Angola"), ("F", "K", "Kenya"), ("L", "R", "Tanzania")],
    "C": [("A", "E", "Benin"), ("F", "K", "Madagascar"), ("L", "R", "Tunisia")],
    "D": [("A", "E", "Egypt"), ("F", "K", "Morocco"), ("L", "R", "Zambia")],
    "E": [("A", "E", "Ethiopia"), ("F", "K", "Mozambique")],
    "F": [("A", "E", "Ghana"), ("F", "K", "Nigeria")],
    "J": [("A", "0", "Japan")],
    "K": [("A", "E", "Sri Lanka"), ("F", "K", "Israel"), ("L", "R", "South Korea"), ("S", "0", "Kazakhstan")],
    "L": [("A", "0", "China")],
    "M": [("A", "E", "India"), ("F", "K", "Indonesia"), ("L", "R", "Thailand"), ("S", "0", "Myanmar")],
    "N": [("A", "E", "Iran"), ("F", "K", "Pakistan"), ("L", "R", "Turkey")],
    "P": [("A", "E", "Philippines"), ("F", "K", "Singapore"), ("L", "R", "Malaysia")],
    "R": [("A", "E", "United Arab Emirates"), ("F", "K", "Taiwan"), ("L", "R", "Vietnam"), ("S", "0", "Saudi Arabia")],
    "S": [("A", "M", "United Kingdom"), ("N", "T", "Germany"), ("U", "Z", "Poland"), ("1", "4", "Latvia")],
    "T": [("A", "H", "Switzerland"), ("J", "P", "Czech Republic"), ("R", "V", "Hungary"), ("W", "1", "Portugal")],
    "U": [("H", "M", "Denmark"), ("N", "T", "Ireland"), ("U", "Z", "Romania"), ("5", "7", "Slovakia")],
    "V": [
        ("A", "E", "Austria"),
        ("F", "R", "France"),
        ("S", "W", "Spain"),
        ("X", "2", "Serbia"),
        ("3", "5", "Croatia"),
        ("6", "0", "Estonia"),
    ],
    "W": [("A", "0", "Germany")],
    "X": [
        ("A", "E", "Bulgaria"),
        ("F", "K", "Greece"),
        ("L", "R", "Netherlands"),
        ("S", "W", "Russia"),
        ("X", "2", "Luxembourg"),
        ("3", "0", "Russia"),
    ],
    "Y": [
        ("A", "E", "Belgium"),
        ("F", "K", "Finland"),
        ("L", "R", "Malta"),
        ("S", "W", "Sweden"),
        ("X", "2", "Norway"),
        ("3", "5", "Belarus"),
        ("6", "0", "Ukraine"),
    ],
    "Z": [("A", "R", "Italy"), ("X", "2", "Slovenia"), ("3", "5", "Lithuania"), ("6", "0", "Russia")],
    "1": [("A", "0", "United States")],
    "2": [("A", "0", "Canada")],
    "3": [("A", "W", "Mexico"), ("X", "7", "Costa Rica"), ("8", "0", "Cayman Islands")],
    "4": [("A", "0", "United States")],
    "5": [("A", "0", "United States")],
    "6": [("A", "W", "Australia")],
    "7": [("A", "E", "New Zealand")],
    "8": [("A", "E", "Argentina"), ("F", "K", "Chile"), ("L", "R", "Ecuador"), ("S", "W", "Peru"), ("X", "2", "Venezuela")],
    "9": [
        ("A", "E", "Brazil"),
        ("F", "K", "Colombia"),
        ("L", "R", "Paraguay"),
        ("S", "W", "Uruguay"),
        ("X", "2", "Trinidad and Tobago"),
        ("3", "9", "Brazil"),
    ],
}

# WMI -> make, common passenger-car manufacturers
_MANUFACTURERS = {
    # Honda / Acura
    "1HG": "Honda", "2HG": "Honda", "JHM": "Honda", "5FN": "Honda", "5J6": "Honda", "19X": "Honda",
    "JH4": "Acura", "19U": "Acura",
    # Ford / Lincoln
    "1FA": "Ford", "1FM": "Ford", "1FT": "Ford", "2FM": "Ford", "3FA": "Ford", "WF0": "Ford",
    "1LN": "Lincoln", "5LM": "Lincoln",
    # General Motors
    "1G1": "Chevrolet", "1GC": "Chevrolet", "2G1": "Chevrolet", "3G1": "Chevrolet",
    "1GT": "GMC", "1G4": "Buick", "1G6": "Cadillac", "1GY": "Cadillac",
    # Stellantis
    "1C3": "Chrysler", "2C3": "Chrysler", "1B3": "Dodge", "2B3": "Dodge",
    "1J4": "Jeep", "1J8": "Jeep", "1C6": "Ram", "3C6": "Ram",
    "ZFA": "Fiat", "ZAR": "Alfa Romeo", "VF3": "Peugeot", "VF7": "Citroen",
    # Toyota / Lexus
    "JTD": "Toyota", "JTE": "Toyota", "JTM": "Toyota", "4T1": "Toyota", "5TD": "Toyota", "5TF": "Toyota",
    "JTJ": "Lexus", "2T2": "Lexus",
    # Nissan / Infiniti
    "JN1": "Nissan", "JN8": "Nissan", "1N4": "Nissan", "3N1": "Nissan", "5N1": "Nissan",
    "JNK": "Infiniti",
    # Other Japanese
    "JF1": "Subaru", "JF2": "Subaru", "4S3": "Subaru", "4S4": "Subaru",
    "JM1": "Mazda", "JM3": "Mazda", "JA3": "Mitsubishi", "JA4": "Mitsubishi", "JS1": "Suzuki",
    # Korean
    "KMH": "Hyundai", "5NP": "Hyundai", "KNA": "Kia", "KND": "Kia", "5XY": "Kia",
    # German
    "WBA": "BMW", "WBS": "BMW M", "5UX": "BMW", "WMW": "MINI",
    "WDB": "Mercedes-Benz", "WDD": "Mercedes-Benz", "4JG": "Mercedes-Benz",
    "WVW": "Volkswagen", "WV1": "Volkswagen Commercial Vehicles", "WV2": "Volkswagen Commercial Vehicles",
    "3VW": "Volkswagen", "1VW": "Volkswagen",
    "WAU": "Audi", "WA1": "Audi", "WP0": "Porsche", "WP1": "Porsche",
    # British / Swedish
    "SAJ": "Jaguar", "SAL": "Land Rover", "SCC": "Lotus", "SCF": "Aston Martin",
    "YV1": "Volvo", "YV4": "Volvo", "YS3": "Saab",
    # Other
    "5YJ": "Tesla", "7SA": "Tesla", "LRW": "Tesla",
    "ZFF": "Ferrari", "ZHW": "Lamborghini", "TRU": "Audi", "VSS": "SEAT", "TMB": "Skoda",
}


def _order_index(char: str) -> int:
    return CHARACTER_ORDER.index(char)


def lookup_region(wmi: str) -> str | None:
    """Geographic region encoded by the first WMI character."""
    if not wmi:
        return None
    return _REGIONS.get(wmi[0])


def lookup_country(wmi: str) -> str | None:
    """Country encoded by the first two WMI characters."""
    if len(wmi) < 2 or wmi[1] not in CHARACTER_ORDER:
        return None
    position = _order_index(wmi[1])
    for start, end, country in _COUNTRY_RANGES.get(wmi[0], []):
        if _order_index(start) <= position <= _order_index(end):
            return country
    return None


def lookup_manufacturer(wmi: str) -> str | None:
    return _MANUFACTURERS.get(wmi)


def lookup_model_year(code: str, alphabetic_cycle: bool) -> int | None:
    """
    Model year for a position-10 code.

    The same code repeats every 30 years; alphabetic_cycle selects the
    2010-2039 cycle instead of 1980-2009.
    """
    if len(code) != 1 or code not in MODEL_YEAR_CODES:
        return None
    year = MODEL_YEAR_BASE + MODEL_YEAR_CODES.index(code)
    if alphabetic_cycle:
        year += MODEL_YEAR_CYCLE
    return year
