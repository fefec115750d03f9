#!/usr/bin/env python3
"""
Validate (and optionally decode) VINs from the command line.

Usage:
    python check_vins.py 1HGCM82633A004352 1M8GDM9AXKP042788
    python check_vins.py --file data/vins.txt --decode
    python check_vins.py --file data/vins.csv --normalize

--file accepts plain text (one VIN per line) or a CSV with a "vin" column
(matched case-insensitively).
Exit status is 1 if any VIN is invalid.
"""

import argparse
import csv
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from vincheck.services.vin_description import decode_vin


def read_vins(filepath: str) -> list[str]:
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"file not found: {path}")
    # utf-8-sig drops the BOM spreadsheet exports put in front of the first field
    with open(path, newline="", encoding="utf-8-sig") as f:
        if path.suffix.lower() == ".csv":
            reader = csv.DictReader(f)
            column = next((name for name in reader.fieldnames or [] if name.strip().lower() == "vin"), None)
            if column is None:
                raise ValueError(f"no 'vin' column in {path}")
            # Short rows have no value for the column; report them as invalid VINs
            return [row.get(column) or "" for row in reader]
        # Only line endings are stripped; surrounding spaces count against the VIN
        return [line.rstrip("\r\n") for line in f if line.strip()]


def format_result(result, decode: bool) -> str:
    if result.error:
        return f"INVALID  {result.vin!r}  [{result.error_kind}] {result.error}"
    line = f"OK       {result.vin}"
    if decode:
        d = result.description
        details = [
            d.manufacturer or "unknown make",
            str(d.model_year) if d.model_year else "unknown year",
            d.country or d.region or "unknown origin",
            f"plant {d.factory_code}",
            f"serial {d.serial_number}",
        ]
        line += "  " + ", ".join(details)
    return line


def run(vins: list[str], normalize: bool, decode: bool) -> int:
    """Print one line per VIN. Returns the number of invalid VINs."""
    invalid = 0
    for raw in vins:
        result = decode_vin(raw, normalize=normalize)
        if result.error:
            invalid += 1
        print(format_result(result, decode))
    return invalid


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate VINs (length, characters, check digit)")
    parser.add_argument("vins", nargs="*", help="VINs to check")
    parser.add_argument("--file", help="Text file (one VIN per line) or CSV with a 'vin' column")
    parser.add_argument("--normalize", action="store_true", help="Strip whitespace and upper-case before validating")
    parser.add_argument("--decode", action="store_true", help="Also print make, model year and origin")
    args = parser.parse_args(argv)

    vins = list(args.vins)
    if args.file:
        try:
            vins.extend(read_vins(args.file))
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}")
            return 2
    if not vins:
        parser.error("no VINs given (pass VINs or --file)")

    invalid = run(vins, args.normalize, args.decode)
    print(f"Checked {len(vins)} VINs, {invalid} invalid.")
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
