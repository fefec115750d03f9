"""Tests for the check_vins command-line script."""

import pytest

import check_vins


def test_all_valid(honda_vin, x_check_vin, capsys):
    assert check_vins.main([honda_vin, x_check_vin]) == 0
    out = capsys.readouterr().out
    assert f"OK       {honda_vin}" in out
    assert "Checked 2 VINs, 0 invalid." in out


def test_invalid_exit_status(honda_vin, capsys):
    assert check_vins.main([honda_vin, "1HGCM82623A004352"]) == 1
    out = capsys.readouterr().out
    assert "[invalid_checksum]" in out
    assert "1 invalid" in out


def test_decode_output(honda_vin, capsys):
    check_vins.main(["--decode", honda_vin])
    out = capsys.readouterr().out
    assert "Honda" in out
    assert "2003" in out
    assert "serial 004352" in out


def test_normalize_flag(honda_vin, capsys):
    assert check_vins.main([honda_vin.lower()]) == 1
    assert check_vins.main(["--normalize", honda_vin.lower()]) == 0


def test_text_file(tmp_path, honda_vin, capsys):
    path = tmp_path / "vins.txt"
    path.write_text(f"{honda_vin}\n\n1HGCM82I33A004352\n", encoding="utf-8")
    assert check_vins.read_vins(str(path)) == [honda_vin, "1HGCM82I33A004352"]
    assert check_vins.main(["--file", str(path)]) == 1
    assert "[illegal_character]" in capsys.readouterr().out


def test_csv_file(tmp_path, honda_vin, tesla_vin):
    path = tmp_path / "vins.csv"
    path.write_text(f"stock,vin\nA1,{honda_vin}\nA2,{tesla_vin}\n", encoding="utf-8")
    assert check_vins.read_vins(str(path)) == [honda_vin, tesla_vin]
    assert check_vins.main(["--file", str(path)]) == 0


def test_missing_file(tmp_path, capsys):
    assert check_vins.main(["--file", str(tmp_path / "nope.txt")]) == 2
    assert "file not found" in capsys.readouterr().out


def test_no_vins():
    with pytest.raises(SystemExit):
        check_vins.main([])


def test_csv_without_vin_column(tmp_path, capsys):
    path = tmp_path / "vins.csv"
    path.write_text("stock,number\nA1,1HGCM82633A004352\n", encoding="utf-8")
    assert check_vins.main(["--file", str(path)]) == 2
    assert "no 'vin' column" in capsys.readouterr().out


def test_csv_header_case_insensitive(tmp_path, honda_vin):
    path = tmp_path / "vins.csv"
    path.write_text(f"Stock,VIN\nA1,{honda_vin}\n", encoding="utf-8")
    assert check_vins.read_vins(str(path)) == [honda_vin]


def test_csv_short_row_is_invalid_length(tmp_path, honda_vin, capsys):
    path = tmp_path / "vins.csv"
    path.write_text(f"stock,vin\nA1,{honda_vin}\nA2\n", encoding="utf-8")
    assert check_vins.read_vins(str(path)) == [honda_vin, ""]
    assert check_vins.main(["--file", str(path)]) == 1
    out = capsys.readouterr().out
    assert "INVALID  ''  [invalid_length]" in out
    assert "Checked 2 VINs, 1 invalid." in out


def test_csv_with_byte_order_mark(tmp_path, honda_vin):
    path = tmp_path / "vins.csv"
    path.write_text(f"vin,stock\n{honda_vin},A1\n", encoding="utf-8-sig")
    assert check_vins.read_vins(str(path)) == [honda_vin]
    assert check_vins.main(["--file", str(path)]) == 0


def test_text_file_with_byte_order_mark(tmp_path, honda_vin):
    path = tmp_path / "vins.txt"
    path.write_text(f"{honda_vin}\n", encoding="utf-8-sig")
    assert check_vins.read_vins(str(path)) == [honda_vin]
