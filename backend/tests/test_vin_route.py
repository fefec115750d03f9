"""Tests for the VIN API endpoints."""
import pytest
from httpx import AsyncClient, ASGITransport
from vincheck.config import settings
from vincheck.main import app


async def _get(path, **params):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path, params=params)


async def _post(path, payload):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(path, json=payload)


@pytest.mark.asyncio
async def test_health():
    response = await _get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_root_lists_endpoints():
    response = await _get("/")
    data = response.json()
    assert "validate" in data["endpoints"]
    assert "decode" in data["endpoints"]


@pytest.mark.asyncio
async def test_validate_valid(honda_vin):
    response = await _get("/vin/validate", vin=honda_vin)
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert data["error_kind"] is None
    assert data["check_character"] == "3"
    assert data["expected_check_character"] == "3"


@pytest.mark.asyncio
async def test_validate_wrong_check_digit():
    response = await _get("/vin/validate", vin="1HGCM82623A004352")
    data = response.json()
    assert data["valid"] is False
    assert data["error_kind"] == "invalid_checksum"
    assert data["error"] == "VIN has invalid checksum."
    assert data["check_character"] == "2"
    assert data["expected_check_character"] == "3"


@pytest.mark.asyncio
async def test_validate_short_vin_has_no_check_character():
    response = await _get("/vin/validate", vin="1HGCM82633A00435")
    data = response.json()
    assert data["error_kind"] == "invalid_length"
    assert data["check_character"] is None
    assert data["expected_check_character"] is None


@pytest.mark.asyncio
async def test_validate_illegal_checksum_character():
    response = await _get("/vin/validate", vin="1HGCM826Y3A004352")
    data = response.json()
    assert data["error_kind"] == "illegal_checksum_character"
    assert data["check_character"] == "Y"


@pytest.mark.asyncio
async def test_validate_missing_param():
    response = await _get("/vin/validate")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_validate_normalizes_when_configured(honda_vin, monkeypatch):
    monkeypatch.setattr(settings, "normalize_input", True)
    response = await _get("/vin/validate", vin=honda_vin.lower())
    data = response.json()
    assert data["valid"] is True
    assert data["vin"] == honda_vin


@pytest.mark.asyncio
async def test_decode_valid(honda_vin):
    response = await _get("/vin/decode", vin=honda_vin)
    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert data["sections"] == {"wmi": "1HG", "vds": "CM8263", "vis": "3A004352"}
    assert data["description"]["manufacturer"] == "Honda"
    assert data["description"]["country"] == "United States"
    assert data["description"]["model_year"] == 2003
    assert data["description"]["serial_number"] == "004352"


@pytest.mark.asyncio
async def test_decode_invalid():
    response = await _get("/vin/decode", vin="1HGCM82I33A004352")
    assert response.status_code == 200
    data = response.json()
    assert data["sections"] is None
    assert data["description"] is None
    assert data["error_kind"] == "illegal_character"


@pytest.mark.asyncio
async def test_batch(honda_vin, x_check_vin):
    response = await _post("/vin/validate/batch", {"vins": [honda_vin, x_check_vin, ""]})
    assert response.status_code == 200
    data = response.json()
    assert data["valid_count"] == 2
    assert data["invalid_count"] == 1
    assert [r["valid"] for r in data["results"]] == [True, True, False]
    assert data["results"][2]["error_kind"] == "invalid_length"


@pytest.mark.asyncio
async def test_batch_over_limit(honda_vin, monkeypatch):
    monkeypatch.setattr(settings, "max_batch_size", 2)
    response = await _post("/vin/validate/batch", {"vins": [honda_vin] * 3})
    assert response.status_code == 422
