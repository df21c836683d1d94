from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from dealcalc.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


class TestTransfer:
    def test_str_to_ltr(self, client):
        resp = client.post("/api/v1/transfer", json={"source": "str", "destination": "ltr"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["destination"] == "ltr"
        assert Decimal(str(data["inputs"]["rent"])) == Decimal("5707.5")
        assert "rent" in data["pushed"]
        assert "management_pct" not in data["pushed"]

    def test_zero_source_values_kept(self, client):
        body = {"source": "ltr", "destination": "str", "source_inputs": {"hoa_monthly": 0}}
        data = client.post("/api/v1/transfer", json=body).json()
        assert Decimal(str(data["inputs"]["hoa_monthly"])) == Decimal("100")
        assert "hoa_monthly" not in data["pushed"]

    def test_room_units_drive_rent(self, client):
        body = {"source": "room", "destination": "dscr", "source_units": [{"rent": 900}, {"rent": 1100}]}
        data = client.post("/api/v1/transfer", json=body).json()
        assert Decimal(str(data["inputs"]["ltr_rent"])) == Decimal("2000")

    def test_build_destination(self, client):
        data = client.post("/api/v1/transfer", json={"source": "ltr", "destination": "build"}).json()
        assert data["pushed"] == []

    def test_unknown_strategy(self, client):
        resp = client.post("/api/v1/transfer", json={"source": "ltr", "destination": "flip"})
        assert resp.status_code == 422
