# This project was developed with assistance from AI tools.
"""Tests for calculator session routes and the session registry."""

import pytest

from payment_engine.services.sessions import (
    SessionNotFoundError,
    SessionRegistry,
    get_session_registry,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _open(client, query=""):
    response = client.post(f"/api/sessions/{query}")
    assert response.status_code == 201
    return response.json()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_create_and_get(self):
        registry = SessionRegistry()
        session_id, controller = registry.create()
        assert session_id in registry
        assert registry.get(session_id) is controller
        assert len(registry) == 1

    def test_default_unit_from_settings(self, monkeypatch):
        from payment_engine.core.config import settings

        monkeypatch.setattr(settings, "DEFAULT_UNIT_PRICE", None)
        _, controller = SessionRegistry().create()
        assert controller.unit is None

    def test_close(self):
        registry = SessionRegistry()
        session_id, _ = registry.create()
        registry.close(session_id)
        with pytest.raises(SessionNotFoundError):
            registry.get(session_id)
        with pytest.raises(SessionNotFoundError):
            registry.close(session_id)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def test_new_session_starts_with_default_unit(client):
    state = _open(client)
    assert state["unit"]["price"] == 700000
    assert state["effective_tax_rate"] == 0.0125
    assert state["breakdown"]["is_valid"] is True
    assert state["display"]["unit_label"] == ""
    assert state["session_id"] in get_session_registry()


def test_new_session_from_query(client):
    state = _open(client, "?price=650000&unit_id=Lot-12&plan=Plan-A&tax_rate=0.0078")
    assert state["unit"]["unit_id"] == "Lot-12"
    assert state["display"]["unit_label"] == "Lot-12 • Plan-A"
    assert state["breakdown"]["monthly_tax"] == 423


def test_new_session_from_catalog_id(client):
    state = _open(client, "?unit_id=Lot-12")
    assert state["unit"]["price"] == 650000
    assert state["breakdown"]["yearly_property_tax"] == 5070


def test_get_unknown_session(client):
    response = client.get("/api/sessions/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Session not found"


def test_close_session(client):
    session_id = _open(client)["session_id"]
    assert client.delete(f"/api/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/sessions/{session_id}").status_code == 404
    again = client.delete(f"/api/sessions/{session_id}")
    assert again.status_code == 404
    assert again.json()["detail"] == "Session not found"


class TestUnitPort:
    def test_host_page_sets_unit(self, client):
        session_id = _open(client)["session_id"]
        response = client.put(
            f"/api/sessions/{session_id}/unit",
            json={"price": "650,000", "unitId": "Lot-99", "plan": "Plan-Z"},
        )
        assert response.status_code == 200
        state = response.json()
        assert state["unit"]["price"] == 650000
        assert state["display"]["unit_label"] == "Lot-99 • Plan-Z"
        assert state["breakdown"]["yearly_property_tax"] == 8125

    @pytest.mark.parametrize(
        "payload",
        [{"price": "abc"}, {"price": -1}, {"plan": "A"}, ["price", 1], "650000", None],
    )
    def test_malformed_unit_is_ignored(self, client, payload):
        before = _open(client)
        session_id = before["session_id"]
        response = client.put(f"/api/sessions/{session_id}/unit", json=payload)
        assert response.status_code == 200
        assert response.json() == before

    def test_select_catalog_unit(self, client):
        session_id = _open(client)["session_id"]
        response = client.put(f"/api/sessions/{session_id}/unit/Lot-21")
        assert response.status_code == 200
        assert response.json()["unit"]["price"] == 785000

    def test_unknown_catalog_unit(self, client):
        session_id = _open(client)["session_id"]
        response = client.put(f"/api/sessions/{session_id}/unit/Lot-999")
        assert response.status_code == 404

    def test_clear_unit(self, client):
        session_id = _open(client)["session_id"]
        state = client.delete(f"/api/sessions/{session_id}/unit").json()
        assert state["unit"] is None
        assert state["breakdown"]["monthly_total"] == 0
        assert state["breakdown"]["monthly_insurance"] == 100
        assert state["display"]["chart"] is None


class TestParameters:
    def test_form_strings_are_coerced(self, client):
        session_id = _open(client)["session_id"]
        response = client.patch(
            f"/api/sessions/{session_id}/parameters",
            json={"interest_rate_percent": "0", "insurance_yearly": "$2,400"},
        )
        state = response.json()
        assert state["parameters"]["interest_rate_percent"] == 0
        assert state["breakdown"]["monthly_insurance"] == 200
        assert state["breakdown"]["monthly_principal_interest"] == pytest.approx(
            1555.56, abs=0.01
        )

    def test_absent_fields_are_untouched(self, client):
        session_id = _open(client)["session_id"]
        state = client.patch(
            f"/api/sessions/{session_id}/parameters", json={"loan_term_years": 15}
        ).json()
        assert state["parameters"]["loan_term_years"] == 15
        assert state["parameters"]["down_payment_percent"] == 20

    def test_negative_rate_degrades(self, client):
        session_id = _open(client)["session_id"]
        state = client.patch(
            f"/api/sessions/{session_id}/parameters", json={"interest_rate_percent": -1}
        ).json()
        assert state["breakdown"]["is_valid"] is False
        assert state["breakdown"]["monthly_total"] == 0
        assert state["breakdown"]["monthly_insurance"] == 100

    def test_huge_integer_degrades(self, client):
        session_id = _open(client)["session_id"]
        response = client.patch(
            f"/api/sessions/{session_id}/parameters", json={"down_payment_percent": 10**400}
        )
        assert response.status_code == 200
        breakdown = response.json()["breakdown"]
        assert breakdown["is_valid"] is False
        assert breakdown["monthly_total"] == 0
        assert breakdown["monthly_insurance"] == 100

    def test_reset(self, client):
        before = _open(client)
        session_id = before["session_id"]
        client.patch(f"/api/sessions/{session_id}/parameters", json={"down_payment_percent": 5})
        state = client.post(f"/api/sessions/{session_id}/reset").json()
        assert state == before


class TestTax:
    def test_rate_override_then_clear(self, client):
        session_id = _open(client)["session_id"]
        state = client.put(f"/api/sessions/{session_id}/tax", json={"tax_rate": "0.01"}).json()
        assert state["effective_tax_rate"] == 0.01
        assert state["breakdown"]["yearly_property_tax"] == 7000
        assert state["display"]["tax_rate_display"] == "1.00%"

        state = client.put(f"/api/sessions/{session_id}/tax", json={"tax_rate": None}).json()
        assert state["breakdown"]["yearly_property_tax"] == 8750

    def test_yearly_amount_override(self, client):
        session_id = _open(client)["session_id"]
        state = client.put(
            f"/api/sessions/{session_id}/tax", json={"property_tax_yearly": "6,000"}
        ).json()
        assert state["breakdown"]["monthly_tax"] == 500

    def test_unparseable_rate_degrades(self, client):
        session_id = _open(client)["session_id"]
        response = client.put(f"/api/sessions/{session_id}/tax", json={"tax_rate": "abc"})
        assert response.status_code == 200
        breakdown = response.json()["breakdown"]
        assert breakdown["is_valid"] is False
        assert breakdown["monthly_tax"] == 0
        assert breakdown["monthly_total"] == 0


def test_sessions_are_isolated(client):
    first = _open(client)
    second = _open(client)
    client.patch(
        f"/api/sessions/{first['session_id']}/parameters", json={"down_payment_percent": 50}
    )
    client.put(f"/api/sessions/{first['session_id']}/unit/Lot-12")

    untouched = client.get(f"/api/sessions/{second['session_id']}").json()
    assert untouched == second
