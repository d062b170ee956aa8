"""
Tests for the country guide endpoint.
"""

import pytest


class TestCountryGuide:
    def test_generates_guide(self, client, fake_llm):
        response = client.post("/api/country-guide", json={"country": "Germany"})

        assert response.status_code == 200
        assert response.json() == {"result": "Willkommen in Germany! 🇩🇪"}
        fake_llm.ainvoke.assert_awaited_once()

    def test_no_auth_required(self, client):
        response = client.post("/api/country-guide", json={"country": "Japan"}, headers={})
        assert response.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [{}, {"country": None}, {"country": ""}, {"country": "   "}, {"country": 42}, {"country": ["Peru"]}],
    )
    def test_invalid_country(self, client, fake_llm, body):
        """Missing, empty and non-string countries are rejected before generation."""
        response = client.post("/api/country-guide", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a valid country name."
        fake_llm.ainvoke.assert_not_called()

    def test_generation_failure(self, client, fake_llm):
        """Upstream failures return a generic 500 without provider details."""
        fake_llm.ainvoke.side_effect = ConnectionError("upstream unavailable at 10.0.0.7")

        response = client.post("/api/country-guide", json={"country": "Germany"})

        assert response.status_code == 500
        body = response.json()
        assert body["message"]
        assert "10.0.0.7" not in response.text
        assert "details" not in body

    def test_new_guide_per_request(self, client, fake_llm):
        client.post("/api/country-guide", json={"country": "Germany"})
        client.post("/api/country-guide", json={"country": "Germany"})
        assert fake_llm.ainvoke.await_count == 2
