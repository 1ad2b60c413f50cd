import pytest

from leadhub.features.dashboard.services.dashboard import (
    compute_dashboard_stats,
    format_one_decimal,
    round_half_up,
)


def test_empty_storage(auth_client):
    response = auth_client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalLeads": 0,
        "hotLeads": 0,
        "conversionRate": "0.0",
        "activeFunnels": 0,
        "averageScore": 0,
    }


def test_stats_reflect_leads_and_magnets(auth_client, lead_payload, lead_magnet_payload):
    for status, score in [("hot", 95), ("hot", 80), ("qualified", 70), ("cold", 10)]:
        auth_client.post("/api/leads", json=lead_payload(status=status, score=score))
    for status in ["active", "active", "draft", "paused"]:
        auth_client.post("/api/lead-magnets", json=lead_magnet_payload(status=status))

    response = auth_client.get("/api/dashboard/stats")

    assert response.json() == {
        "totalLeads": 4,
        "hotLeads": 2,
        "conversionRate": "25.0",
        "activeFunnels": 2,
        "averageScore": 64,
    }


def test_stats_follow_updates_and_deletes(auth_client, lead_payload):
    lead = auth_client.post("/api/leads", json=lead_payload(status="warm", score=40)).json()
    auth_client.post("/api/leads", json=lead_payload(status="cold", score=20))

    auth_client.put(f"/api/leads/{lead['id']}", json={"status": "qualified"})
    stats = auth_client.get("/api/dashboard/stats").json()
    assert stats["conversionRate"] == "50.0"
    assert stats["averageScore"] == 30

    auth_client.delete(f"/api/leads/{lead['id']}")
    stats = auth_client.get("/api/dashboard/stats").json()
    assert stats["totalLeads"] == 1
    assert stats["conversionRate"] == "0.0"


def test_status_matching_is_case_sensitive(auth_client, lead_payload):
    auth_client.post("/api/leads", json=lead_payload(status="Hot"))

    stats = auth_client.get("/api/dashboard/stats").json()

    assert stats["hotLeads"] == 0


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0.0"),
        (25, "25.0"),
        (100, "100.0"),
        (1 / 16 * 100, "6.3"),
        (1 / 3 * 100, "33.3"),
        (2 / 3 * 100, "66.7"),
    ],
)
def test_format_one_decimal(value, expected):
    assert format_one_decimal(value) == expected


@pytest.mark.parametrize("value,expected", [(63.75, 64), (2.5, 3), (2.49, 2), (0, 0), (100, 100)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_compute_without_leads_does_not_divide_by_zero():
    stats = compute_dashboard_stats([], [])
    assert stats.conversion_rate == "0.0"
    assert stats.average_score == 0
