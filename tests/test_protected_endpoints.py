"""
Every data route sits behind the bearer-token guard.
"""
from datetime import timedelta

import pytest

from leadhub.features.auth.utils.security import create_access_token

PROTECTED_ROUTES = [
    ("get", "/api/auth/user"),
    ("get", "/api/leads"),
    ("get", "/api/leads/1"),
    ("post", "/api/leads"),
    ("put", "/api/leads/1"),
    ("delete", "/api/leads/1"),
    ("get", "/api/lead-magnets"),
    ("get", "/api/lead-magnets/1"),
    ("post", "/api/lead-magnets"),
    ("put", "/api/lead-magnets/1"),
    ("delete", "/api/lead-magnets/1"),
    ("get", "/api/dashboard/stats"),
]


@pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
def test_unauthenticated_access_is_rejected(client, method, path):
    """
    Goal: Verify that an unauthenticated request to a protected route is rejected with 401.
    Method: Call the endpoint without providing any Authorization header.
    """
    response = client.request(method, path)
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_garbage_token_is_rejected(client):
    response = client.get("/api/leads", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_expired_token_is_rejected(client):
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(minutes=-5))
    response = client.get("/api/leads", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired"


def test_token_without_subject_is_rejected(client):
    token = create_access_token({"email": "nobody@example.com"})
    response = client.get("/api/leads", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_rejected_create_leaves_storage_untouched(client, lead_payload):
    response = client.post("/api/leads", json=lead_payload())
    assert response.status_code == 401

    token = create_access_token({"sub": "user-1"})
    listed = client.get("/api/leads", headers={"Authorization": f"Bearer {token}"})
    assert listed.status_code == 200
    assert listed.json() == []
