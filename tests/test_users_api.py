"""Tests for the /api/users administration endpoints."""

from agenda.core.config import settings
from agenda.main import ensure_bootstrap_admin
from agenda.models.enums import Role
from agenda.services.users import get_by_email


def test_supervisor_creates_coordenador_by_default(client, headers, beatriz):
    resp = client.post(
        "/api/users",
        json={"email": "nova@escola.edu.br", "full_name": "Nova Pessoa", "password": "123456789"},
        headers=headers(beatriz),
    )
    assert resp.status_code == 201
    assert resp.json()["role"] == "coordenador"
    assert resp.json()["auth_type"] == "local"

    login = client.post("/api/auth/login-local", json={"email": "nova@escola.edu.br", "password": "123456789"})
    assert login.status_code == 200


def test_duplicate_email(client, headers, beatriz, ana):
    resp = client.post(
        "/api/users",
        json={"email": "ana@escola.edu.br", "password": "123456789"},
        headers=headers(beatriz),
    )
    assert resp.status_code == 409


def test_supervisor_promotes_user(client, headers, ana, beatriz):
    resp = client.patch(f"/api/users/{ana.id}", json={"role": "supervisor"}, headers=headers(beatriz))
    assert resp.status_code == 200
    assert resp.json()["role"] == "supervisor"

    # o token antigo da Ana passa a valer como supervisora
    assert client.get("/api/events/pending", headers=headers(ana)).status_code == 200


def test_coordenador_cannot_manage_users(client, headers, ana, caio):
    assert client.get("/api/users", headers=headers(ana)).status_code == 403
    assert client.patch(f"/api/users/{ana.id}", json={"role": "admin"}, headers=headers(ana)).status_code == 403
    assert client.post(
        "/api/users",
        json={"email": "x@escola.edu.br", "password": "123456789"},
        headers=headers(caio),
    ).status_code == 403


def test_list_and_get_users(client, headers, ana, beatriz):
    resp = client.get("/api/users", headers=headers(beatriz))
    assert [u["email"] for u in resp.json()] == ["ana@escola.edu.br", "beatriz@escola.edu.br"]

    assert client.get(f"/api/users/{ana.id}", headers=headers(beatriz)).json()["full_name"] == "Ana Souza"
    assert client.get("/api/users/999", headers=headers(beatriz)).status_code == 404


def test_deactivated_user_loses_access(client, headers, ana, beatriz):
    resp = client.patch(f"/api/users/{ana.id}", json={"active": False}, headers=headers(beatriz))
    assert resp.status_code == 200
    assert resp.json()["active"] is False

    assert client.get("/api/events/my-events", headers=headers(ana)).status_code == 401


def test_invalid_role_rejected(client, headers, ana, beatriz):
    resp = client.patch(f"/api/users/{ana.id}", json={"role": "diretor"}, headers=headers(beatriz))
    assert resp.status_code == 400


def test_bootstrap_admin(db, monkeypatch):
    monkeypatch.setattr(settings, "BOOTSTRAP_ADMIN_EMAIL", "admin@agenda.escola.br")
    monkeypatch.setattr(settings, "BOOTSTRAP_ADMIN_PASSWORD", "admin-123")

    ensure_bootstrap_admin()
    ensure_bootstrap_admin()

    admin = get_by_email(db, "admin@agenda.escola.br")
    assert admin is not None
    assert admin.role == Role.admin
    assert admin.role.is_privileged


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_user_reads_own_profile(client, headers, ana):
    resp = client.get("/api/users/me", headers=headers(ana))
    assert resp.status_code == 200

    body = resp.json()
    assert body["id"] == ana.id
    assert body["email"] == "ana@escola.edu.br"
    assert body["full_name"] == "Ana Souza"
    assert body["avatar_url"] is None


def test_user_updates_own_profile(client, headers, ana, beatriz):
    resp = client.patch(
        "/api/users/me",
        json={"full_name": "Ana S. Souza", "avatar_url": "https://cdn.escola.edu.br/ana.png"},
        headers=headers(ana),
    )
    assert resp.status_code == 200
    assert resp.json()["full_name"] == "Ana S. Souza"
    assert resp.json()["avatar_url"] == "https://cdn.escola.edu.br/ana.png"
    assert resp.json()["role"] == "coordenador"

    seen_by_supervisor = client.get(f"/api/users/{ana.id}", headers=headers(beatriz)).json()
    assert seen_by_supervisor["avatar_url"] == "https://cdn.escola.edu.br/ana.png"

    verified = client.post("/api/auth/verify", headers=headers(ana)).json()["user"]
    assert verified["full_name"] == "Ana S. Souza"


def test_profile_update_keeps_unsent_fields(client, headers, ana):
    client.patch("/api/users/me", json={"avatar_url": "https://cdn.escola.edu.br/a.png"}, headers=headers(ana))

    resp = client.patch("/api/users/me", json={"full_name": "Ana"}, headers=headers(ana))
    assert resp.json()["avatar_url"] == "https://cdn.escola.edu.br/a.png"


def test_user_cannot_change_own_role_or_status(client, headers, ana):
    for patch in ({"role": "supervisor"}, {"active": False}, {"email": "outra@escola.edu.br"}):
        resp = client.patch("/api/users/me", json=patch, headers=headers(ana))
        assert resp.status_code == 400

    assert client.get("/api/users/me", headers=headers(ana)).json()["role"] == "coordenador"


def test_profile_requires_token(client):
    assert client.get("/api/users/me").status_code == 401
    assert client.patch("/api/users/me", json={"full_name": "x"}).status_code == 401
