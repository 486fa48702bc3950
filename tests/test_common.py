"""Tests for app wiring — health check, CORS, error handlers, settings,
storage lifespan.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError
from sqlalchemy import inspect

from hrms.common.exceptions import NotFoundException
from hrms.config import Settings
from hrms.main import create_app


# ── Health ──────────────────────────────────────────────────────────


async def test_health_check_plain_text(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.text == "HRMS API is running"
    assert resp.headers["content-type"].startswith("text/plain")


# ── CORS ────────────────────────────────────────────────────────────


async def test_cors_preflight_allows_any_origin(client):
    resp = await client.options(
        "/employees",
        headers={
            "Origin": "http://frontend.local",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "PUT" in resp.headers["access-control-allow-methods"]


async def test_cors_preflight_rejects_patch(client):
    resp = await client.options(
        "/employees",
        headers={
            "Origin": "http://frontend.local",
            "Access-Control-Request-Method": "PATCH",
        },
    )
    assert resp.status_code == 400


# ── Error handlers ──────────────────────────────────────────────────


async def test_router_tags_not_duplicated(app):
    paths = app.openapi()["paths"]
    assert paths["/employees"]["post"]["tags"] == ["employees"]
    assert paths["/leaves"]["get"]["tags"] == ["leaves"]
    assert paths["/login"]["post"]["tags"] == ["auth"]


async def test_app_exception_rendered_as_problem_detail(app, client):
    @app.get("/_boom/not-found")
    async def _not_found():
        raise NotFoundException("Widget", 9)

    resp = await client.get("/_boom/not-found")
    assert resp.status_code == 404
    assert resp.headers["content-type"] == "application/problem+json"
    assert resp.json() == {
        "type": "/errors/not-found",
        "title": "Widget Not Found",
        "status": 404,
        "detail": "Widget with id '9' does not exist.",
        "instance": "/_boom/not-found",
    }


async def test_unexpected_error_hides_message(app):
    @app.get("/_boom/crash")
    async def _crash():
        raise RuntimeError("database password is hunter2")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        resp = await ac.get("/_boom/crash")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Something went wrong."
    assert "hunter2" not in resp.text


# ── Settings ────────────────────────────────────────────────────────


def test_settings_require_secret_key(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_blank_secret_key():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SECRET_KEY="   ")


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    config = Settings(_env_file=None, SECRET_KEY="k")
    assert config.PORT == 4000
    assert config.TOKEN_EXPIRY_MINUTES == 60
    assert config.cors_origins_list == ["*"]


def test_settings_bad_cors_json_falls_back():
    config = Settings(_env_file=None, SECRET_KEY="k", CORS_ORIGINS="not json")
    assert config.cors_origins_list == ["*"]


# ── Lifespan ────────────────────────────────────────────────────────


async def test_lifespan_builds_and_disposes_storage():
    config = Settings(
        _env_file=None,
        SECRET_KEY="k",
        DATABASE_URL="sqlite+aiosqlite://",
        CREATE_TABLES=True,
    )
    application = create_app(config)

    async with application.router.lifespan_context(application):
        engine = application.state.engine
        async with engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names()
            )
        assert {"employees", "leaves", "users"} <= set(tables)

        async with application.state.session_factory() as session:
            assert session.bind is engine
