"""
Tests for request validation, unmatched routes and CORS.
"""

import pytest


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, suffix, field",
    [
        ("post", "chats/create", "chat"),
        ("post", "contexts/create", "context"),
    ],
)
async def test_empty_required_field(client, session_uuid, method, suffix, field):
    """An empty string for a required field should give 400 naming the field."""
    response = await getattr(client, method)(
        f"/1.0/sessions/{session_uuid}/{suffix}",
        json={field: ""},
    )

    assert response.status_code == 400
    assert f'"{field}"' in response.json()["message"]


@pytest.mark.asyncio
async def test_non_json_body(client, session_uuid):
    """A body that is not JSON should give the fixed message."""
    response = await client.post(
        f"/1.0/sessions/{session_uuid}/contexts/create",
        content="context=X",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"status": 400, "message": '"body" must be an object'}


@pytest.mark.asyncio
async def test_missing_body(client, session_uuid):
    """No body at all should give the fixed message."""
    response = await client.post(f"/1.0/sessions/{session_uuid}/chats/create")

    assert response.status_code == 400
    assert response.json()["message"] == '"body" must be an object'


@pytest.mark.asyncio
async def test_wrong_type_lists_every_issue(client, session_uuid):
    """Each violated field should appear in the message, lowercased."""
    response = await client.post(f"/1.0/sessions/{session_uuid}/chats/create", json={"chat": 7})

    assert response.status_code == 400
    message = response.json()["message"]
    assert message.startswith('"chat": ')
    assert message == message.lower()


@pytest.mark.asyncio
async def test_non_object_body(client, session_uuid):
    """A JSON array is parsed but fails the schema."""
    response = await client.post(f"/1.0/sessions/{session_uuid}/rules/create", json=["rules"])

    assert response.status_code == 400
    assert response.json()["message"].startswith('"": ')


@pytest.mark.asyncio
async def test_extra_fields_are_ignored(client, session_uuid):
    """Unknown fields should not cause a rejection."""
    response = await client.post(
        f"/1.0/sessions/{session_uuid}/contexts/create",
        json={"context": "X", "priority": 1},
    )

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_invalid_session_checked_before_body(client):
    """A malformed session identifier should win over a malformed body."""
    response = await client.post("/1.0/sessions/abc/chats/create", content="not json")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid session"


@pytest.mark.asyncio
async def test_unknown_route(client):
    """Any undeclared path should give the catch-all 404."""
    response = await client.get("/1.0/does/not/exist")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}


@pytest.mark.asyncio
async def test_unversioned_route(client):
    """Routes only exist under the version prefix."""
    response = await client.post("/sessions/create")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}


@pytest.mark.asyncio
async def test_wrong_method(client):
    """A declared path with an undeclared method should also be Not Found."""
    response = await client.delete("/1.0/about")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client):
    """Responses should allow any origin."""
    response = await client.get("/1.0/about", headers={"Origin": "https://example.org"})

    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_cors_preflight(client, session_uuid):
    """Preflight requests should be answered for any origin."""
    response = await client.options(
        f"/1.0/sessions/{session_uuid}/contexts/create",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
