import logging

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import DynamicURLLog, IPGrant, OutboundLog

SESSION_COOKIE = "sessionId"
BROWSER_COOKIE = "authcord_session"


def cleared_cookie(response, name: str) -> bool:
    return any(
        header.startswith(f"{name}=") and "Max-Age=0" in header
        for header in response.headers.get_list("set-cookie")
    )


@pytest.mark.asyncio
async def test_get_link_redirects_logged_in_user(client: AsyncClient, writer, db_session, create_user, login, create_shortlink, test_data):
    """GET shortlink created without a code redirects to its destination"""
    code = await create_shortlink(test_data.shortlink("get_link"))
    assert len(code) == 5
    await create_user("member")
    await login("member")

    response = await client.get(f"/l/{code}", headers={"user-agent": "pytest-agent"})

    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com"

    await writer.join()
    outbound = (await db_session.exec(select(OutboundLog))).all()
    assert len(outbound) == 1
    assert outbound[0].code == code
    assert outbound[0].auth_method == "USER"
    assert outbound[0].user_agent == "pytest-agent"

    dynamic = (await db_session.exec(select(DynamicURLLog))).all()
    assert len(dynamic) == 1
    assert dynamic[0].full_url == "https://example.com"


@pytest.mark.asyncio
async def test_session_cookie_tier(client: AsyncClient, writer, db_session, create_user, login, create_shortlink, test_data):
    code = await create_shortlink(test_data.shortlink("get_link"))
    await create_user("member")
    await login("member")
    session_id = client.cookies.get(SESSION_COOKIE)
    client.cookies.delete(BROWSER_COOKIE)

    response = await client.get(f"/l/{code}")

    assert response.status_code == 302
    await writer.join()
    outbound = (await db_session.exec(select(OutboundLog))).one()
    assert outbound.auth_method == "SESSION"
    assert outbound.auth_value == session_id


@pytest.mark.asyncio
async def test_ip_tier_uses_forwarded_header(client: AsyncClient, writer, db_session, create_user, create_shortlink, test_data):
    user_id = (await create_user("guest")).id
    db_session.add(IPGrant(user_id=user_id, ip_address="203.0.113.7"))
    await db_session.commit()
    code = await create_shortlink(test_data.shortlink("get_link"))

    response = await client.get(
        f"/l/{code}", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
    )

    assert response.status_code == 302
    await writer.join()
    outbound = (await db_session.exec(select(OutboundLog))).one()
    assert outbound.auth_method == "IP"
    assert outbound.auth_value == "203.0.113.7"
    assert outbound.ip_address == "203.0.113.7"
    dynamic = (await db_session.exec(select(DynamicURLLog))).one()
    assert dynamic.user_id == user_id


@pytest.mark.asyncio
async def test_unauthorized_requester(client: AsyncClient, writer, db_session, create_shortlink, test_data):
    code = await create_shortlink(test_data.shortlink("get_link"))

    response = await client.get(f"/l/{code}", headers={"X-Forwarded-For": "198.51.100.1"})

    assert response.status_code == 401
    assert "Unauthorized" in response.text
    await writer.join()
    assert (await db_session.exec(select(OutboundLog))).all() == []


@pytest.mark.asyncio
async def test_spoofed_cookie_is_cleared_then_ip_checked(client: AsyncClient, db_session, create_user, create_shortlink, test_data):
    user = await create_user("guest")
    db_session.add(IPGrant(user_id=user.id, ip_address="203.0.113.9"))
    await db_session.commit()
    code = await create_shortlink(test_data.shortlink("get_link"))
    client.cookies.set(SESSION_COOKIE, "not-a-real-session")

    response = await client.get(f"/l/{code}", headers={"X-Forwarded-For": "203.0.113.9"})

    assert response.status_code == 302
    assert cleared_cookie(response, SESSION_COOKIE)


@pytest.mark.asyncio
async def test_spoofed_cookie_without_ip_grant(client: AsyncClient, create_shortlink, test_data):
    code = await create_shortlink(test_data.shortlink("get_link"))
    client.cookies.set(SESSION_COOKIE, "not-a-real-session")

    response = await client.get(f"/l/{code}")

    assert response.status_code == 401
    assert cleared_cookie(response, SESSION_COOKIE)


@pytest.mark.asyncio
async def test_latest_row_wins_for_duplicate_codes(client: AsyncClient, create_user, login, create_shortlink):
    await create_shortlink({"method": "GET", "destination": "https://old.example.com", "code": "dup01"})
    await create_shortlink({"method": "GET", "destination": "https://new.example.com", "code": "dup01"})
    await create_user("member")
    await login("member")

    for _ in range(3):
        response = await client.get("/l/dup01")
        assert response.headers["location"] == "https://new.example.com"


@pytest.mark.asyncio
async def test_post_link_renders_form(client: AsyncClient, create_user, login, create_shortlink, test_data):
    code = await create_shortlink(test_data.shortlink("post_link"))
    await create_user("member")
    await login("member")

    response = await client.get(f"/l/{code}")

    assert response.status_code == 200
    assert 'action="https://example.com/form"' in response.text
    assert 'name="token" value="abc123"' in response.text
    assert 'name="count" value="3"' in response.text


@pytest.mark.asyncio
async def test_unknown_code_renders_not_found(client: AsyncClient, writer, db_session, create_user, login):
    await create_user("member")
    await login("member")

    response = await client.get("/l/zzzzz")

    assert response.status_code == 200
    assert "Not found" in response.text
    await writer.join()
    # The attempt is still recorded
    assert len((await db_session.exec(select(OutboundLog))).all()) == 1
    assert (await db_session.exec(select(DynamicURLLog))).all() == []


@pytest.mark.asyncio
async def test_linkbust_capitals_and_cachebust(client: AsyncClient, create_user, login, create_shortlink):
    code = await create_shortlink(
        {
            "method": "GET",
            "destination": "https://example.com/landing",
            "linkbust": ["CAPITALS", "CACHEBUST"],
        }
    )
    await create_user("member")
    await login("member")

    response = await client.get(f"/l/{code}")

    location = response.headers["location"]
    assert location.lower().startswith("https://example.com/landing?")
    assert len(location) == len("https://example.com/landing?") + 11


@pytest.mark.asyncio
async def test_logged_out_session_cookie_is_no_longer_trusted(client: AsyncClient, create_user, login, create_shortlink, test_data, caplog):
    code = await create_shortlink(test_data.shortlink("get_link"))
    await create_user("member")
    await login("member")
    session_id = client.cookies.get(SESSION_COOKIE)
    await client.get("/logout")
    client.cookies.set(SESSION_COOKIE, session_id)

    with caplog.at_level(logging.WARNING, logger="src.app.use_cases.redirect.evaluate_trust_use_case"):
        response = await client.get(f"/l/{code}")

    assert response.status_code == 401
    assert cleared_cookie(response, SESSION_COOKIE)
    assert "Revoked session cookie of user" in caplog.text
