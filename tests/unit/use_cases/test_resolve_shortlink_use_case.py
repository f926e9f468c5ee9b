"""
Unit tests for Resolve Shortlink Use Case
"""

import json
import random

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.audit_recorder import AuditRecorder
from src.app.use_cases.redirect import ResolveShortlinkUseCase
from src.domain.authorization import AuthorizationResult, RequestContext
from src.domain.entities import (
    DynamicURLLog,
    LinkMethod,
    OutboundLog,
    Shortlink,
    TrustMethod,
)
from tests.utils.background_jobs import run_submitted_jobs

CONTEXT = RequestContext(ip_address="1.2.3.4", user_agent="pytest", session_cookie="abc")
AUTHORIZED = AuthorizationResult(method=TrustMethod.SESSION, value="abc", user_id=5)


@pytest.fixture
def resolve_uow(mock_uow):
    mock_uow.shortlinks.get_latest_by_code = AsyncMock(return_value=None)
    return mock_uow


@pytest.mark.asyncio
async def test_get_shortlink_resolves_and_logs(resolve_uow, mock_writer):
    resolve_uow.shortlinks.get_latest_by_code.return_value = Shortlink(
        id=3, code="abcde", method=LinkMethod.GET, destination="https://example.com"
    )

    use_case = ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer))
    result = await use_case.execute("abcde", CONTEXT, AUTHORIZED)

    assert result.is_ok()
    assert result.value.method == "GET"
    assert result.value.destination == "https://example.com"
    assert result.value.data is None
    resolve_uow.shortlinks.get_latest_by_code.assert_called_once_with("abcde")
    assert mock_writer.submit.call_count == 2

    log_uow = MagicMock()
    log_uow.outbound_logs.create = AsyncMock()
    log_uow.dynamic_urls.create = AsyncMock()
    await run_submitted_jobs(mock_writer, log_uow)

    outbound = log_uow.outbound_logs.create.call_args.args[0]
    assert isinstance(outbound, OutboundLog)
    assert outbound.ip_address == "1.2.3.4"
    assert outbound.user_agent == "pytest"
    assert outbound.code == "abcde"
    assert outbound.auth_method == "SESSION"
    assert outbound.auth_value == "abc"

    dynamic = log_uow.dynamic_urls.create.call_args.args[0]
    assert isinstance(dynamic, DynamicURLLog)
    assert dynamic.user_id == 5
    assert dynamic.full_url == "https://example.com"


@pytest.mark.asyncio
async def test_post_shortlink_returns_parsed_data(resolve_uow, mock_writer):
    resolve_uow.shortlinks.get_latest_by_code.return_value = Shortlink(
        id=4,
        code="form1",
        method=LinkMethod.POST,
        destination="https://example.com/login",
        data=json.dumps({"user": "alice", "remember": True}),
    )

    use_case = ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer))
    result = await use_case.execute("form1", CONTEXT, AUTHORIZED)

    assert result.is_ok()
    assert result.value.method == "POST"
    assert result.value.data == {"user": "alice", "remember": True}


@pytest.mark.asyncio
async def test_post_shortlink_without_data_gets_empty_payload(resolve_uow, mock_writer):
    resolve_uow.shortlinks.get_latest_by_code.return_value = Shortlink(
        id=4, code="form1", method=LinkMethod.POST, destination="https://example.com/login"
    )

    result = await ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer)).execute(
        "form1", CONTEXT, AUTHORIZED
    )

    assert result.value.data == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("stored", ["{not json", "[1, 2]", "null"])
async def test_malformed_stored_data_fails(resolve_uow, mock_writer, stored):
    resolve_uow.shortlinks.get_latest_by_code.return_value = Shortlink(
        id=4, code="form1", method=LinkMethod.POST, destination="https://example.com", data=stored
    )

    result = await ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer)).execute(
        "form1", CONTEXT, AUTHORIZED
    )

    assert result.is_err()
    assert result.error.code == "MALFORMED_STORED_DATA"
    # Attempt logged, no dynamic url
    assert mock_writer.submit.call_count == 1


@pytest.mark.asyncio
async def test_unknown_code_is_not_found_but_attempt_is_logged(resolve_uow, mock_writer):
    result = await ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer)).execute(
        "nope", CONTEXT, AUTHORIZED
    )

    assert result.is_err()
    assert result.error.code == "SHORTLINK_NOT_FOUND"
    assert mock_writer.submit.call_count == 1


@pytest.mark.asyncio
async def test_unauthorized_result_is_rejected(resolve_uow, mock_writer):
    result = await ResolveShortlinkUseCase(resolve_uow, AuditRecorder(mock_writer)).execute(
        "abcde", CONTEXT, AuthorizationResult.unauthorized()
    )

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    resolve_uow.shortlinks.get_latest_by_code.assert_not_called()
    mock_writer.submit.assert_not_called()


@pytest.mark.asyncio
async def test_linkbust_is_applied_to_destination(resolve_uow, mock_writer):
    resolve_uow.shortlinks.get_latest_by_code.return_value = Shortlink(
        id=9,
        code="bust1",
        method=LinkMethod.GET,
        destination="https://example.com/{RANDOM}",
        linkbust=["RANDOM", "CACHEBUST"],
    )

    use_case = ResolveShortlinkUseCase(
        resolve_uow, AuditRecorder(mock_writer), rng=random.Random(11)
    )
    result = await use_case.execute("bust1", CONTEXT, AUTHORIZED)

    destination = result.value.destination
    assert "{RANDOM}" not in destination
    assert destination.startswith("https://example.com/")
    assert "?" in destination
