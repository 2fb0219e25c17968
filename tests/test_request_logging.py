"""test_request_logging: 요청 컨텍스트/로깅 미들웨어 테스트."""

import logging
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_response_timestamp_is_request_time(client: AsyncClient):
    """응답 timestamp는 미들웨어가 기록한 요청 시각이다."""
    before = datetime.now(timezone.utc).replace(microsecond=0)

    res = await client.get("/category")

    stamped = datetime.strptime(res.json()["timestamp"], "%Y-%m-%dT%H:%M:%SZ")
    stamped = stamped.replace(tzinfo=timezone.utc)
    after = datetime.now(timezone.utc)
    assert before <= stamped <= after


@pytest.mark.asyncio
async def test_logs_request_and_response(client: AsyncClient, caplog):
    """요청과 응답이 INFO로 기록된다."""
    with caplog.at_level(logging.INFO, logger="api"):
        await client.get("/category")

    messages = [r.getMessage() for r in caplog.records if r.name == "api"]
    assert "-> GET /category" in messages
    assert any(m.startswith("<- GET /category - Status: 200") for m in messages)


@pytest.mark.asyncio
async def test_server_error_logged_as_warning(
    client: AsyncClient, store, storage_failure, caplog
):
    """5xx 응답은 WARNING으로 기록된다."""
    store.fail_with = storage_failure

    with caplog.at_level(logging.INFO, logger="api"):
        res = await client.get("/category")

    assert res.status_code == 500
    warnings = [
        r for r in caplog.records
        if r.name == "api" and r.levelno == logging.WARNING
    ]
    assert any("Status: 500" in r.getMessage() for r in warnings)
