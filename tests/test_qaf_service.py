"""
Test Suite for the QAF service and its per-request response cache.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest

from api.requests import QafRequest
from engine.enums import QafBand
from services import qaf_service
from store import keys
from store.client import _fallback


def _request(cement_type=None):
    return QafRequest(
        cement_type=cement_type,
        parameters=[
            {"id": "a", "parameter": "A", "min_value": 0, "max_value": 100, "daily_values": [50, 50, 50]},
            {
                "id": "b", "parameter": "B", "min_value": 0, "max_value": 100,
                "opc_max_value": 200, "daily_values": [50, 150, 200],
            },
        ],
    )


def _api_keys():
    return [k for k in _fallback if k.startswith("api_")]


@pytest.mark.asyncio
async def test_response_is_cached_per_request_body():
    first = await qaf_service.qaf_summary(_request())
    assert len(_api_keys()) == 1
    assert first.qaf.monthly.value == pytest.approx(200 / 3)

    second = await qaf_service.qaf_summary(_request())
    assert second == first
    assert len(_api_keys()) == 1

    opc = await qaf_service.qaf_summary(_request(cement_type="OPC"))
    assert len(_api_keys()) == 2
    assert opc.qaf.monthly.value == pytest.approx(100.0)
    assert opc.monthly_band == QafBand.good


@pytest.mark.asyncio
async def test_cached_response_uses_short_ttl(monkeypatch):
    from config import settings
    from store import client

    clock = {"now": 1_000.0}
    monkeypatch.setattr(client, "now_ms", lambda: clock["now"])
    monkeypatch.setattr(qaf_service, "_cache", None)
    monkeypatch.setattr(settings, "api_cache_ttl_ms", 100)

    await qaf_service.qaf_summary(_request())
    (key,) = _api_keys()
    entry = json.loads(_fallback[key][0])
    assert entry["expires_at"] - entry["created_at"] == 100

    clock["now"] += 101
    await qaf_service.cleanup_expired()
    assert _api_keys() == []


@pytest.mark.asyncio
async def test_unreadable_cached_response_is_recomputed():
    req = _request()
    key = keys.api_response(f"{qaf_service.QAF_PATH}?{req.model_dump_json()}")
    await qaf_service.get_cache().set(key, {"rows": "nope"})

    out = await qaf_service.qaf_summary(req)
    assert [r.parameter.id for r in out.rows] == ["a", "b"]
    assert await qaf_service.get_cache().get(key) == out.model_dump(mode="json")


def test_build_response_bands():
    out = qaf_service.build_response(_request())
    assert out.daily_bands == [QafBand.good, QafBand.poor, QafBand.poor]
    assert out.monthly_band == QafBand.poor
