"""
Client code for Redis access, with in-memory fallback if Redis is unavailable.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import fnmatch
import logging
import time
from typing import Any, Optional, Tuple

from config import settings

log = logging.getLogger(__name__)

_redis_client: Any = None
# key -> (value, expires_at in epoch ms or None)
_fallback: dict[str, Tuple[str, Optional[float]]] = {}
_using_fallback = False
_init_lock = asyncio.Lock()
_retry_after_monotonic: float = 0.0


def now_ms() -> float:
    return time.time() * 1000.0


def _fallback_get(key: str) -> Optional[str]:
    item = _fallback.get(key)
    if item is None:
        return None
    value, expires_at = item
    if expires_at is not None and now_ms() > expires_at:
        _fallback.pop(key, None)
        return None
    return value


def _fallback_set(key: str, value: str, ttl_ms: Optional[int]) -> None:
    if key not in _fallback and len(_fallback) >= settings.store_fallback_max_items:
        log.debug("Fallback store full, dropping %s", key)
        return
    expires_at = now_ms() + ttl_ms if ttl_ms else None
    _fallback[key] = (value, expires_at)


async def get_redis() -> Any:
    global _redis_client, _using_fallback, _retry_after_monotonic

    if _redis_client is not None:
        return _redis_client
    if time.monotonic() < _retry_after_monotonic:
        _using_fallback = True
        return None

    async with _init_lock:
        if _redis_client is not None:
            return _redis_client
        if time.monotonic() < _retry_after_monotonic:
            _using_fallback = True
            return None
        try:
            import redis.asyncio as aioredis
            from config import REDIS_URL

            timeout = settings.store_redis_op_timeout_seconds
            client = aioredis.from_url(
                REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
            )
            await asyncio.wait_for(client.ping(), timeout=timeout)
            _redis_client = client
            _retry_after_monotonic = 0.0
            _using_fallback = False
            log.info("Redis connected: %s", REDIS_URL)
            return _redis_client
        except Exception as exc:
            _retry_after_monotonic = time.monotonic() + max(0.0, settings.store_redis_retry_cooldown_seconds)
            if not _using_fallback:
                log.warning("Redis unavailable (%s), using in-memory fallback", exc)
                _using_fallback = True
            return None


async def redis_get(key: str) -> Optional[str]:
    client = await get_redis()
    if client is None:
        return _fallback_get(key)
    try:
        return await asyncio.wait_for(client.get(key), timeout=settings.store_redis_op_timeout_seconds)
    except Exception as exc:
        log.debug("Redis GET error %s: %s", key, exc)
        return _fallback_get(key)


async def redis_set(key: str, value: str, ttl_ms: Optional[int] = None) -> None:
    client = await get_redis()
    if client is None:
        _fallback_set(key, value, ttl_ms)
        return
    try:
        timeout = settings.store_redis_op_timeout_seconds
        if ttl_ms:
            await asyncio.wait_for(client.psetex(key, int(ttl_ms), value), timeout=timeout)
        else:
            await asyncio.wait_for(client.set(key, value), timeout=timeout)
    except Exception as exc:
        log.debug("Redis SET error %s: %s", key, exc)
        _fallback_set(key, value, ttl_ms)


async def redis_delete(key: str) -> None:
    client = await get_redis()
    if client is None:
        _fallback.pop(key, None)
        return
    try:
        await asyncio.wait_for(client.delete(key), timeout=settings.store_redis_op_timeout_seconds)
    except Exception as exc:
        log.debug("Redis DEL error %s: %s", key, exc)
        _fallback.pop(key, None)


def _fallback_scan(pattern: str) -> list[str]:
    return [k for k in list(_fallback) if fnmatch.fnmatch(k, pattern) and _fallback_get(k) is not None]


async def redis_scan(pattern: str) -> list[str]:
    client = await get_redis()
    if client is None:
        return _fallback_scan(pattern)
    try:
        async def _scan_keys() -> list[str]:
            return [key async for key in client.scan_iter(pattern)]

        return await asyncio.wait_for(_scan_keys(), timeout=1.0)
    except Exception as exc:
        log.debug("Redis SCAN error %s: %s", pattern, exc)
        return _fallback_scan(pattern)


def is_using_fallback() -> bool:
    return _using_fallback
