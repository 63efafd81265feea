"""Delayed Square — async shell that settles n * n (or a rejection) after a fixed delay.

Invariants:
    - Exactly one asyncio.sleep per call, always awaited before the decision is applied
    - Rejections are delivered after the delay too, never before
    - InvalidInputError propagates unmodified to the awaiting caller (no retry, no wrapping)
    - Calls share no state: concurrent calls each await their own delay

Design Decisions:
    - Decision lives in core/square (pure); this module only adds latency and logging
    - Delay defaults to Settings.square_delay_ms (1000 ms); delay_seconds overrides per call
"""

import asyncio
import logging
import math

from drills.config import get_settings
from drills.core.domain_types import Number
from drills.core.errors import InvalidInputError
from drills.core.square import square_or_reject

logger = logging.getLogger(__name__)


def resolve_delay(delay_seconds: float | None = None) -> float:
    """Per-call override wins; otherwise the configured delay, in seconds."""
    if delay_seconds is None:
        return get_settings().square_delay_ms / 1000
    if isinstance(delay_seconds, float) and not math.isfinite(delay_seconds):
        raise ValueError("delay_seconds must be finite")
    if delay_seconds < 0:
        raise ValueError("delay_seconds must be >= 0")
    return delay_seconds


async def square_async(n: Number, delay_seconds: float | None = None) -> Number:
    """Wait the fixed delay, then return n * n or raise InvalidInputError."""
    delay = resolve_delay(delay_seconds)
    await asyncio.sleep(delay)
    try:
        result = square_or_reject(n)
    except InvalidInputError as e:
        logger.warning(
            "square rejected: %s", e.message,
            extra={
                "exercise": "square",
                "error_code": e.code,
                "delay_ms": int(delay * 1000),
                "input_repr": e.context.input_repr,
            },
        )
        raise
    logger.debug(
        "square settled",
        extra={"exercise": "square", "delay_ms": int(delay * 1000)},
    )
    return result
