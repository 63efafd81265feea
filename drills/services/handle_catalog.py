"""Catalog Handlers — top_rated, most_expensive over raw dict input.

Invariants:
    - Handlers never raise on bad input (non-list payloads and thresholds included):
      they return a VALIDATION_ERROR dict
    - Raw input is validated with pydantic before any core function sees it
    - Successful results are {"status": "ok", ...} with plain-dict payloads

Design Decisions:
    - Dict in / dict out: callers need no knowledge of core types
    - First pydantic error only: one field, one message, same as the error envelope
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict
from numbers import Real
from typing import Any

from pydantic import BaseModel, ValidationError

from drills.config import get_settings
from drills.core.catalog import filter_by_rating, get_most_expensive_product
from drills.core.errors import ErrorContext, SchemaValidationError
from drills.schemas.catalog import ProductIn, RatedItemIn

logger = logging.getLogger(__name__)


def _validate_all(
    model: type[BaseModel], raw: Any, exercise: str,
) -> list:
    """Validate every raw entry; raise SchemaValidationError on the first failure."""
    if isinstance(raw, (str, bytes, dict)) or not isinstance(raw, Iterable):
        raise SchemaValidationError(
            f"Expected a list of items, got {type(raw).__name__}",
            field="__root__",
            context=ErrorContext(exercise=exercise, input_repr=repr(raw)),
        )
    validated = []
    for index, entry in enumerate(raw):
        try:
            validated.append(model.model_validate(entry))
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"]) or "__root__"
            raise SchemaValidationError(
                f"Item {index}: {first['msg']}",
                field=f"{index}.{loc}",
                context=ErrorContext(exercise=exercise, input_repr=repr(entry)),
            ) from e
    return validated


def _validate_threshold(min_rating: Any, exercise: str) -> float:
    if (
        isinstance(min_rating, bool) or not isinstance(min_rating, Real)
        or min_rating != min_rating
    ):
        raise SchemaValidationError(
            "min_rating must be a real number",
            field="min_rating",
            context=ErrorContext(exercise=exercise, input_repr=repr(min_rating)),
        )
    return min_rating


def top_rated(raw_items: Iterable[Any], min_rating: float | None = None) -> dict:
    """Items rated at least min_rating (default from settings), order preserved."""
    try:
        threshold = _validate_threshold(
            get_settings().min_rating if min_rating is None else min_rating,
            "top_rated",
        )
        items = _validate_all(RatedItemIn, raw_items, "top_rated")
    except SchemaValidationError as e:
        logger.info(
            "top_rated rejected input: %s", e.message,
            extra={"exercise": "top_rated", "error_code": e.code},
        )
        return e.to_dict()

    kept = filter_by_rating([i.to_domain() for i in items], threshold)
    return {
        "status": "ok",
        "min_rating": threshold,
        "items": [asdict(item) for item in kept],
    }


def most_expensive(raw_products: Iterable[Any]) -> dict:
    """Most expensive product, or product=None for an empty list."""
    try:
        products = _validate_all(ProductIn, raw_products, "most_expensive")
    except SchemaValidationError as e:
        logger.info(
            "most_expensive rejected input: %s", e.message,
            extra={"exercise": "most_expensive", "error_code": e.code},
        )
        return e.to_dict()

    best = get_most_expensive_product([p.to_domain() for p in products])
    return {"status": "ok", "product": asdict(best) if best is not None else None}
