"""Validation gate for inbound payloads.

decode() is the only way a response body gets into the store. A payload that
does not match its model is rejected as a whole; nothing of it is applied.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from asterix_client.errors import Err, Ok, Result, ShapeMismatch

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode(model: type[M], payload: Any) -> Result[M]:
    """Validate `payload` against `model`. Never raises."""
    try:
        value = model.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "rejected %s payload with %d error(s)", model.__name__, e.error_count()
        )
        return Err(ShapeMismatch(model.__name__, e.errors(include_url=False, include_context=False)))
    return Ok(value)
