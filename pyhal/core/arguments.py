"""Normalization of route params and options."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from .errors import InvalidArgumentError, type_name

logger = logging.getLogger(__name__)

RouteArguments = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def to_mapping(value: Any, method: str) -> dict[str, Any]:
    """Materialize a mapping or an iterable of key/value pairs into a dict.

    Duplicate keys in a pair iterable keep the last value seen.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)):
        try:
            return dict(value)
        except (TypeError, ValueError) as exc:
            logger.debug("%s rejected iterable without key/value pairs: %s", method, exc)
            raise InvalidArgumentError(
                f"{method} expects a mapping or an iterable of key/value pairs; "
                f'received "{type_name(value)}" with invalid items'
            ) from exc
    logger.debug("%s rejected value of type %s", method, type_name(value))
    raise InvalidArgumentError(
        f'{method} expects a mapping or an iterable; received "{type_name(value)}"'
    )
