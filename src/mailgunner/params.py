"""Request parameter and path helpers for Mailgun requests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union
from urllib.parse import quote

Scalar = Union[str, int, float, bool]

# A parameter is either a single value or an ordered sequence of values.
# Sequences expand to one ``key=value`` pair per element.
ParamValue = Union[Scalar, Sequence[Scalar], None]
Params = Mapping[str, ParamValue]


def encode_path_segment(value: str) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode (domain, email address, route id).

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(str(value), safe="")


def _render(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_multi(value: ParamValue) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def expand_params(params: Params | None) -> dict[str, str | list[str]]:
    """Normalize a parameter mapping for ``params=`` or ``data=``.

    Mapping order is preserved. Any non-string sequence becomes a list of
    strings, which httpx sends as repeated keys in element order. ``None``
    values are dropped.
    """
    expanded: dict[str, str | list[str]] = {}
    if not params:
        return expanded
    for key, value in params.items():
        if value is None:
            continue
        if _is_multi(value):
            expanded[key] = [_render(item) for item in value]
        else:
            expanded[key] = _render(value)
    return expanded


def merge_params(params: Params | None, extra: Mapping[str, ParamValue]) -> dict[str, ParamValue]:
    """Combine a filter mapping with keyword filters, mapping entries first."""
    merged: dict[str, ParamValue] = dict(params or {})
    merged.update(extra)
    return merged
