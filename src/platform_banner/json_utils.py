from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

JSONValue = dict[str, "JSONValue"] | list["JSONValue"] | str | int | float | bool | None

# TypedDict records (TrackRecord, log payloads) are accepted through Mapping.
JSONInput = str | int | float | bool | None | Mapping[str, object] | Sequence[object]


class InvalidJsonError(ValueError):
    """Raised when a response body is not a JSON document."""


def dump_json_str(value: JSONInput, *, compact: bool = True, indent: int | None = None) -> str:
    """Serialize ``value``; non-ASCII text is written as is.

    ``indent`` takes precedence over ``compact``.
    """
    if indent is not None:
        return json.dumps(value, indent=indent, ensure_ascii=False)
    separators = (",", ":") if compact else (", ", ": ")
    return json.dumps(value, separators=separators, ensure_ascii=False)


def load_json_str(raw: str) -> JSONValue:
    try:
        parsed: JSONValue = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(f"Invalid JSON payload: {exc.msg}") from exc
    return parsed


__all__ = ["InvalidJsonError", "JSONInput", "JSONValue", "dump_json_str", "load_json_str"]
