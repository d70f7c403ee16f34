from __future__ import annotations

from typing import Any, Mapping


def json_sanitize(x: Any) -> Any:
    """
    Convert records and containers into JSON-safe types.
    - records with to_dict() -> their dict form
    - tuple/list -> list
    - mappings -> dicts with str keys, recursively sanitized
    """
    if x is None or isinstance(x, (str, int, float, bool)):
        return x

    to_dict = getattr(x, "to_dict", None)
    if callable(to_dict):
        return json_sanitize(to_dict())

    if isinstance(x, (tuple, list)):
        return [json_sanitize(v) for v in x]

    if isinstance(x, Mapping):
        return {str(k): json_sanitize(v) for k, v in x.items()}

    raise TypeError(f"Object of type {type(x).__name__} is not JSON serializable")
