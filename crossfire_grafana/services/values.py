"""
Firestore typed-value helpers.

The REST API wraps every field in a one-key object naming its type, e.g.
{"stringValue": "x"}, {"mapValue": {"fields": {...}}}, {"arrayValue": {"values": [...]}}.
These helpers unwrap them without raising: a missing key or an unexpected
shape yields "", {} or [].
"""

from typing import Any


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def string_value(fields: Any, key: str) -> str:
    """fields[key].stringValue, or "" if absent or not a string."""
    value = _as_dict(fields).get(key)
    out = _as_dict(value).get("stringValue")
    return out if isinstance(out, str) else ""


def map_fields(value: Any) -> dict[str, Any]:
    """value.mapValue.fields, or {}."""
    return _as_dict(_as_dict(_as_dict(value).get("mapValue")).get("fields"))


def array_values(value: Any) -> list[Any]:
    """value.arrayValue.values, or []. An empty Firestore array omits "values"."""
    values = _as_dict(_as_dict(value).get("arrayValue")).get("values")
    return values if isinstance(values, list) else []


def decode_value(value: Any) -> Any:
    """Convert one typed wrapper into a plain Python value."""
    value = _as_dict(value)
    if "nullValue" in value:
        return None
    if "stringValue" in value:
        return value["stringValue"]
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "integerValue" in value:
        # int64 is sent as a JSON string
        try:
            return int(value["integerValue"])
        except (TypeError, ValueError):
            return value["integerValue"]
    if "doubleValue" in value:
        # NaN and Infinity arrive as strings and are returned unchanged
        raw = value["doubleValue"]
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        return raw
    if "timestampValue" in value:
        return value["timestampValue"]
    if "referenceValue" in value:
        return value["referenceValue"]
    if "bytesValue" in value:
        return value["bytesValue"]
    if "geoPointValue" in value:
        point = _as_dict(value["geoPointValue"])
        return {"latitude": point.get("latitude", 0.0), "longitude": point.get("longitude", 0.0)}
    if "arrayValue" in value:
        return [decode_value(v) for v in array_values(value)]
    if "mapValue" in value:
        return decode_fields(map_fields(value))
    return None


def decode_fields(fields: Any) -> dict[str, Any]:
    """decode_value over every field of a document (or map value)."""
    return {key: decode_value(value) for key, value in _as_dict(fields).items()}


def document_id(name: str) -> str:
    """Last segment of a document resource name."""
    return (name or "").rstrip("/").rsplit("/", 1)[-1]
