"""metadata.core.codec
Wire JSON <-> `MovieRecord`.

Pure functions, no I/O. The same wire shape is used for the catalog
response and for the blobs the favorites repository stores.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List

from movieShelf.errors import DecodeError
from movieShelf.metadata.core.models import MovieRecord

# field name -> (wire key, accepted types)
_FIELDS: Dict[str, tuple[str, tuple[type, ...]]] = {
    "id":                ("id", (int,)),
    "title":             ("title", (str,)),
    "poster_path":       ("poster_path", (str,)),
    "overview":          ("overview", (str,)),
    "release_date":      ("release_date", (str,)),
    "vote_average":      ("vote_average", (int, float)),
    "original_language": ("original_language", (str,)),
}


def _loads(payload: bytes | str) -> Any:
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"payload is not valid JSON: {exc}") from exc


def record_from_dict(item: Any) -> MovieRecord:
    """Build a `MovieRecord` from one decoded wire object.

    Raises
    ------
    DecodeError
        If *item* is not an object, a required key is missing, or a value
        has the wrong type.
    """
    if not isinstance(item, dict):
        raise DecodeError(f"movie must be a JSON object, got {type(item).__name__}")

    values: Dict[str, Any] = {}
    for field, (key, types) in _FIELDS.items():
        if key not in item:
            raise DecodeError(f"movie is missing required key {key!r}")
        value = item[key]
        # TMDb sends null for movies without artwork
        if key == "poster_path" and value is None:
            value = ""
        if isinstance(value, bool) or not isinstance(value, types):
            raise DecodeError(f"bad type for {key!r}: {type(value).__name__}")
        values[field] = value

    values["vote_average"] = float(values["vote_average"])
    return MovieRecord(**values)


def record_to_dict(record: MovieRecord) -> Dict[str, Any]:
    return {key: getattr(record, field) for field, (key, _types) in _FIELDS.items()}


def decode(payload: bytes | str) -> List[MovieRecord]:
    """Decode a catalog response body (`{"results": [...]}`) into records.

    A single encoded movie, as written by `encode`, decodes to a one-item list.
    """
    data = _loads(payload)
    if not isinstance(data, dict):
        raise DecodeError("response must be a JSON object")
    if "results" not in data:
        return [record_from_dict(data)]
    results = data["results"]
    if not isinstance(results, list):
        raise DecodeError("'results' is not a list")
    return [record_from_dict(item) for item in results]


def decode_record(payload: bytes | str) -> MovieRecord:
    """Decode one encoded movie, e.g. a stored favorite."""
    return record_from_dict(_loads(payload))


def encode(record: MovieRecord) -> bytes:
    return json.dumps(record_to_dict(record), ensure_ascii=False).encode("utf-8")
