import jsonpickle
from datetime import datetime, timezone
from typing import Any, Mapping

DIGEST_PREFIX = "sha256:"


def now() -> str:
    return datetime.now(timezone.utc).isoformat()


def image_name(image: str, version: str) -> str:
    """Join image and version into a container image reference.

    A version pinned by digest, like
    sha256:dd15a51ac7dafd213744d1ef23394e7532f71a90f477c969b94600e46da5a0cf,
    is joined with `@` instead of `:`.
    """
    if DIGEST_PREFIX in version:
        return f"{image}@{version}"
    return f"{image}:{version}"


def drop_nulls(data: Any) -> Any:
    """Recursively remove `None` values from dictionaries."""
    if isinstance(data, Mapping):
        return {k: drop_nulls(v) for k, v in data.items() if v is not None}
    elif isinstance(data, list):
        return [drop_nulls(item) for item in data]
    else:
        return data


def sort_dict_keys(d):
    """Recursively sort dictionary keys and handle nested structures.

    Args:
        d: Data structure (dict, list, or primitive type)

    Returns:
        Sorted version of the data structure
    """
    if isinstance(d, Mapping):
        return {key: sort_dict_keys(value) for key, value in sorted(d.items())}
    elif isinstance(d, list):
        return [sort_dict_keys(item) for item in d]
    else:
        return d


def canonicalize_dict(data):
    """
    Returns a canonical JSON representation of a dictionary.

    Keys are sorted recursively, so the representation stays the same
    even when key order varies.
    """
    return jsonpickle.dumps(sort_dict_keys(data), unpicklable=False)


def upsert_condition(conds, newc):
    """In-memory merge by .type. Only bump lastTransitionTime when status flips."""
    conds = list(conds or [])
    for i, c in enumerate(conds):
        if c.get("type") == newc["type"]:
            ltt = c.get("lastTransitionTime") or now()
            if c.get("status") != newc["status"]:
                ltt = now()
            merged = {**c, **newc, "lastTransitionTime": ltt}
            conds[i] = merged
            break
    else:
        conds.append({**newc, "lastTransitionTime": now()})
    return conds
