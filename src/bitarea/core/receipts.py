"""
Section Receipts & Double-Run Checker

A receipt is the audit record of one section of bitarea work: ordered
key/value facts plus a BLAKE3 section_hash bound to the registry hash.
Running the same section twice must reproduce the section_hash exactly.
"""

import json
from typing import Any, Callable

from .registry import param_registry
from .hashing import blake3_hash

# bool is a subclass of int, so it is covered too
_SCALARS = (int, str, type(None))


def _canonical(obj: Any) -> bytes:
    """Sorted-key compact UTF-8 JSON."""
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(',', ':')).encode('utf-8')


def _check_value(value: Any, path: str) -> None:
    """Reject anything that is not int/bool/str/None or a list/tuple/dict of those."""
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"Non-string dict key {k!r} at '{path}'")
            _check_value(v, f"{path}.{k}")
        return
    # floats included: payload words go in as ints
    raise ReceiptError(f"{type(value).__name__} not allowed in receipts at '{path}'")


class Receipts:
    """
    Section-scoped receipt builder.

    Digest layout:
      {
        "section": str,
        "format_version": registry["format_version"],
        "param_registry_hash": hash of the canonical registry,
        "payload": {key: value, ...} in insertion order,
        "section_hash": hash of the four fields above
      }
    """

    def __init__(self, section: str):
        self.section = section
        self.payload: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Record one fact.

        Raises:
            ReceiptError: On a duplicate key or a value outside the allowed types.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        _check_value(value, key)
        self.payload[key] = value

    def digest(self) -> dict:
        registry = param_registry()
        body = {
            "section": self.section,
            "format_version": registry["format_version"],
            "param_registry_hash": blake3_hash(_canonical(registry)),
            "payload": dict(self.payload),
        }
        return {**body, "section_hash": blake3_hash(_canonical(body))}


def assert_double_run_equal(build_section_callable: Callable[[], Receipts]) -> None:
    """
    Build the section twice and compare section hashes.

    Raises:
        DeterminismError: Naming the first payload key (run A order) whose
            value differs, or None if only the key sets differ.
    """
    a = build_section_callable().digest()
    b = build_section_callable().digest()
    if a["section_hash"] == b["section_hash"]:
        return

    keys = list(a["payload"]) + [k for k in b["payload"] if k not in a["payload"]]
    first = next(
        (k for k in keys if a["payload"].get(k, "<MISSING>") != b["payload"].get(k, "<MISSING>")),
        None
    )
    raise DeterminismError(a["section"], first, a["section_hash"], b["section_hash"])


class ReceiptError(Exception):
    """Raised on a duplicate key or a disallowed value type."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of one section hash differently."""

    def __init__(self, section: str, first_differing_key: str | None, hash_a: str, hash_b: str):
        self.section = section
        self.first_differing_key = first_differing_key
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Section '{section}' is not deterministic: key '{first_differing_key}' "
            f"differs ({hash_a} != {hash_b})"
        )
