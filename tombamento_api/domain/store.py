"""In-memory store aggregate holding tombamentos and detalhes."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Hashable, Iterable, Mapping

from loguru import logger

Record = dict[str, Any]

COLLECTIONS = ("tombamentos", "detalhes")

_slot_ids = count()


@dataclass(frozen=True)
class UnkeyedSlot:
    """Key for a loaded entry that cannot be addressed by code (no code, bad code, repeated code)."""

    slot: int


def normalize_code(value: Any) -> str | None:
    """Codes are text; integers become their decimal form. Anything else has no code."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def _index_by_code(records: Iterable[Any], name: str) -> dict[Hashable, Any]:
    """
    Build a code-keyed mapping that keeps every loaded entry in file order.

    The first entry with a given code is the addressable one; entries without
    a usable code, and later repeats, are kept under an UnkeyedSlot so they
    are written back on the next save.
    """
    indexed: dict[Hashable, Any] = {}
    for position, entry in enumerate(records):
        code = normalize_code(entry.get("code")) if isinstance(entry, dict) else None
        if code is None or code in indexed:
            logger.warning(f"{name}[{position}] sem código utilizável ou repetido, mantido sem indexação")
            indexed[UnkeyedSlot(next(_slot_ids))] = entry
            continue
        if entry["code"] != code:
            entry = {**entry, "code": code}
        indexed[code] = entry
    return indexed


@dataclass
class Store:
    """
    Both collections keyed by `code`.

    Dicts keep insertion order and replacing a value keeps its slot, so
    listing a collection yields insertion order with in-place updates.
    """

    tombamentos: dict[Hashable, Any] = field(default_factory=dict)
    detalhes: dict[Hashable, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Store":
        return cls(
            tombamentos=_index_by_code(data.get("tombamentos") or [], "tombamentos"),
            detalhes=_index_by_code(data.get("detalhes") or [], "detalhes"),
        )

    def to_dict(self) -> dict[str, list[Any]]:
        return {
            "tombamentos": list(self.tombamentos.values()),
            "detalhes": list(self.detalhes.values()),
        }

    def status_distribution(self) -> dict[str, int]:
        counts = Counter(
            str(record.get("status")) if isinstance(record, dict) else "None"
            for record in self.tombamentos.values()
        )
        return dict(counts)


def upsert(collection: dict[Hashable, Any], record: Record) -> bool:
    """Insert or replace `record` by its code. Returns True when it was created."""
    code = record["code"]
    created = code not in collection
    collection[code] = record
    return created


def remove(collection: dict[Hashable, Any], code: str) -> int:
    """Remove every entry carrying `code`, including unindexed repeats. Returns how many."""
    removed = 1 if collection.pop(code, None) is not None else 0
    repeats = [
        key for key, entry in collection.items()
        if isinstance(key, UnkeyedSlot) and isinstance(entry, dict) and normalize_code(entry.get("code")) == code
    ]
    for key in repeats:
        del collection[key]
    return removed + len(repeats)
