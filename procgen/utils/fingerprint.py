"""Content fingerprints for save/replay verification.

A save file can store the fingerprint of each record a player saw; on load the
record is regenerated from its seed path and the fingerprints compared.  The
fingerprint is xxh64 over canonical JSON (sorted keys, seeds as decimal text).
"""

from __future__ import annotations

import json
from typing import Any

import xxhash
from pydantic import TypeAdapter

from procgen.core.models import EncounterDef, MissionDef, SectorDef, SystemDef

Record = SectorDef | SystemDef | MissionDef | EncounterDef

_adapters: dict[type, TypeAdapter[Any]] = {}

_SEED_FIELDS = frozenset({"seed"})


def _adapter(tp: type) -> TypeAdapter[Any]:
    ta = _adapters.get(tp)
    if ta is None:
        ta = _adapters[tp] = TypeAdapter(tp)
    return ta


def _stringify_seeds(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: (str(v) if k in _SEED_FIELDS and isinstance(v, int) else _stringify_seeds(v))
            for k, v in obj.items()
        }
    if isinstance(obj, list):
        return [_stringify_seeds(v) for v in obj]
    return obj


def canonical_json(record: Record) -> str:
    """Stable JSON form of a record: enum values, sorted keys, decimal-text seeds."""
    data = _stringify_seeds(_adapter(type(record)).dump_python(record, mode="json"))
    return json.dumps(data, sort_keys=True, separators=(",", ":"))


def content_fingerprint(record: Record) -> str:
    """Hex xxh64 digest of ``canonical_json(record)``."""
    return xxhash.xxh64(canonical_json(record).encode("utf-8")).hexdigest()
