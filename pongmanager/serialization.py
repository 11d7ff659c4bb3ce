"""
JSON helpers for engine values and championship snapshots.

to_json_dict() walks a dataclass tree and tags every dataclass with a "type"
key holding its class name, at every level of nesting, so a consumer can
dispatch on nested values without knowing the schema up front.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from pathlib import Path

from pongmanager.championship import Championship


def to_json_dict(obj: object) -> object:
    """Recursively convert dataclasses/lists/tuples/dicts to JSON-ready values."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result: dict[str, object] = {"type": type(obj).__name__}
        for f in dataclasses.fields(obj):
            if f.name.startswith("_"):
                continue
            result[f.name] = to_json_dict(getattr(obj, f.name))
        return result
    if isinstance(obj, (list, tuple)):
        return [to_json_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): to_json_dict(v) for k, v in obj.items()}
    return obj


def to_json(data: object) -> str:
    """json.dumps with datetime → ISO-string support."""
    def _default(obj: object) -> str:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return json.dumps(data, default=_default, indent=2)


def championship_snapshot(championship: Championship) -> dict:
    """Everything a persistence collaborator needs to store for one championship."""
    snapshot = to_json_dict(championship)
    snapshot["qualifiers"] = championship.qualifiers()
    snapshot["saved_at"] = datetime.now()
    return snapshot


def save_snapshot(championship: Championship, out_dir: Path) -> Path:
    """Write a timestamped snapshot file into out_dir and return its path."""
    out_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = out_dir / f"championship_{_safe(championship.name)}_{timestamp}.json"
    path.write_text(to_json(championship_snapshot(championship)), encoding="utf-8")
    return path


def _safe(name: str) -> str:
    """Strip characters that are problematic in filenames."""
    return "".join(c if c.isalnum() or c in "_-" else "_" for c in name).strip("_")
