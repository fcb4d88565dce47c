"""Loading volunteer preferences and worker records from CSV/Excel."""
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from storerota.models.availability import Availability
from storerota.models.worker import Worker
from storerota.utils.logging_setup import get_logger

logger = get_logger("storerota.io.csv_loader")

Source = Union[str, Path, pd.DataFrame]

EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


def _safe_float(value, default: float = 1.0) -> float:
    """Safely convert value to float."""
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def _safe_bool(value, default: bool = True) -> bool:
    """Safely convert value to bool; blank cells count as `default`."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if not value.strip():
            return default
        return value.strip().lower() in ("1", "true", "yes", "x", "có")
    return default


def _read(source: Source) -> pd.DataFrame:
    if isinstance(source, pd.DataFrame):
        return source.copy()
    path = Path(source)
    if not path.exists():
        raise ValueError(f"File not found: {path}")
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return pd.read_excel(path, dtype=str)
    return pd.read_csv(path, dtype=str)


def _require(df: pd.DataFrame, *columns: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Input must have column(s): {', '.join(missing)}")


def load_preferences(source: Source) -> Availability:
    """
    Load slot preferences into an Availability table.

    One row per (worker, day, slot) with columns `name`, `day`, `slot` and an
    optional `available` flag (blank counts as yes). Day and slot accept any
    label understood by normalize_day / SlotType.from_string.

    Args:
        source: Path to a CSV/XLSX file or a pandas DataFrame

    Returns:
        Availability with workers in first-appearance order
    """
    df = _read(source)
    df.columns = [str(c).strip().lower() for c in df.columns]
    _require(df, "name", "day", "slot")
    df = df.fillna("")

    prefs: Dict[str, Dict[str, Dict[str, bool]]] = {}
    for _, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            continue
        day = str(row["day"]).strip()
        slot = str(row["slot"]).strip()
        wants = _safe_bool(row.get("available", ""))
        day_flags = prefs.setdefault(name, {}).setdefault(day, {})
        day_flags[slot] = day_flags.get(slot, False) or wants

    logger.info(f"Loaded preferences for {len(prefs)} workers from {len(df)} rows")
    return Availability.from_preferences(prefs)


def load_workers(source: Source) -> List[Worker]:
    """
    Load worker records.

    Columns: `name` (required), `id` and `salary_coefficient` (optional).
    Missing ids become `W<row number>`.
    """
    df = _read(source)
    df.columns = [str(c).strip().lower() for c in df.columns]
    _require(df, "name")
    df = df.fillna("")

    workers = []
    for idx, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            continue
        worker_id = str(row.get("id", "")).strip() or f"W{idx + 1}"
        workers.append(Worker(
            id=worker_id,
            name=name,
            salary_coefficient=_safe_float(row.get("salary_coefficient"), 1.0),
        ))
    return workers


def workers_to_dataframe(workers: List[Worker]) -> pd.DataFrame:
    """Convert worker records to a DataFrame for display."""
    if not workers:
        return pd.DataFrame(columns=["id", "name", "salary_coefficient"])
    return pd.DataFrame([w.to_dict() for w in workers])
