import json
import os
from typing import Any, Dict, List

import pandas as pd


def _coerce_plain(value: Any) -> Any:
    """Turn numpy arrays/scalars from pandas into plain Python values."""
    if isinstance(value, dict):
        return {k: _coerce_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_coerce_plain(v) for v in value]
    if hasattr(value, "tolist"):
        return _coerce_plain(value.tolist())
    return value


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads lock puzzles from a file. Handles .json, .jsonl, .csv and .parquet.
    Returns a list of raw puzzle dictionaries with keys "id", "size", "clues".
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_missing(value: Any) -> bool:
        # Missing cells in tabular input come back as NaN.
        if isinstance(value, float) and value != value:
            return True
        return value is None or (isinstance(value, str) and value.strip() == "")

    def _normalize_record(record: Dict[str, Any], index: int) -> Dict[str, Any]:
        record = _coerce_plain(dict(record))

        pid = record.get("id")
        if _is_missing(pid):
            record["id"] = f"row_{index}"
        else:
            record["id"] = str(pid)

        size_value = record.get("size")
        if _is_missing(size_value):
            record["size"] = None
        elif isinstance(size_value, str) and size_value.strip().isdigit():
            record["size"] = int(size_value.strip())
        elif isinstance(size_value, float) and size_value.is_integer():
            # Integer columns with gaps are read back as floats.
            record["size"] = int(size_value)

        clues = record.get("clues")
        if isinstance(clues, str) and clues.strip().startswith("["):
            # CSV cells may hold a JSON-encoded list of clues.
            try:
                record["clues"] = json.loads(clues)
            except json.JSONDecodeError:
                pass
        return record

    def _normalize_all(records: List[Any]) -> List[Dict[str, Any]]:
        return [_normalize_record(r, i) for i, r in enumerate(records) if isinstance(r, dict)]

    # Case 1: Parquet File (Binary)
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 2: CSV File (clues as ";"-separated lines or a JSON list)
    if file_path.endswith(".csv"):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize_all(df.to_dict(orient="records"))

    # Case 3: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return _normalize_all(payload)
            if isinstance(payload, dict):
                return _normalize_all([payload])
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            pass

    # Case 4: JSONL File (Text)
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(obj)
    return _normalize_all(data)
