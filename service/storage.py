import json
import logging
from pathlib import Path
from typing import Iterable, List

import pandas as pd
from pydantic import TypeAdapter, ValidationError

from .models.records import PathQuery, PathResult, UserRecord

logger = logging.getLogger(__name__)

_USERS = TypeAdapter(List[UserRecord])


class InputFileError(Exception):
    """An input file is missing, unreadable or does not match the expected layout."""

    def __init__(self, path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


def load_users(path) -> list[UserRecord]:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise InputFileError(path, "unable to read input json file") from e

    try:
        users = _USERS.validate_json(raw)
    except ValidationError as e:
        raise InputFileError(path, f"invalid user records ({e.error_count()} errors)") from e

    logger.info("loaded %d users from %s", len(users), path)
    return users


def load_queries(path) -> list[PathQuery]:
    """
    Header-less CSV, one query per row: from-email, to-email.
    Cells are kept as raw strings (no NA coercion, no trimming);
    a missing or empty cell is an input error.
    """
    path = Path(path)
    try:
        # only empty cells count as missing; literal NA/null stay strings
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, na_values=[""])
    except pd.errors.EmptyDataError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(path, "unable to read input file") from e
    except pd.errors.ParserError as e:
        raise InputFileError(path, "unable to parse file as CSV") from e

    if df.shape[1] != 2 or df.isna().any(axis=None) or (df == "").any(axis=None):
        raise InputFileError(path, "expected exactly two columns (from, to) per row")

    queries = [PathQuery(from_email=src, to_email=dst) for src, dst in df.itertuples(index=False, name=None)]
    logger.info("loaded %d queries from %s", len(queries), path)
    return queries


def save_results(results: Iterable[PathResult], path) -> None:
    path = Path(path)
    rows = [r.to_json_dict() for r in results]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("wrote %d results to %s", len(rows), path)
