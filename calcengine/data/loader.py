"""
Loading and validation of the bundled reference data files.

Each file is validated against a strict pydantic model when it is loaded.
Valid data passes silently; a malformed file raises DataValidationError with
a label pointing at the offending field, e.g.
``wage gap data > occupations[2] > men: expected a finite number, got 'n/a'``.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, ValidationError

from calcengine.exceptions import DataValidationError
from calcengine.logging_config import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent
WAGE_GAP_FILE = DATA_DIR / "wage_gap.json"
WAGE_GAP_LABEL = "wage gap data"


class _DataModel(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)


class OccupationMedians(_DataModel):
    category: str = Field(min_length=1)
    men: FiniteFloat
    women: FiniteFloat


class OverallGap(_DataModel):
    gap_cents: FiniteFloat
    men_median: Optional[FiniteFloat] = None
    women_median: Optional[FiniteFloat] = None


class WageGapData(_DataModel):
    year: Optional[int] = None
    source: Optional[str] = None
    overall: OverallGap
    occupations: List[OccupationMedians] = Field(min_length=1)
    education_multipliers: Dict[str, FiniteFloat]
    experience_multipliers: Dict[str, FiniteFloat]
    state_adjustments: Dict[str, FiniteFloat]


def _error_path(label: str, loc) -> str:
    """Render a pydantic error location as ``label > field[index] > key``."""
    parts = [label]
    for item in loc:
        if isinstance(item, int) and len(parts) > 1:
            parts[-1] = f"{parts[-1]}[{item}]"
        else:
            parts.append(str(item))
    return " > ".join(parts)


def _describe(error: dict) -> str:
    if error["type"] in ("float_type", "finite_number", "float_parsing", "int_type"):
        return f"expected a finite number, got {error.get('input')!r}"
    if error["type"] == "missing":
        return "missing"
    return error["msg"]


def validate_wage_gap_data(raw: Union[dict, object], label: str = WAGE_GAP_LABEL) -> WageGapData:
    """
    Validate already-parsed wage gap data.

    Raises:
        DataValidationError: if the data does not have the expected shape
    """
    if not isinstance(raw, dict):
        raise DataValidationError(f"{label}: expected a non-null object")
    try:
        return WageGapData.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        message = f"{_error_path(label, first['loc'])}: {_describe(first)}"
        logger.error(f"Invalid reference data: {message}")
        raise DataValidationError(message) from e


def load_wage_gap_data(path: Optional[Path] = None) -> WageGapData:
    """
    Read and validate a wage gap data file.

    Args:
        path: File to read (defaults to the bundled wage_gap.json)

    Raises:
        DataValidationError: if the file is not valid JSON or is malformed
    """
    path = Path(path) if path is not None else WAGE_GAP_FILE
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DataValidationError(f"{WAGE_GAP_LABEL}: invalid JSON in {path.name} ({e})") from e

    data = validate_wage_gap_data(raw)
    logger.debug(f"Loaded wage gap data: {len(data.occupations)} occupations")
    return data


@lru_cache(maxsize=1)
def get_wage_gap_data() -> WageGapData:
    """Bundled wage gap data, loaded once per process."""
    return load_wage_gap_data()
