"""
Thin, stable API for hosts (report generators, UIs, test harnesses).

Contracts (do not change signatures):
  - compute_series(inputs) -> SeriesResult
  - series_table(result) -> dict

The sheet building blocks are re-exported here so a host only needs this
module: excel_round, compute_mil, compute_factors, compute_ranges,
evaluate_f, display_value_from_g.

Numeric edge cases never raise; only structurally invalid inputs do
(pydantic ValidationError or BackendError).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Union
import logging

from .analysis import default_f_values
from .analysis import compute_series as _compute_series
from .formulas import (
    compute_factors,
    compute_mil,
    compute_ranges,
    display_value_from_g,
    evaluate_f,
    excel_round,
    excel_round_int,
    is_inv_flag,
    safe_divide,
)
from .schemas import CalibrationInputs, SeriesResult

__all__ = [
    "BackendError",
    "compute_factors",
    "compute_mil",
    "compute_ranges",
    "compute_series",
    "default_f_values",
    "display_value_from_g",
    "evaluate_f",
    "excel_round",
    "excel_round_int",
    "is_inv_flag",
    "safe_divide",
    "series_table",
]


class BackendError(Exception):
    """Raised when inputs cannot be interpreted as calibration inputs at all."""
    pass


def compute_series(inputs: Union[CalibrationInputs, Mapping[str, Any]]) -> SeriesResult:
    """Compute the detent series from a CalibrationInputs model or a plain dict.

    Dict keys may use either snake_case (ab_loc, detent_loc, sat_x, dz, invert,
    values) or the sheet's camelCase names (abLoc, detentLoc, satX, invFlag, Fvalues).
    """
    try:
        return _compute_series_impl(inputs)
    except Exception:
        logging.getLogger(__name__).exception("compute_series failed")
        raise


def _compute_series_impl(inputs: Union[CalibrationInputs, Mapping[str, Any]]) -> SeriesResult:
    if isinstance(inputs, CalibrationInputs):
        data = inputs
    elif isinstance(inputs, Mapping):
        data = CalibrationInputs.model_validate(dict(inputs))
    else:
        raise BackendError(f"inputs must be a mapping or CalibrationInputs, got {type(inputs).__name__}")
    return _compute_series(data)


def series_table(result: SeriesResult) -> Dict[str, Any]:
    """Pack a SeriesResult as {headers, rows} for report/UI tables."""
    headers = ["F", "G", "Display"]
    rows = [[p.x, p.g, p.display] for p in result.series]
    return {"headers": headers, "rows": rows}
