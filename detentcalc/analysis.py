"""
Series generators for the detent curve (backend-only). Returns lists; no plotting.
Uses formulas and centralized calibration constants.
"""
from typing import Any, List, Sequence
import logging

from . import calibration as CAL
from . import formulas as F
from .schemas import CalibrationInputs, EvaluatedPoint, NormalizedInputs, Ranges, SeriesResult


def default_f_values() -> List[float]:
    """F column of the sheet: 0, 10, ..., 100."""
    return [float(x) for x in range(CAL.F_START, CAL.F_STOP + 1, CAL.F_STEP)]


def series_g(f_values: Sequence[Any], ranges: Ranges, inv_flag: Any) -> List[float]:
    return [F.evaluate_f(f, ranges, inv_flag) for f in f_values]


def series_display(g_values: Sequence[Any], inv_flag: Any) -> List[float]:
    return [F.display_value_from_g(g, inv_flag) for g in g_values]


def compute_series(inputs: CalibrationInputs) -> SeriesResult:
    """Evaluate the detent curve over the F column.

    Factors are derived once, then the NR/AR pairs from the unrounded CF.
    Caller-supplied F values are used verbatim (order and duplicates kept);
    missing or empty values fall back to default_f_values().
    """
    inv = F.is_inv_flag(inputs.invert)
    factors = F.compute_factors(inputs.detent_loc, inputs.sat_x, inputs.dz)
    ranges = F.compute_ranges(inputs.ab_loc, factors.combined_factor, inv)
    logging.getLogger(__name__).debug(
        "detent constants: inverted=%s factors=%s ranges=%s", inv, factors, ranges
    )

    f_values = list(inputs.values) if inputs.values else default_f_values()
    g_values = series_g(f_values, ranges, inv)
    display = series_display(g_values, inv)
    points = tuple(
        EvaluatedPoint(x=f, g=g, display=d) for f, g, d in zip(f_values, g_values, display)
    )

    return SeriesResult(
        inputs=NormalizedInputs(
            ab_loc=inputs.ab_loc,
            mil=ranges.mil,
            detent_loc=inputs.detent_loc,
            sat_x=inputs.sat_x,
            dz=inputs.dz,
            invert=inputs.invert,
            inverted=inv,
        ),
        factors=factors,
        ranges=ranges,
        series=points,
    )
