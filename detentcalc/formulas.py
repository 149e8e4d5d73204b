import math
from typing import Any

from . import calibration as CAL
from .schemas import Factors, Ranges

# =============================
# Excel emulation helpers
# =============================

def _num(x: Any, default: float = math.nan) -> float:
    """Coerce a cell value to float; unparseable or NaN cells give `default`."""
    try:
        v = float(x)
    except (TypeError, ValueError, OverflowError):
        return default
    return default if math.isnan(v) else v

def excel_round(value: Any, decimals: int = 0) -> float:
    """
    Excel ROUND(value, decimals): round half away from zero.
        v >= 0: floor(v * 10^d + 0.5) / 10^d
        v <  0: ceil(v * 10^d - 0.5) / 10^d
    Non-numeric and non-finite values give 0 (sheet IFERROR fallback).
    Args:
        value: cell value
        decimals: digits to keep (may be negative, as in Excel)
    Returns:
        float: rounded value
    """
    v = _num(value)
    if not math.isfinite(v):
        return 0.0
    try:
        factor = math.pow(10, int(decimals))
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(factor) or factor == 0:
        return 0.0
    scaled = v * factor
    if not math.isfinite(scaled):
        return 0.0
    if v >= 0:
        return math.floor(scaled + 0.5) / factor
    return math.ceil(scaled - 0.5) / factor

def excel_round_int(value: Any) -> float:
    """Excel ROUND(value, 0)."""
    return excel_round(value, 0)

def is_inv_flag(inv: Any) -> bool:
    """
    Normalize the sheet INV column to a bool.
    - "X" / "x" (sheet convention) -> True
    - bool -> itself
    - str -> True iff trimmed, lower-cased text is "true" or "1"
    - anything else (None, numbers, ...) -> False
    """
    if inv == "X" or inv == "x":
        return True
    if isinstance(inv, bool):
        return inv
    if isinstance(inv, str):
        s = inv.strip().lower()
        return s == "true" or s == "1"
    return False

def safe_divide(numer: Any, denom: Any) -> float:
    """
    IFERROR(numer/denom, 0): a non-finite denominator or |denom| < SAFE_DIV_EPS gives 0.
    """
    d = _num(denom)
    if not math.isfinite(d) or abs(d) < CAL.SAFE_DIV_EPS:
        return 0.0
    return _num(numer) / d

def _finite_or_zero(x: float) -> float:
    return x if math.isfinite(x) else 0.0

# =============================
# Sheet formulas
# =============================

def compute_mil(ab_loc: Any) -> float:
    """MIL = AB_Loc + 1 (no bounds checking; non-numeric AB_Loc gives NaN)."""
    return _num(ab_loc) + CAL.MIL_OFFSET

def compute_factors(detent_loc: Any, sat_x: Any = CAL.SAT_X_DEFAULT, dz: Any = CAL.DZ_DEFAULT) -> Factors:
    """
    Saturation, deadzone and combined factors:
        Sat_F = ROUND(Detent_Loc / (Sat_X/100), 0)
        DZ_F  = Detent_Loc - DZ
        CF    = DZ_F / (Sat_X/100)
    Sat_X == 0 uses a divisor of 1. CF is left unrounded, as on the sheet;
    it is the pivot evaluate_f compares against.
    Args:
        detent_loc: detent location (missing/non-numeric -> 0)
        sat_x: saturation percentage (missing/non-numeric -> 100)
        dz: deadzone offset (missing/non-numeric -> 0)
    Returns:
        Factors
    """
    d = _num(detent_loc, CAL.DETENT_LOC_DEFAULT)
    s_x = _num(sat_x, CAL.SAT_X_DEFAULT)
    dz_num = _num(dz, CAL.DZ_DEFAULT)
    divisor = 1.0 if s_x == 0 else s_x / CAL.PERCENT_BASE
    sat_factor = excel_round_int(d / divisor)
    dz_factor = d - dz_num
    combined_factor = dz_factor / divisor
    return Factors(sat_factor=sat_factor, dz_factor=dz_factor, combined_factor=combined_factor)

def compute_ranges(ab_loc: Any, combined_factor: Any, inv_flag: Any) -> Ranges:
    """
    Normal range (NR) and alternate range (AR) slope/intercept pairs:
        NR_Slope = IFERROR(IF(INV="X", -(100-MIL)/CF, (100-MIL)/(100-CF)), 0)
        NR_Int   = IF(INV="X", 100, -(NR_Slope-1)*100)
        AR_Slope = IFERROR(IF(INV="X", -MIL/(100-CF), MIL/CF), 0)
        AR_Int   = IF(INV="X", -AR_Slope*100, 0)
    Args:
        ab_loc: AB location (MIL = ab_loc + 1)
        combined_factor: unrounded CF from compute_factors
        inv_flag: raw INV value, normalized with is_inv_flag
    Returns:
        Ranges (CF carried through unchanged)
    """
    mil = compute_mil(ab_loc)
    cf = _num(combined_factor)
    inv = is_inv_flag(inv_flag)
    full = CAL.FULL_SCALE

    if inv:
        nr_slope = safe_divide(-(full - mil), cf)
    else:
        nr_slope = safe_divide(full - mil, full - cf)
    nr_slope = _finite_or_zero(nr_slope)
    nr_int = full if inv else -(nr_slope - 1) * full

    if inv:
        ar_slope = safe_divide(-mil, full - cf)
    else:
        ar_slope = safe_divide(mil, cf)
    ar_slope = _finite_or_zero(ar_slope)
    ar_int = -ar_slope * full if inv else 0.0

    return Ranges(
        mil=mil,
        combined_factor=cf,
        nr_slope=nr_slope,
        nr_int=nr_int,
        ar_slope=ar_slope,
        ar_int=ar_int,
    )

def evaluate_f(f: Any, ranges: Ranges, inv_flag: Any) -> float:
    """
    G value for one F input, Excel-rounded.
    Inverted:     F < CF -> NR pair, else AR pair
    Not inverted: F < CF -> AR pair, else NR pair
    The comparison is strict and uses the unrounded CF.
    """
    fnum = _num(f)
    if is_inv_flag(inv_flag):
        if fnum < ranges.combined_factor:
            y = fnum * ranges.nr_slope + ranges.nr_int
        else:
            y = fnum * ranges.ar_slope + ranges.ar_int
    else:
        if fnum < ranges.combined_factor:
            y = fnum * ranges.ar_slope + ranges.ar_int
        else:
            y = fnum * ranges.nr_slope + ranges.nr_int
    return excel_round_int(y)

def display_value_from_g(g: Any, inv_flag: Any) -> float:
    """Displayed value: 100 - G when inverted, G otherwise."""
    g_num = _num(g)
    return CAL.FULL_SCALE - g_num if is_inv_flag(inv_flag) else g_num
