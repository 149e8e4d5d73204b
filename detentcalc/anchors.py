"""
Frozen anchor set for the detent sheet constants with brief origin notes.

These values document the intended 1:1 behavior of the Excel detent model.
Tests assert no drift relative to these values. Update this file deliberately
and adjust the golden series tests together with it.
"""

ANCHORS: dict[str, float | int | str] = {
    # Input defaults (blank cells on the sheet)
    "SAT_X_DEFAULT": 100.0,      # percent
    "DZ_DEFAULT": 0.0,           # detent units
    "DETENT_LOC_DEFAULT": 0.0,   # detent units

    # Sheet scale
    "FULL_SCALE": 100.0,         # percent travel, also the display flip
    "PERCENT_BASE": 100.0,       # Sat_X is entered in percent
    "MIL_OFFSET": 1.0,           # MIL = AB_Loc + 1

    # IFERROR emulation
    "SAFE_DIV_EPS": 1e-12,       # |denominator| below this counts as #DIV/0!

    # Default F column (F = 0, 10, ..., 100)
    "F_START": 0,
    "F_STOP": 100,
    "F_STEP": 10,
}

# Origins (free-text for docs)
ORIGINS: dict[str, str] = {
    "SAT_X_DEFAULT": "Sat_X blank → 100 %; Saturation Factor = ROUND(Detent_Loc/(Sat_X/100),0)",
    "DZ_DEFAULT": "DZ blank → 0; DZ_F = Detent_Loc - DZ",
    "FULL_SCALE": "NR_Int = IF(INV=\"X\",100,-(NR_Slope-1)*100); display = 100 - G when inverted",
    "PERCENT_BASE": "Sat_X/100 in Saturation Factor and CF",
    "MIL_OFFSET": "MIL = AB_Loc + 1",
    "SAFE_DIV_EPS": "IFERROR(...,0) around NR_Slope and AR_Slope",
    "F_STEP": "F column of the sheet: 0..100 step 10",
}
