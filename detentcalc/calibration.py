"""
Centralized sheet constants for the detent calculator.

Values are sourced from anchors.ANCHORS. Update anchors.py deliberately when
the Excel model changes and adjust golden tests accordingly.
"""
from .anchors import ANCHORS

# --- Blank-cell defaults ---
SAT_X_DEFAULT: float = float(ANCHORS["SAT_X_DEFAULT"])          # [%]
DZ_DEFAULT: float = float(ANCHORS["DZ_DEFAULT"])
DETENT_LOC_DEFAULT: float = float(ANCHORS["DETENT_LOC_DEFAULT"])

# --- Sheet scale ---
# Output percent travel; NR/AR intercepts and the inverted display use it.
FULL_SCALE: float = float(ANCHORS["FULL_SCALE"])
PERCENT_BASE: float = float(ANCHORS["PERCENT_BASE"])  # Sat_X [%] -> fraction
MIL_OFFSET: float = float(ANCHORS["MIL_OFFSET"])

# --- IFERROR emulation ---
SAFE_DIV_EPS: float = float(ANCHORS["SAFE_DIV_EPS"])

# --- Default F column ---
F_START: int = int(ANCHORS["F_START"])
F_STOP: int = int(ANCHORS["F_STOP"])
F_STEP: int = int(ANCHORS["F_STEP"])
