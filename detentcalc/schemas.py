from __future__ import annotations
from collections.abc import Sequence
from typing import Any, Optional, Tuple
import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from . import calibration as CAL

# INV column: bool, "X"/"x", "true"/"false", "1"/"0", or anything else (-> not inverted)
FlagValue = Any


def _lenient_float(v: Any) -> float:
    # Blank or text cells become NaN; formulas resolve NaN to the sheet default.
    try:
        return float(v)
    except (TypeError, ValueError, OverflowError):
        return math.nan


# Inputs
class CalibrationInputs(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)
    ab_loc: float = Field(validation_alias=AliasChoices("ab_loc", "abLoc"))
    detent_loc: float = Field(default=CAL.DETENT_LOC_DEFAULT, validation_alias=AliasChoices("detent_loc", "detentLoc"))
    sat_x: float = Field(default=CAL.SAT_X_DEFAULT, validation_alias=AliasChoices("sat_x", "satX"))
    dz: float = CAL.DZ_DEFAULT
    invert: FlagValue = Field(default=False, validation_alias=AliasChoices("invert", "invFlag", "inv"))
    values: Optional[Tuple[float, ...]] = Field(default=None, validation_alias=AliasChoices("values", "Fvalues", "f_values"))

    @field_validator("ab_loc", "detent_loc", "sat_x", "dz", mode="before")
    @classmethod
    def _number_cells(cls, v: Any) -> float:
        return _lenient_float(v)

    @field_validator("values", mode="before")
    @classmethod
    def _f_column(cls, v: Any) -> Optional[Tuple[float, ...]]:
        if v is None:
            return None
        if isinstance(v, (str, bytes)) or not isinstance(v, Sequence):
            raise ValueError("values must be a sequence of numbers")
        return tuple(_lenient_float(x) for x in v)


# Derived constants
class Factors(BaseModel):
    model_config = ConfigDict(frozen=True)
    sat_factor: float
    dz_factor: float
    combined_factor: float  # unrounded pivot


class Ranges(BaseModel):
    model_config = ConfigDict(frozen=True)
    mil: float
    combined_factor: float
    nr_slope: float
    nr_int: float
    ar_slope: float
    ar_int: float


# Outputs
class EvaluatedPoint(BaseModel):
    model_config = ConfigDict(frozen=True)
    x: float
    g: float
    display: float


class NormalizedInputs(BaseModel):
    model_config = ConfigDict(frozen=True)
    ab_loc: float
    mil: float
    detent_loc: float
    sat_x: float
    dz: float
    invert: FlagValue
    inverted: bool


class SeriesResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    inputs: NormalizedInputs
    factors: Factors
    ranges: Ranges
    series: Tuple[EvaluatedPoint, ...]
