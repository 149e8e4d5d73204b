import math

import pytest
from pydantic import ValidationError

from detentcalc import calibration as CAL
from detentcalc.anchors import ANCHORS
from detentcalc.schemas import CalibrationInputs, Factors


def test_calibration_matches_anchors():
    # no drift between frozen anchors and runtime constants
    for key in ("SAT_X_DEFAULT", "DZ_DEFAULT", "DETENT_LOC_DEFAULT", "FULL_SCALE",
                "PERCENT_BASE", "MIL_OFFSET", "SAFE_DIV_EPS", "F_START", "F_STOP", "F_STEP"):
        assert float(getattr(CAL, key)) == float(ANCHORS[key])


def test_inputs_defaults():
    data = CalibrationInputs(ab_loc=2)
    assert data.detent_loc == 0
    assert data.sat_x == 100
    assert data.dz == 0
    assert data.invert is False
    assert data.values is None


def test_inputs_keep_raw_flag_encoding():
    assert CalibrationInputs(ab_loc=0, invert="1").invert == "1"
    assert CalibrationInputs(ab_loc=0, invert=True).invert is True


def test_inputs_text_cells_become_nan():
    data = CalibrationInputs(ab_loc=0, detent_loc="abc", sat_x=None)
    assert math.isnan(data.detent_loc)
    assert math.isnan(data.sat_x)


def test_inputs_values_are_coerced_to_tuple():
    data = CalibrationInputs(ab_loc=0, values=[1, "2", 3.5])
    assert data.values == (1.0, 2.0, 3.5)


def test_models_are_frozen():
    f = Factors(sat_factor=1, dz_factor=1, combined_factor=1)
    with pytest.raises(ValidationError):
        f.sat_factor = 2
