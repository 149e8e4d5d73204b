import logging

import pytest
from pydantic import ValidationError

from detentcalc import api
from detentcalc.schemas import CalibrationInputs


def test_api_exposes_sheet_functions():
    for name in ("excel_round", "compute_mil", "compute_factors", "compute_ranges",
                 "evaluate_f", "display_value_from_g", "compute_series"):
        assert callable(getattr(api, name))


def test_compute_series_accepts_sheet_key_names():
    res = api.compute_series({"abLoc": 0, "detentLoc": 50, "satX": 100, "dz": 0, "invFlag": "X"})
    assert res.inputs.inverted is True
    assert res.inputs.invert == "X"
    assert res.series[0].display == 0


def test_compute_series_accepts_model():
    data = CalibrationInputs(ab_loc=0, detent_loc=50)
    res = api.compute_series(data)
    assert res.inputs.sat_x == 100
    assert res.inputs.dz == 0
    assert res.series[-1].g == 100


def test_compute_series_text_cells_fall_back_to_defaults():
    res = api.compute_series({"ab_loc": 0, "detent_loc": 50, "sat_x": "", "dz": "n/a"})
    assert res.factors.combined_factor == 50
    assert [p.g for p in res.series][-1] == 100


def test_compute_series_rejects_non_sequence_values():
    with pytest.raises(ValidationError):
        api.compute_series({"ab_loc": 0, "detent_loc": 50, "values": "0,10,20"})
    with pytest.raises(ValidationError):
        api.compute_series({"ab_loc": 0, "detent_loc": 50, "values": 10})


def test_compute_series_requires_ab_loc():
    with pytest.raises(ValidationError):
        api.compute_series({"detent_loc": 50})


def test_compute_series_rejects_non_mapping_and_logs(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(api.BackendError):
            api.compute_series(None)
    assert "compute_series failed" in caplog.text


def test_series_table():
    res = api.compute_series({"ab_loc": 0, "detent_loc": 50, "values": [0, 100]})
    table = api.series_table(res)
    assert table["headers"] == ["F", "G", "Display"]
    assert table["rows"] == [[0, 0, 0], [100, 100, 100]]


def test_compute_series_huge_int_cells_fall_back_to_defaults():
    res = api.compute_series({"ab_loc": 0, "detent_loc": 10**400, "values": [10**400, 100]})
    assert res.factors.combined_factor == 0
    assert [p.g for p in res.series] == [0, 100]
