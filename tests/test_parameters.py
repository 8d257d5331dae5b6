import math

import pytest

from spirograph import config
from spirograph.model.parameters import PARAMETER_NAMES, Parameter, ParameterValues, default_parameters


def test_declared_ranges():
    params = default_parameters()
    assert list(params) == list(PARAMETER_NAMES)
    assert (params["major_radius"].minimum, params["major_radius"].maximum) == (0.0, 100.0)
    assert (params["minor_radius"].minimum, params["minor_radius"].maximum) == (0.0, 100.0)
    assert (params["offset"].minimum, params["offset"].maximum) == (0.0, 50.0)
    assert (params["sample_count"].minimum, params["sample_count"].maximum) == (2.0, 100.0)


def test_defaults():
    params = default_parameters()
    assert params["major_radius"].default == 100.0
    assert params["minor_radius"].default == 50.0
    assert params["offset"].default == 25.0
    assert params["sample_count"].default == 50.0


def test_labels():
    labels = [p.label for p in default_parameters().values()]
    assert labels == ["Major", "Minor", "Offset", "Sample"]


def test_clamp():
    p = Parameter("offset", "Offset", 0.0, 50.0, 25.0)
    assert p.clamp(9999) == 50.0
    assert p.clamp(-50) == 0.0
    assert p.clamp(12.5) == 12.5
    assert p.clamp(math.inf) == 50.0
    assert p.clamp(-math.inf) == 0.0


def test_clamp_rejects_nan():
    p = Parameter("offset", "Offset", 0.0, 50.0, 25.0)
    with pytest.raises(ValueError):
        p.clamp(math.nan)


def test_minor_radius_floor_keeps_it_positive():
    minor = default_parameters()["minor_radius"]
    assert minor.minimum == 0.0
    assert minor.lower_bound == config.MINOR_RADIUS_EPSILON
    assert minor.clamp(0) == config.MINOR_RADIUS_EPSILON
    assert minor.clamp(-10) > 0


def test_sample_count_never_below_two():
    samples = default_parameters()["sample_count"]
    assert samples.clamp(0) == 2.0


def test_invalid_declarations():
    with pytest.raises(ValueError):
        Parameter("bad", "Bad", 10.0, 0.0, 5.0)
    with pytest.raises(ValueError):
        Parameter("bad", "Bad", 0.0, 10.0, 11.0)


def test_values_field_order():
    assert ParameterValues._fields == ("major_radius", "minor_radius", "offset", "sample_count")
