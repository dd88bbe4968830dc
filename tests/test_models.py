import attrs
import numpy as np
import pytest

from porefluids import (
    AbsoluteSaturationParams,
    BrooksCoreyParams,
    PreconditionViolation,
    ResidualSaturations,
    ValidationError,
)


def test_brooks_corey_params_aliases(bc_params):
    assert bc_params.pe == 1.0e4
    assert bc_params.alpha == 2.0
    assert isinstance(bc_params.pe, float)


def test_brooks_corey_params_converts_integers():
    params = BrooksCoreyParams(entry_pressure=500, pore_size_distribution_index=3)
    assert params.entry_pressure == 500.0
    assert isinstance(params.pore_size_distribution_index, float)


@pytest.mark.parametrize(
    "entry_pressure, alpha",
    [(0.0, 2.0), (-1.0, 2.0), (1e4, 0.0), (1e4, -0.5), (np.inf, 2.0), (1e4, np.nan)],
)
def test_brooks_corey_params_must_be_strictly_positive(entry_pressure, alpha):
    with pytest.raises(PreconditionViolation):
        BrooksCoreyParams(entry_pressure=entry_pressure, pore_size_distribution_index=alpha)


def test_precondition_violation_is_a_validation_error():
    with pytest.raises(ValidationError):
        BrooksCoreyParams(entry_pressure=-1.0, pore_size_distribution_index=2.0)
    with pytest.raises(ValueError):
        BrooksCoreyParams(entry_pressure=-1.0, pore_size_distribution_index=2.0)


def test_brooks_corey_params_are_immutable(bc_params):
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        bc_params.entry_pressure = 2.0


def test_residual_saturations():
    residual = ResidualSaturations(wetting=0.1, non_wetting=0.2)
    assert residual.mobile_range == pytest.approx(0.7)
    assert ResidualSaturations().mobile_range == 1.0


@pytest.mark.parametrize(
    "wetting, non_wetting", [(-0.1, 0.0), (0.0, 1.0), (0.6, 0.4), (0.7, 0.5)]
)
def test_invalid_residual_saturations(wetting, non_wetting):
    with pytest.raises(PreconditionViolation):
        ResidualSaturations(wetting=wetting, non_wetting=non_wetting)


def test_absolute_saturation_params_default_residuals(bc_params):
    params = AbsoluteSaturationParams(brooks_corey=bc_params)
    assert params.residual_saturations == ResidualSaturations(0.0, 0.0)
