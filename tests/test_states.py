import logging

import numpy as np
import pytest

from porefluids import (
    CompositionalFluidState,
    DomainError,
    FluidState,
    Phase,
    ValidationError,
)
from porefluids import Component as C

MOLAR_MASSES = [0.018015284, 0.02801348]


def test_state_satisfies_protocol(fluid_state):
    assert isinstance(fluid_state, FluidState)


def test_from_fluid_system(fluid_state):
    np.testing.assert_array_equal(fluid_state.molar_masses, MOLAR_MASSES)
    np.testing.assert_array_equal(fluid_state.partial_pressures, [0.0, 0.0])
    assert fluid_state.mole_frac(Phase.GAS, C.N2) == 0.98
    assert fluid_state.mole_frac(Phase.LIQUID, C.H2O) == 1.0


def test_mass_fractions(fluid_state):
    mean = 0.02 * MOLAR_MASSES[0] + 0.98 * MOLAR_MASSES[1]
    assert fluid_state.average_molar_mass(Phase.GAS) == pytest.approx(mean)
    assert fluid_state.mass_frac(Phase.GAS, C.H2O) == pytest.approx(
        0.02 * MOLAR_MASSES[0] / mean
    )
    total = sum(fluid_state.mass_frac(Phase.GAS, comp) for comp in C)
    assert total == pytest.approx(1.0)
    assert fluid_state.mass_frac(Phase.LIQUID, C.N2) == 0.0


def test_mass_fraction_of_empty_phase():
    state = CompositionalFluidState(
        mole_fractions=[[1.0, 0.0], [0.0, 0.0]], molar_masses=MOLAR_MASSES
    )
    assert state.mass_frac(Phase.GAS, C.N2) == 0.0


def test_setters(fluid_state):
    fluid_state.set_partial_pressure(C.N2, 9.8e4)
    assert fluid_state.partial_pressure(C.N2) == 9.8e4
    fluid_state.set_mole_frac(Phase.LIQUID, C.N2, 1e-5)
    assert fluid_state.mole_frac(Phase.LIQUID, C.N2) == 1e-5
    with pytest.raises(ValidationError):
        fluid_state.set_mole_frac(Phase.LIQUID, C.N2, 1.5)


@pytest.mark.parametrize("phase_idx, comp_idx", [(2, 0), (0, 2), (-1, 0), (0, "N2"), (0.0, 1)])
def test_invalid_indices(fluid_state, phase_idx, comp_idx):
    with pytest.raises(DomainError):
        fluid_state.mole_frac(phase_idx, comp_idx)


def test_invalid_compositions():
    with pytest.raises(ValidationError):
        CompositionalFluidState(mole_fractions=[[1.2, -0.2], [0.5, 0.5]], molar_masses=MOLAR_MASSES)
    with pytest.raises(ValidationError):
        CompositionalFluidState(mole_fractions=[1.0, 0.0], molar_masses=MOLAR_MASSES)
    with pytest.raises(ValidationError):
        CompositionalFluidState(mole_fractions=[[1.0, 0.0], [0.5, 0.5]], molar_masses=[0.018])
    with pytest.raises(ValidationError):
        CompositionalFluidState(
            mole_fractions=[[1.0, 0.0], [0.5, 0.5]], molar_masses=MOLAR_MASSES, partial_pressures=[1.0]
        )


def test_fraction_sum_deviation_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="porefluids.states"):
        CompositionalFluidState(mole_fractions=[[1.0, 0.0], [0.3, 0.3]], molar_masses=MOLAR_MASSES)
    assert "phase 1 sum to 0.600000" in caplog.text
