import logging

import numpy as np
import pytest

from porefluids import (
    H2O_N2,
    N2,
    CompositionalFluidState,
    Config,
    DomainError,
    H2ON2FluidSystem,
    IdealGas,
    Phase,
    SimpleH2O,
    TabulatedComponent,
    Range,
    UnsupportedPropertyError,
    c,
)
from porefluids import Component as C

T = 300.0
P = 1.0e5


@pytest.fixture
def pure_n2_gas(fluid_system) -> CompositionalFluidState:
    return CompositionalFluidState.from_fluid_system(
        fluid_system, mole_fractions=[[1.0, 0.0], [0.0, 1.0]]
    )


def test_indices():
    assert H2ON2FluidSystem.num_phases == 2
    assert H2ON2FluidSystem.num_components == 2
    assert H2ON2FluidSystem.liquid_phase_idx == H2ON2FluidSystem.wetting_phase_idx == 0
    assert H2ON2FluidSystem.gas_phase_idx == H2ON2FluidSystem.non_wetting_phase_idx == 1
    assert H2ON2FluidSystem.h2o_idx == 0
    assert H2ON2FluidSystem.n2_idx == 1
    assert Phase.WETTING is Phase.LIQUID
    assert Phase.NON_WETTING is Phase.GAS


def test_names_and_molar_masses(fluid_system):
    assert fluid_system.component_name(C.H2O) == "H2O"
    assert fluid_system.component_name(1) == "N2"
    assert fluid_system.molar_mass(C.H2O) == 0.018015284
    assert fluid_system.molar_mass(C.N2) == 0.02801348
    assert fluid_system.phase_name(Phase.LIQUID) == "liquid"
    assert fluid_system.phase_name(1) == "gas"


def test_partial_pressures(fluid_system, fluid_state):
    fluid_system.compute_partial_pressures(T, P, fluid_state)
    assert fluid_state.partial_pressure(C.H2O) == pytest.approx(2.0e3)
    assert fluid_state.partial_pressure(C.N2) == pytest.approx(9.8e4)


def test_partial_pressures_sum_to_gas_pressure(fluid_system):
    state = CompositionalFluidState.from_fluid_system(
        fluid_system, mole_fractions=[[0.99, 0.01], [0.3, 0.6]]
    )
    fluid_system.compute_partial_pressures(T, 3.0e5, state)
    total = sum(state.partial_pressure(comp) for comp in C)
    assert total == pytest.approx(3.0e5 * 0.9)
    # Composition is never written
    np.testing.assert_array_equal(state.mole_fractions, [[0.99, 0.01], [0.3, 0.6]])


def test_gas_density_of_pure_nitrogen(fluid_system, pure_n2_gas):
    rho = fluid_system.phase_density(Phase.GAS, T, P, pure_n2_gas)
    assert rho == pytest.approx(1.1233, rel=1e-3)


def test_gas_density_uses_mean_molar_mass(fluid_system, fluid_state):
    mean = 0.02 * 0.018015284 + 0.98 * 0.02801348
    assert fluid_system.mean_molar_mass(Phase.GAS, fluid_state) == pytest.approx(mean)
    rho = fluid_system.phase_density(Phase.GAS, 320.0, 2.5e5, fluid_state)
    assert rho == IdealGas.density(
        fluid_system.mean_molar_mass(Phase.GAS, fluid_state), 320.0, 2.5e5
    )


def test_liquid_is_pure_water(fluid_system, fluid_state):
    assert fluid_system.phase_density(Phase.LIQUID, T, P, fluid_state) == 1000.0
    assert fluid_system.phase_viscosity(Phase.LIQUID, T, P, fluid_state) == 1e-3
    assert fluid_system.phase_enthalpy(
        Phase.LIQUID, T, P, fluid_state
    ) == SimpleH2O().liquid_enthalpy(T, P)


def test_gas_viscosity_is_nitrogen_viscosity(fluid_system, fluid_state):
    assert fluid_system.phase_viscosity(Phase.GAS, T, P, fluid_state) == N2().gas_viscosity(
        T, P
    )


def test_degas_pressure(fluid_system):
    assert fluid_system.degas_pressure(C.H2O, T, P) == SimpleH2O().vapor_pressure(T)
    assert fluid_system.degas_pressure(C.N2, T, P) == H2O_N2.henry(T)


def test_component_densities(fluid_system):
    assert fluid_system.component_density(Phase.LIQUID, C.H2O, T, P) == 1000.0
    assert fluid_system.component_density(Phase.GAS, C.H2O, T, 3e3) == pytest.approx(
        IdealGas.density(0.018015284, T, 3e3)
    )
    assert fluid_system.component_density(Phase.GAS, C.N2, T, P) == pytest.approx(1.1233, rel=1e-3)
    with pytest.raises(UnsupportedPropertyError):
        fluid_system.component_density(Phase.LIQUID, C.N2, T, P)


def test_component_pressures(fluid_system):
    rho = fluid_system.component_density(Phase.GAS, C.N2, T, P)
    assert fluid_system.component_pressure(Phase.GAS, C.N2, T, rho) == pytest.approx(P)
    rho = fluid_system.component_density(Phase.GAS, C.H2O, T, 3e3)
    assert fluid_system.component_pressure(Phase.GAS, C.H2O, T, rho) == pytest.approx(3e3)
    with pytest.raises(UnsupportedPropertyError):
        fluid_system.component_pressure(Phase.LIQUID, C.H2O, T, 1000.0)
    with pytest.raises(UnsupportedPropertyError):
        fluid_system.component_pressure(Phase.LIQUID, C.N2, T, 800.0)


@pytest.mark.parametrize("phase_idx", [Phase.LIQUID, Phase.GAS])
def test_diffusion_coefficients_are_symmetric(fluid_system, fluid_state, phase_idx):
    forward = fluid_system.diff_coeff(phase_idx, C.H2O, C.N2, T, P, fluid_state)
    backward = fluid_system.diff_coeff(phase_idx, C.N2, C.H2O, T, P, fluid_state)
    assert forward == backward


def test_diffusion_coefficients_dispatch_per_phase(fluid_system, fluid_state):
    assert fluid_system.diff_coeff(Phase.LIQUID, 0, 1, T, P, fluid_state) == 2e-9
    assert fluid_system.diff_coeff(Phase.GAS, 0, 1, T, P, fluid_state) == H2O_N2.gas_diff_coeff(T, P)


@pytest.mark.parametrize("comp_i, comp_j", [(C.H2O, C.H2O), (C.N2, C.N2)])
def test_diffusion_coefficient_of_identical_components(fluid_system, fluid_state, comp_i, comp_j):
    with pytest.raises(DomainError):
        fluid_system.diff_coeff(Phase.LIQUID, comp_i, comp_j, T, P, fluid_state)


def test_gas_enthalpy_is_mass_weighted(fluid_system, fluid_state):
    fluid_system.compute_partial_pressures(T, P, fluid_state)
    expected = fluid_state.mass_frac(Phase.GAS, C.H2O) * SimpleH2O().gas_enthalpy(
        T, 2e3
    ) + fluid_state.mass_frac(Phase.GAS, C.N2) * N2().gas_enthalpy(T, 9.8e4)
    assert fluid_system.phase_enthalpy(Phase.GAS, T, P, fluid_state) == pytest.approx(expected)


def test_internal_energies(fluid_system, fluid_state):
    fluid_system.compute_partial_pressures(T, P, fluid_state)

    h_l = fluid_system.phase_enthalpy(Phase.LIQUID, T, P, fluid_state)
    u_l = fluid_system.phase_internal_energy(Phase.LIQUID, T, P, fluid_state)
    assert u_l == pytest.approx(h_l - P / 1000.0)

    h_g = fluid_system.phase_enthalpy(Phase.GAS, T, P, fluid_state)
    u_g = fluid_system.phase_internal_energy(Phase.GAS, T, P, fluid_state)
    mean = fluid_system.mean_molar_mass(Phase.GAS, fluid_state)
    assert u_g == pytest.approx(h_g - c.UNIVERSAL_GAS_CONSTANT * T / mean)
    # For an ideal gas p / ρ = R T / M
    rho_g = fluid_system.phase_density(Phase.GAS, T, P, fluid_state)
    assert u_g == pytest.approx(h_g - P / rho_g)


@pytest.mark.parametrize("bad_idx", [2, -1, 5, "gas", None, 1.0])
def test_invalid_phase_index(fluid_system, fluid_state, bad_idx):
    for query in (
        fluid_system.phase_density,
        fluid_system.phase_viscosity,
        fluid_system.phase_enthalpy,
        fluid_system.phase_internal_energy,
    ):
        with pytest.raises(DomainError):
            query(bad_idx, T, P, fluid_state)
    with pytest.raises(DomainError):
        fluid_system.component_density(bad_idx, C.H2O, T, P)
    with pytest.raises(DomainError):
        fluid_system.component_pressure(bad_idx, C.H2O, T, 1.0)
    with pytest.raises(DomainError):
        fluid_system.diff_coeff(bad_idx, C.H2O, C.N2, T, P, fluid_state)
    with pytest.raises(DomainError):
        fluid_system.phase_name(bad_idx)


@pytest.mark.parametrize("bad_idx", [2, -1, "N2", None])
def test_invalid_component_index(fluid_system, fluid_state, bad_idx):
    with pytest.raises(DomainError):
        fluid_system.component_name(bad_idx)
    with pytest.raises(DomainError):
        fluid_system.molar_mass(bad_idx)
    with pytest.raises(DomainError):
        fluid_system.degas_pressure(bad_idx, T, P)
    with pytest.raises(DomainError):
        fluid_system.component_density(Phase.GAS, bad_idx, T, P)
    with pytest.raises(DomainError):
        fluid_system.component_pressure(Phase.GAS, bad_idx, T, 1.0)
    with pytest.raises(DomainError):
        fluid_system.diff_coeff(Phase.GAS, C.H2O, bad_idx, T, P, fluid_state)


def test_liquid_diffusion_of_identical_water_raises(fluid_system, fluid_state):
    with pytest.raises(DomainError):
        fluid_system.diff_coeff(Phase.LIQUID, C.H2O, C.H2O, 300.0, 1e5, fluid_state)


def test_providers_must_satisfy_protocol():
    with pytest.raises(TypeError):
        H2ON2FluidSystem(h2o=object())


def test_init_builds_tabulated_providers_once(caplog):
    water = TabulatedComponent(SimpleH2O())
    fluid_system = H2ON2FluidSystem(h2o=water)
    config = Config(
        temperature_range=Range(min=280.0, max=380.0),
        num_temperature_points=20,
        pressure_range=Range(min=1e4, max=1e6),
        num_pressure_points=20,
    )
    with caplog.at_level(logging.DEBUG, logger="porefluids"):
        fluid_system.init(config)
        fluid_system.init(config)

    assert water.initialized
    assert caplog.text.count("Built 7 property tables for H2O") == 1
    assert "already built" in caplog.text

    state = CompositionalFluidState.from_fluid_system(
        fluid_system, mole_fractions=[[1.0, 0.0], [0.1, 0.9]]
    )
    assert fluid_system.phase_density(Phase.LIQUID, 300.0, 2e5, state) == pytest.approx(1000.0)
    assert fluid_system.degas_pressure(C.H2O, 330.0, 1e5) == pytest.approx(
        SimpleH2O().vapor_pressure(330.0), rel=1e-4
    )
