import numpy as np
import pytest

from porefluids import (
    BrooksCoreyParams,
    CompositionalFluidState,
    H2ON2FluidSystem,
    set_dtype,
)


@pytest.fixture(autouse=True)
def default_precision():
    """Run every test in double precision and restore it afterwards."""
    set_dtype(np.float64)
    yield
    set_dtype(np.float64)


@pytest.fixture
def bc_params() -> BrooksCoreyParams:
    """Brooks-Corey parameters used throughout the end-to-end scenarios."""
    return BrooksCoreyParams(entry_pressure=1.0e4, pore_size_distribution_index=2.0)


@pytest.fixture
def fluid_system() -> H2ON2FluidSystem:
    fluid_system = H2ON2FluidSystem()
    fluid_system.init()
    return fluid_system


@pytest.fixture
def fluid_state(fluid_system) -> CompositionalFluidState:
    """Liquid of pure water, gas with 2 mol-% water vapor."""
    return CompositionalFluidState.from_fluid_system(
        fluid_system, mole_fractions=[[1.0, 0.0], [0.02, 0.98]]
    )
