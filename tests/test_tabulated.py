import logging
import threading

import numpy as np
import pytest

from porefluids import (
    N2,
    ComputationError,
    Config,
    H2ON2FluidSystem,
    Range,
    SimpleH2O,
    TabulatedComponent,
    UnsupportedPropertyError,
    ValidationError,
)


@pytest.fixture
def config() -> Config:
    return Config(
        temperature_range=Range(min=280.0, max=400.0),
        num_temperature_points=25,
        pressure_range=Range(min=1e4, max=1e6),
        num_pressure_points=25,
    )


@pytest.fixture
def water(config) -> TabulatedComponent:
    water = TabulatedComponent(SimpleH2O())
    water.init(config)
    return water


def test_queries_before_init_fail():
    water = TabulatedComponent(SimpleH2O())
    assert not water.initialized
    # Identity does not need tables
    assert water.name == "H2O"
    with pytest.raises(ComputationError):
        water.liquid_density(300.0, 1e5)
    with pytest.raises(ComputationError):
        water.vapor_pressure(300.0)
    with pytest.raises(ComputationError):
        water.gas_pressure(300.0, 0.1)


def test_invalid_interpolation_method():
    with pytest.raises(ValidationError):
        TabulatedComponent(SimpleH2O(), interpolation_method="quintic")


@pytest.mark.parametrize(
    "temperature, pressure", [(285.0, 2e4), (300.0, 1e5), (333.3, 4.5e5), (395.0, 9e5)]
)
def test_tables_match_direct_evaluation(water, temperature, pressure):
    direct = SimpleH2O()
    for name in (
        "liquid_density",
        "liquid_viscosity",
        "liquid_enthalpy",
        "gas_density",
        "gas_viscosity",
        "gas_enthalpy",
    ):
        assert water.exists(name)
        assert getattr(water, name)(temperature, pressure) == pytest.approx(
            getattr(direct, name)(temperature, pressure), rel=1e-5
        )
    assert water.vapor_pressure(temperature) == pytest.approx(
        direct.vapor_pressure(temperature), rel=1e-4
    )


def test_pressure_queries_are_evaluated_directly(water):
    rho = water.gas_density(350.0, 5e4)
    assert water.gas_pressure(350.0, rho) == pytest.approx(5e4, rel=1e-5)
    with pytest.raises(UnsupportedPropertyError):
        water.liquid_pressure(300.0, 1000.0)


@pytest.mark.filterwarnings("ignore::UserWarning")
def test_untabulated_properties_fall_back_to_provider(config, caplog):
    nitrogen = TabulatedComponent(N2(), interpolation_method="linear")
    with caplog.at_level(logging.WARNING, logger="porefluids.components.tabulated"):
        nitrogen.init(config)

    assert "Cannot tabulate 'liquid_density' of N2" in caplog.text
    assert not nitrogen.exists("liquid_density")
    assert nitrogen.exists("gas_viscosity")
    with pytest.raises(UnsupportedPropertyError):
        nitrogen.liquid_density(300.0, 1e5)
    assert nitrogen.gas_viscosity(300.0, 1e5) == pytest.approx(
        N2().gas_viscosity(300.0, 1e5), rel=1e-4
    )


def test_init_is_idempotent(config, caplog):
    water = TabulatedComponent(SimpleH2O())
    with caplog.at_level(logging.DEBUG, logger="porefluids.components.tabulated"):
        water.init(config)
        water.init(config)
    assert caplog.text.count("Built 7 property tables") == 1
    assert "already built, skipping" in caplog.text


def test_concurrent_init_builds_tables_once(config, caplog):
    water = TabulatedComponent(SimpleH2O())
    fluid_system = H2ON2FluidSystem(h2o=water)
    threads = [
        threading.Thread(target=fluid_system.init, args=(config,)) for _ in range(8)
    ]
    with caplog.at_level(logging.DEBUG, logger="porefluids.components.tabulated"):
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    assert water.initialized
    assert caplog.text.count("Built 7 property tables") == 1
    assert caplog.text.count("already built, skipping") == 7


def test_extrapolation_warning(caplog):
    water = TabulatedComponent(SimpleH2O())
    water.init(
        Config(
            temperature_range=Range(min=280.0, max=400.0),
            num_temperature_points=10,
            pressure_range=Range(min=1e4, max=1e6),
            num_pressure_points=10,
            warn_on_extrapolation=True,
        )
    )
    with caplog.at_level(logging.WARNING, logger="porefluids.components.tabulated"):
        water.gas_density(420.0, 1e5)
    assert "Temperature extrapolation" in caplog.text
    assert "Pressure extrapolation" not in caplog.text


def test_results_are_scalars(water):
    assert np.ndim(water.gas_density(300.0, 1e5)) == 0
    assert np.ndim(water.vapor_pressure(300.0)) == 0


def test_config_validation():
    with pytest.raises(ValueError):
        Config(num_temperature_points=2)
    with pytest.raises(ValidationError):
        Range(min=400.0, max=280.0)
    assert 300.0 in Range(min=280.0, max=400.0)
    assert Range(min=280.0, max=400.0).clip(450.0) == 400.0
