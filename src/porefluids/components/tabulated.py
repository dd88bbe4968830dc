import logging
import threading
import typing

import numpy as np
from scipy.interpolate import RectBivariateSpline, interp1d  # type: ignore[import-untyped]

from porefluids.config import Config
from porefluids.errors import (
    ComputationError,
    UnsupportedPropertyError,
    ValidationError,
)
from porefluids.types import ComponentProvider
from porefluids.utils import as_precision


logger = logging.getLogger(__name__)

__all__ = ["TabulatedComponent"]

InterpolationMethod = typing.Literal["linear", "cubic"]

_INTERPOLATION_DEGREES = {"linear": 1, "cubic": 3}

TABULATED_PROPERTIES = (
    "liquid_density",
    "liquid_viscosity",
    "liquid_enthalpy",
    "gas_density",
    "gas_viscosity",
    "gas_enthalpy",
)
"""Properties of `(temperature, pressure)` sampled on the 2D table grid."""


class TabulatedComponent:
    """
    Wraps a component provider and answers property queries from pre-computed tables.

    Calling `init()` samples the wrapped provider on a regular temperature-pressure
    grid and builds interpolators: `RectBivariateSpline` for the phase properties
    and `interp1d` for the vapor pressure. Properties the wrapped provider cannot
    evaluate on the whole grid are answered by direct evaluation instead.
    Pressure-from-density queries are always evaluated directly.

    Every property query before `init()` raises `ComputationError`.

    Example:
    ```python
    water = TabulatedComponent(SimpleH2O())
    water.init(Config(num_temperature_points=50, num_pressure_points=50))
    rho = water.liquid_density(300.0, 1e5)
    ```
    """

    def __init__(
        self,
        component: ComponentProvider,
        interpolation_method: InterpolationMethod = "cubic",
    ) -> None:
        if interpolation_method not in _INTERPOLATION_DEGREES:
            raise ValidationError(
                f"Invalid interpolation_method '{interpolation_method}'. "
                f"Must be one of: {list(_INTERPOLATION_DEGREES.keys())}"
            )
        self.component = component
        self.interpolation_method = interpolation_method
        self.warn_on_extrapolation = False
        self._interpolators: typing.Dict[str, typing.Any] = {}
        self._bounds: typing.Dict[str, typing.Tuple[float, float]] = {}
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def name(self) -> str:
        return self.component.name

    @property
    def molar_mass(self) -> float:
        return self.component.molar_mass

    def init(self, config: typing.Optional[Config] = None) -> None:
        """
        Build the property tables of the wrapped provider.

        Only the first call builds tables, later calls are no-ops.

        :param config: Table ranges and resolution. Defaults to `Config()`.
        """
        with self._lock:
            if self._initialized:
                logger.debug(f"Tables of {self.name} already built, skipping")
                return

            config = config or Config()
            temperatures = np.linspace(
                config.temperature_range.min,
                config.temperature_range.max,
                config.num_temperature_points,
            )
            pressures = np.linspace(
                config.pressure_range.min,
                config.pressure_range.max,
                config.num_pressure_points,
            )
            with config.constants():
                self._build_interpolators(temperatures, pressures)

            self._bounds = {
                "temperature": (temperatures[0], temperatures[-1]),
                "pressure": (pressures[0], pressures[-1]),
            }
            self.warn_on_extrapolation = config.warn_on_extrapolation
            self._initialized = True
            logger.info(
                f"Built {len(self._interpolators)} property tables for {self.name}: "
                f"T ∈ [{temperatures[0]:.2f}, {temperatures[-1]:.2f}] K, "
                f"p ∈ [{pressures[0]:.1f}, {pressures[-1]:.1f}] Pa, "
                f"interpolation_method={self.interpolation_method!r}"
            )

    def _build_interpolators(
        self, temperatures: np.ndarray, pressures: np.ndarray
    ) -> None:
        k = _INTERPOLATION_DEGREES[self.interpolation_method]
        for name in TABULATED_PROPERTIES:
            func = getattr(self.component, name)
            try:
                grid = np.array(
                    [[func(t, p) for p in pressures] for t in temperatures],
                    dtype=np.float64,
                )
            except (ComputationError, UnsupportedPropertyError) as exc:
                logger.warning(
                    f"Cannot tabulate '{name}' of {self.name}, using direct evaluation: {exc}"
                )
                continue

            if not np.all(np.isfinite(grid)):
                logger.warning(
                    f"Non-finite values while tabulating '{name}' of {self.name}, "
                    "using direct evaluation"
                )
                continue

            self._interpolators[name] = RectBivariateSpline(
                x=temperatures, y=pressures, z=grid, kx=k, ky=k
            )

        try:
            vapor_pressures = np.array(
                [self.component.vapor_pressure(t) for t in temperatures],
                dtype=np.float64,
            )
        except (ComputationError, UnsupportedPropertyError) as exc:
            logger.warning(
                f"Cannot tabulate 'vapor_pressure' of {self.name}, using direct evaluation: {exc}"
            )
            vapor_pressures = None

        if vapor_pressures is not None and not np.all(np.isfinite(vapor_pressures)):
            logger.warning(
                f"Non-finite values while tabulating 'vapor_pressure' of {self.name}, "
                "using direct evaluation"
            )
        elif vapor_pressures is not None:
            self._interpolators["vapor_pressure"] = interp1d(
                x=temperatures,
                y=vapor_pressures,
                kind=self.interpolation_method,
                bounds_error=False,
                fill_value="extrapolate",  # type: ignore
            )
        logger.debug(f"Built {len(self._interpolators)} interpolators")

    def exists(self, name: str) -> bool:
        """Check if a specific property table exists."""
        return name in self._interpolators

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise ComputationError(
                f"Tabulated component {self.name} must be initialized with `init()` before use"
            )

    def _warn_extrapolation(
        self, temperature: float, pressure: typing.Optional[float] = None
    ) -> None:
        t_min, t_max = self._bounds["temperature"]
        if temperature < t_min or temperature > t_max:
            logger.warning(
                f"Temperature extrapolation: queried T={temperature:.2f} K, "
                f"table range [{t_min:.2f}, {t_max:.2f}] K"
            )
        if pressure is None:
            return
        p_min, p_max = self._bounds["pressure"]
        if pressure < p_min or pressure > p_max:
            logger.warning(
                f"Pressure extrapolation: queried p={pressure:.1f} Pa, "
                f"table range [{p_min:.1f}, {p_max:.1f}] Pa"
            )

    def _pt_interpolate(self, name: str, temperature: float, pressure: float) -> float:
        self._check_initialized()
        interp = self._interpolators.get(name)
        if interp is None:
            return getattr(self.component, name)(temperature, pressure)

        if self.warn_on_extrapolation:
            self._warn_extrapolation(temperature, pressure)
        return as_precision(interp.ev(temperature, pressure))

    def vapor_pressure(self, temperature: float) -> float:
        self._check_initialized()
        interp = self._interpolators.get("vapor_pressure")
        if interp is None:
            return self.component.vapor_pressure(temperature)

        if self.warn_on_extrapolation:
            self._warn_extrapolation(temperature)
        return as_precision(interp(temperature))

    def liquid_density(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("liquid_density", temperature, pressure)

    def liquid_viscosity(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("liquid_viscosity", temperature, pressure)

    def liquid_enthalpy(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("liquid_enthalpy", temperature, pressure)

    def liquid_pressure(self, temperature: float, density: float) -> float:
        self._check_initialized()
        return self.component.liquid_pressure(temperature, density)

    def gas_density(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("gas_density", temperature, pressure)

    def gas_viscosity(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("gas_viscosity", temperature, pressure)

    def gas_enthalpy(self, temperature: float, pressure: float) -> float:
        return self._pt_interpolate("gas_enthalpy", temperature, pressure)

    def gas_pressure(self, temperature: float, density: float) -> float:
        self._check_initialized()
        return self.component.gas_pressure(temperature, density)

    def __repr__(self) -> str:
        return (
            f"TabulatedComponent({self.component!r}, "
            f"interpolation_method={self.interpolation_method!r})"
        )
