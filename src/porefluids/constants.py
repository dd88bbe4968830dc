"""Physical constants and substance data"""

from contextvars import ContextVar
import typing

import attrs


__all__ = ["Constant", "Constants", "c", "ConstantsContext", "get_constant"]


@attrs.frozen(slots=True)
class Constant:
    """
    A constant value together with its description and unit.
    """

    value: typing.Any
    """The value of the constant."""

    description: typing.Optional[str] = None
    """What the constant represents."""

    unit: typing.Optional[str] = None
    """Unit of measurement of the value."""

    def __str__(self) -> str:
        return f"{self.value}{self.unit or ''}"

    def __repr__(self) -> str:
        parts = [f"value={self.value}"]
        if self.description:
            parts.append(f"description='{self.description}'")
        if self.unit:
            parts.append(f"unit='{self.unit}'")
        return f"Constant({', '.join(parts)})"


DEFAULT_CONSTANTS: typing.Dict[str, typing.Union[typing.Any, Constant]] = {
    # General
    "UNIVERSAL_GAS_CONSTANT": Constant(
        value=8.314462618, description="Universal (molar) gas constant", unit="J/(mol·K)"
    ),
    "ZERO_CELSIUS": Constant(
        value=273.15, description="0°C expressed in Kelvin", unit="K"
    ),
    # Water
    "MOLAR_MASS_H2O": Constant(
        value=0.018015284, description="Molar mass of water", unit="kg/mol"
    ),
    "H2O_CRITICAL_TEMPERATURE": Constant(
        value=647.096, description="Critical temperature of water", unit="K"
    ),
    "H2O_TRIPLE_TEMPERATURE": Constant(
        value=273.16, description="Triple point temperature of water", unit="K"
    ),
    "H2O_LIQUID_DENSITY": Constant(
        value=1000.0,
        description="Density of incompressible liquid water (simplified water)",
        unit="kg/m³",
    ),
    "H2O_LIQUID_VISCOSITY": Constant(
        value=1.0e-3,
        description="Dynamic viscosity of liquid water (simplified water)",
        unit="Pa·s",
    ),
    "H2O_GAS_VISCOSITY": Constant(
        value=1.0e-5,
        description="Dynamic viscosity of water vapor (simplified water)",
        unit="Pa·s",
    ),
    "H2O_LIQUID_HEAT_CAPACITY": Constant(
        value=4180.0,
        description="Specific isobaric heat capacity of liquid water",
        unit="J/(kg·K)",
    ),
    "H2O_VAPOR_HEAT_CAPACITY": Constant(
        value=2.08e3,
        description="Specific isobaric heat capacity of water vapor",
        unit="J/(kg·K)",
    ),
    "H2O_VAPORIZATION_ENTHALPY": Constant(
        value=2.2537e6,
        description="Specific enthalpy of vaporization of water at 100°C",
        unit="J/kg",
    ),
    "H2O_NORMAL_BOILING_TEMPERATURE": Constant(
        value=373.15, description="Boiling temperature of water at 1 atm", unit="K"
    ),
    # Nitrogen
    "MOLAR_MASS_N2": Constant(
        value=0.02801348, description="Molar mass of molecular nitrogen", unit="kg/mol"
    ),
    "N2_CRITICAL_TEMPERATURE": Constant(
        value=126.192, description="Critical temperature of nitrogen", unit="K"
    ),
    "N2_CRITICAL_PRESSURE": Constant(
        value=3.39858e6, description="Critical pressure of nitrogen", unit="Pa"
    ),
    "N2_CRITICAL_MOLAR_VOLUME": Constant(
        value=90.1, description="Critical molar volume of nitrogen", unit="cm³/mol"
    ),
    "N2_ACENTRIC_FACTOR": Constant(
        value=0.037, description="Acentric factor of nitrogen", unit="dimensionless"
    ),
    "N2_TRIPLE_TEMPERATURE": Constant(
        value=63.151, description="Triple point temperature of nitrogen", unit="K"
    ),
    # Binary H2O-N2
    "N2_IN_H2O_LIQUID_DIFFUSION_COEFFICIENT": Constant(
        value=2.0e-9,
        description="Binary diffusion coefficient of nitrogen in liquid water",
        unit="m²/s",
    ),
    "FULLER_DIFFUSION_VOLUME_H2O": Constant(
        value=13.1,
        description="Atomic diffusion volume of water for the Fuller method",
        unit="cm³/mol",
    ),
    "FULLER_DIFFUSION_VOLUME_N2": Constant(
        value=18.5,
        description="Atomic diffusion volume of nitrogen for the Fuller method",
        unit="cm³/mol",
    ),
}


class Constants:
    """
    Store of physical constants and substance data.

    Values are read with dot notation (`constants.MOLAR_MASS_N2`), the
    `Constant` record with its metadata with bracket notation
    (`constants["MOLAR_MASS_N2"]`). Entries may be overridden at runtime.
    """

    __slots__ = ("_store",)

    def __new__(cls) -> "Constants":
        instance = super().__new__(cls)
        instance._store = {}
        return instance

    def __init__(self) -> None:
        for name, value in DEFAULT_CONSTANTS.items():
            self._store[name] = value if isinstance(value, Constant) else Constant(value)

    def __getattr__(self, name: str) -> typing.Any:
        """
        Get the value of a constant.

        :raises AttributeError: If the constant does not exist
        """
        if name.startswith("_"):
            return object.__getattribute__(self, name)

        try:
            return self._store[name].value
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from None

    def __getitem__(self, name: str) -> Constant:
        return self._store[name]

    def __setattr__(self, name: str, value: typing.Union[typing.Any, Constant]) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self[name] = value

    def __setitem__(self, name: str, value: typing.Union[typing.Any, Constant]) -> None:
        """
        Set a constant. Raw values are wrapped in a `Constant`, keeping the
        description and unit of an existing entry.
        """
        if not isinstance(value, Constant):
            existing = self._store.get(name)
            if existing is not None:
                value = attrs.evolve(existing, value=value)
            else:
                value = Constant(value=value)
        self._store[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self._store

    def keys(self) -> typing.KeysView[str]:
        return self._store.keys()

    def items(self) -> typing.ItemsView[str, Constant]:
        return self._store.items()

    def get(self, name: str, default: typing.Any = None) -> typing.Any:
        """Get the value of a constant, or `default` if it does not exist."""
        constant = self._store.get(name)
        return default if constant is None else constant.value

    def get_constant(
        self, name: str, default: typing.Optional[Constant] = None
    ) -> typing.Optional[Constant]:
        """Get the `Constant` record of a constant, or `default` if it does not exist."""
        return self._store.get(name, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(constants={len(self._store)})"

    def __len__(self) -> int:
        return len(self._store)

    def __call__(self) -> "ConstantsContext":
        """
        Use this instance as the global constants (`porefluids.c`) within a `with` block.

        Example:
        ```python
        constants = Constants()
        constants.UNIVERSAL_GAS_CONSTANT = 8.314
        with constants():
            rho = IdealGas.density(0.028, 300.0, 1e5)
        ```
        """
        return ConstantsContext(self)


_constants_context: ContextVar[Constants] = ContextVar(
    "constants_context", default=Constants()
)


class ConstantsContext:
    """
    Context manager that temporarily replaces the global `Constants` instance.
    """

    def __init__(self, constants: Constants) -> None:
        self._new_constants = constants
        self._token = None

    def __enter__(self) -> Constants:
        self._token = _constants_context.set(self._new_constants)
        return self._new_constants

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self._token is not None:
            _constants_context.reset(self._token)


class _ConstantsProxy:
    """Proxy to the `Constants` instance of the current context."""

    @property
    def _constants(self) -> Constants:
        return _constants_context.get()

    def __getattr__(self, name: str) -> typing.Any:
        return getattr(self._constants, name)

    def __getitem__(self, name: str) -> Constant:
        return self._constants[name]


c = _ConstantsProxy()
"""Global proxy to access physical constants and substance data."""


def get_constant(name: str) -> typing.Optional[Constant]:
    """
    Get a `Constant` record by name from the global constants.

    :param name: Name of the constant
    :return: `Constant` record or None if not found
    """
    return c._constants.get_constant(name)
