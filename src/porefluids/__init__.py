"""
*porefluids*

Constitutive relations for two-phase, two-component (water/nitrogen) flow in porous media.
"""

from ._precision import *  # noqa
from .errors import *  # noqa
from .constants import *  # noqa
from .types import *  # noqa
from .utils import *  # noqa
from .config import *  # noqa
from .models import *  # noqa
from .capillary_pressures import *  # noqa
from .relperm import *  # noqa
from .material_laws import *  # noqa
from .ideal_gas import *  # noqa
from .iapws import *  # noqa
from .components import *  # noqa
from .binary_coefficients import *  # noqa
from .states import *  # noqa
from .fluid_systems import *  # noqa
