"""Pure-substance property providers."""

from .base import *  # noqa
from .simple_h2o import *  # noqa
from .n2 import *  # noqa
from .h2o import *  # noqa
from .tabulated import *  # noqa

from . import base, h2o, n2, simple_h2o, tabulated

__all__ = [
    *base.__all__,
    *simple_h2o.__all__,
    *n2.__all__,
    *h2o.__all__,
    *tabulated.__all__,
]
