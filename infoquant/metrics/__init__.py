"""Numeric core: information quantity, additivity, entropy, units, validation."""

from .mathcore import *  # noqa: F401,F403
from .units import *  # noqa: F401,F403
from .information import *  # noqa: F401,F403
from .additivity import *  # noqa: F401,F403
from .entropy import *  # noqa: F401,F403
from .validation import *  # noqa: F401,F403
from .properties import *  # noqa: F401,F403
