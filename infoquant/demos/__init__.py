"""Worked examples built on :mod:`infoquant.metrics`.

- ``scenarios``: coin toss presets and everyday surprise scenarios.
- ``intuition``: surprise level vs. information, with a recordable log.
- ``quiz``: logarithm warm-up questions and a score object.
- ``password``: brute-force strength of a random password.
"""

from .scenarios import *  # noqa: F401,F403
from .intuition import *  # noqa: F401,F403
from .quiz import *  # noqa: F401,F403
from .password import *  # noqa: F401,F403
