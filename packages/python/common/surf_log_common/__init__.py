"""Surf Log Common Utilities

Shared Python code used across:
- data/pipelines
- data/session
- scripts
"""

from .constants import *
from .errors import *
from .utils import *

__version__ = "0.1.0"
