from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("lcovsum")

logger = logging.getLogger("lcovsum")

__all__ = ["__version__", "logger"]
