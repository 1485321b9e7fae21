"""mini-matrix: a small immutable dense-matrix value type with elementary row operations."""

import logging

from ._version import __version__
from .core.matrix import Matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Matrix",
]
