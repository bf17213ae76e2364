# -*- coding: utf-8 -*-
"""Maximum cardinality matching in bipartite graphs with the Hopcroft-Karp algorithm."""

from importlib.metadata import PackageNotFoundError, version

# pylint: disable=wildcard-import
from . import index
from . import hopcroft_karp
from . import functions
from . import validation

from .index import *
from .hopcroft_karp import *
from .functions import *
from .validation import *

__all__ = index.__all__ + hopcroft_karp.__all__ + functions.__all__ + validation.__all__

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    __version__ = 'unknown'
