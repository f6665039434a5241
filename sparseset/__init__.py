"""Top-level package for sparseset."""

import importlib.metadata

from sparseset.exceptions import *  # noqa: F401,F403
from sparseset.protocols import Visitor  # noqa: F401
from sparseset.sparseset import *  # noqa: F401,F403
from sparseset.storage import *  # noqa: F401,F403

__version__ = importlib.metadata.version(__name__)
