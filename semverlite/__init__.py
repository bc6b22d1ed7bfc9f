from semverlite.core import *
from semverlite.core import __all__ as _core_all
from semverlite.version import __version__

__all__ = _core_all + ["__version__"]
