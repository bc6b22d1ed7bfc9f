from semverlite.core.version import Version

version = Version(1, 0, 1)
__version__ = str(version)
