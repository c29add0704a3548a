"""
Versioning for righthand. The version number is bumped by hand before each
release.
"""

__version__ = "0.1.0"

version_info = tuple(int(i) for i in __version__.split("."))
