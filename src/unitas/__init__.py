"""
Unitas: typed physical quantities with generated SI-prefix conversions.

Every quantity (length, mass, force, energy, ...) is its own value type that
stores a single magnitude, or a 3-component direction for vector quantities,
in one canonical unit. Constructors ``in_<unit>`` and accessors ``as_<unit>``
are generated for every SI prefix. The quantity classes live in
:mod:`unitas.units` and are imported lazily.
"""

import logging
from importlib import metadata as _metadata


__author__ = "Unitas contributors"
__license__ = "MIT"

# Library code never configures logging; applications opt in.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("unitas")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__"]
