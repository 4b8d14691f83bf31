"""
qtkit - install Qt on CI runners.

Resolves a Qt version specifier with aqtinstall, installs the matching
release and exports the variables build steps need to find it.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
