"""
Qt version helpers.

Versions are compared numerically per component with `packaging.version`,
so "5.15.0" sorts after "5.9.0".
"""

from typing import Union

from packaging import version as _pkg_version

from .exceptions import InvalidVersionError

VersionLike = Union[str, _pkg_version.Version]

# Qt 5.9.0 was published into a "5.9" directory instead of "5.9.0"
_LEGACY_VERSION_DIRS = {"5.9.0": "5.9"}


def parse_version(value: VersionLike) -> _pkg_version.Version:
    """
    Parse a dotted Qt version.

    Args:
        value: Version string such as "5.15.2" or an already parsed version

    Returns:
        Parsed version object

    Raises:
        InvalidVersionError: If the string is not a valid version
    """
    if isinstance(value, _pkg_version.Version):
        return value

    try:
        return _pkg_version.Version(value.strip())
    except (_pkg_version.InvalidVersion, AttributeError) as e:
        raise InvalidVersionError(f"Invalid Qt version: {value!r}") from e


def version_lt(left: VersionLike, right: VersionLike) -> bool:
    """Return True if `left` is an older version than `right`."""
    return parse_version(left) < parse_version(right)


def version_ge(left: VersionLike, right: VersionLike) -> bool:
    """Return True if `left` is the same as or newer than `right`."""
    return parse_version(left) >= parse_version(right)


def version_dir(version: str) -> str:
    """
    Directory name aqtinstall uses for a given Qt version.

    Example:
        >>> version_dir("5.9.0")
        '5.9'
        >>> version_dir("6.2.0")
        '6.2.0'
    """
    return _LEGACY_VERSION_DIRS.get(version, version)
