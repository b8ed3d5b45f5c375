#
# Bitsize Packaging Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version as metadata_version
from typing import Any

from packaging.version import InvalidVersion, Version

PACKAGE_NAME = "bitsize"


# Methods --------------------------------------------------------------------------------------------------------------

def package_version(package: str = PACKAGE_NAME) -> str:
    """
    Installed version of a distribution, normalized per PEP 440.

    Raises:
        ValueError: If the distribution is not installed or its version is not PEP 440 compliant.
    """
    try:
        raw_version = metadata_version(package)
    except PackageNotFoundError as e:
        raise ValueError(f"Package '{package}' is not installed, version is not available") from e
    is_pep440_version(raw_version, raise_exception=True)
    return raw_version


def is_pep440_version(version: Any, raise_exception: bool = False) -> bool:
    """
    Checks if an object represents a valid PEP440 version number in its normalized form

    Args:
        version: The version to check, converted with str().
        raise_exception: Raise InvalidVersion instead of returning False.

    Returns:
        bool: True if the version is PEP440 compliant, False otherwise.
    """
    version = str(version)
    try:
        normalized_version = str(Version(version))
    except InvalidVersion:
        if raise_exception:
            raise InvalidVersion(f"Version '{version}' is not PEP440 compliant")
        return False

    if normalized_version != version:
        if raise_exception:
            raise InvalidVersion(f"Version '{version}' is not PEP440 compliant. "
                                 f"Normalized version can be {normalized_version}")
        return False
    return True
