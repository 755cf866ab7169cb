"""
Version utility functions.
"""

from georef import __version__


def get_version() -> str:
    """
    Get the current version of georef.

    Returns:
        str: The version string.
    """
    return __version__
