"""
Single source of truth for the Unicode emoji registry version.

The registry URL and the snippet pack file name are both derived from the
version string, so everything that needs either one should import from here.
"""

import re

UNICODE_VERSION = "13.0"

REGISTRY_URL_TEMPLATE = "https://unicode.org/Public/emoji/{version}/emoji-test.txt"
ARCHIVE_NAME_TEMPLATE = "Emoji Pack (Unicode {version}).alfredsnippets"


def get_version() -> str:
    """Get the default Unicode emoji registry version."""
    return UNICODE_VERSION


def get_registry_url(version: str = UNICODE_VERSION) -> str:
    """Return the emoji-test.txt URL for a registry version."""
    return REGISTRY_URL_TEMPLATE.format(version=version)


def get_archive_name(version: str = UNICODE_VERSION) -> str:
    """Return the snippet pack file name for a registry version."""
    return ARCHIVE_NAME_TEMPLATE.format(version=version)


def validate_version_format(version: str) -> bool:
    """
    Validate that a registry version looks like the ones unicode.org
    publishes under /Public/emoji/ (X.Y, e.g. 13.0 or 15.1).

    Args:
        version: Version string to validate

    Returns:
        True if valid, False otherwise
    """
    return bool(re.match(r'^\d+\.\d+$', version))
