"""Record parsing for the Unicode emoji-test.txt registry."""
import logging
import re
from typing import Iterable, Iterator, NamedTuple, Optional

logger = logging.getLogger(__name__)

QUALIFIED_MARKER = '; fully-qualified'
COMMENT_MARKER = '# '

# Registry 13.0+ prefixes names with the emoji version, e.g. "E1.0 grinning face"
EMOJI_VERSION_PREFIX = re.compile(r'^E\d+\.\d+ ')


class QualifiedRecord(NamedTuple):
    """One fully-qualified emoji line: its glyphs and its description."""
    display_form: str
    display_name: str


def is_qualified_line(line: str) -> bool:
    """
    Check whether a trimmed registry line is a fully-qualified data line.

    Comment lines, blank lines and every other qualification status
    (component, minimally-qualified, unqualified) are rejected.
    """
    if not line or line.startswith('#'):
        return False
    return QUALIFIED_MARKER in line


def strip_emoji_version(name: str) -> str:
    """Remove a leading "E<major>.<minor> " token from a display name."""
    return EMOJI_VERSION_PREFIX.sub('', name, count=1)


def parse_line(line: str, strip_version: bool = False) -> Optional[QualifiedRecord]:
    """
    Parse a single registry line.

    Args:
        line: Raw line, surrounding whitespace allowed
        strip_version: Drop the emoji version token from the name

    Returns:
        QualifiedRecord, or None if the line is not a usable data line
    """
    line = line.strip()
    if not is_qualified_line(line):
        return None

    marker = line.find(COMMENT_MARKER)
    if marker < 0:
        logger.warning(f"skipping {line}")
        return None

    parts = line[marker + len(COMMENT_MARKER):].split(' ', 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        logger.warning(f"skipping {line}")
        return None

    display_form, display_name = parts
    if strip_version:
        display_name = strip_emoji_version(display_name)
        if not display_name:
            logger.warning(f"skipping {line}")
            return None

    return QualifiedRecord(display_form, display_name)


def parse_lines(lines: Iterable[str], strip_version: bool = False) -> Iterator[QualifiedRecord]:
    """
    Lazily yield a QualifiedRecord for every usable line, in input order.

    The input is consumed once. Errors raised while reading it propagate.
    """
    for line in lines:
        record = parse_line(line, strip_version=strip_version)
        if record is not None:
            yield record
