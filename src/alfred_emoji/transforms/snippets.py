"""Snippet construction from parsed registry records."""
import secrets
from dataclasses import dataclass
from typing import Dict, Any

from ..schema import SNIPPET_ROOT_KEY
from .parser import QualifiedRecord


@dataclass(frozen=True)
class Snippet:
    """A single Alfred snippet, ready to be written to the archive."""
    snippet: str
    uid: str
    name: str
    keyword: str

    @property
    def entry_name(self) -> str:
        """File name of this snippet inside the archive."""
        return f"{self.name} [{self.uid}].json"

    def to_document(self) -> Dict[str, Any]:
        """Build the JSON document Alfred imports."""
        return {
            SNIPPET_ROOT_KEY: {
                'snippet': self.snippet,
                'uid': self.uid,
                'name': self.name,
                'keyword': self.keyword,
            }
        }


def generate_uid() -> str:
    """
    Generate a random 128-bit identifier as grouped uppercase hex.

    The layout is 8-4-4-4-12 like a UUID, but no version or variant bits
    are set: all 16 bytes are random.
    """
    raw = secrets.token_bytes(16)
    groups = (raw[0:4], raw[4:6], raw[6:8], raw[8:10], raw[10:16])
    return '-'.join(group.hex().upper() for group in groups)


def derive_keyword(name: str) -> str:
    """Turn a display name into a colon-wrapped text-expansion keyword."""
    normalized = name.lower().replace(' ', '-').replace(':', '')
    return f":{normalized}:"


def build_snippet(record: QualifiedRecord) -> Snippet:
    """Create the snippet for one qualified registry record."""
    return Snippet(
        snippet=record.display_form,
        uid=generate_uid(),
        name=record.display_name,
        keyword=derive_keyword(record.display_name),
    )
