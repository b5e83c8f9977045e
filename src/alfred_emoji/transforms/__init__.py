"""Registry parsing and snippet construction."""
from .parser import QualifiedRecord, parse_line, parse_lines
from .snippets import Snippet, build_snippet, derive_keyword, generate_uid

__all__ = [
    'QualifiedRecord', 'parse_line', 'parse_lines',
    'Snippet', 'build_snippet', 'derive_keyword', 'generate_uid',
]
