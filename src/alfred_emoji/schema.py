"""
Alfred snippet document schema.

The writer builds documents directly from Snippet; validate_snippet_document
checks them from the consumer side, on JSON read back out of a snippet pack.
"""
import re
from typing import Dict, Any, List, Tuple
from dataclasses import dataclass

# Top-level key Alfred expects in every snippet file
SNIPPET_ROOT_KEY = 'alfredsnippet'

# Field order inside the document, as written to the archive
SNIPPET_FIELDS = ('snippet', 'uid', 'name', 'keyword')

UID_PATTERN = re.compile(r'^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$')
KEYWORD_PATTERN = re.compile(r'^:[^:\sA-Z]*:$')


@dataclass
class ValidationError:
    """Structured validation error for categorization."""
    category: str
    field: str
    actual_value: Any
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'field': self.field,
            'actual_value': str(self.actual_value),
            'message': self.message
        }


def validate_snippet_document(doc: Any) -> Tuple[bool, List[ValidationError]]:
    """
    Validate a decoded snippet file against the Alfred snippet shape.

    Args:
        doc: Decoded JSON document

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    if not isinstance(doc, dict) or set(doc.keys()) != {SNIPPET_ROOT_KEY}:
        return False, [ValidationError(
            category='MALFORMED_DOCUMENT',
            field='_root',
            actual_value=doc,
            message=f'Document must have exactly one key: {SNIPPET_ROOT_KEY}'
        )]

    body = doc[SNIPPET_ROOT_KEY]
    if not isinstance(body, dict):
        return False, [ValidationError(
            category='MALFORMED_DOCUMENT',
            field=SNIPPET_ROOT_KEY,
            actual_value=body,
            message=f'{SNIPPET_ROOT_KEY} must be an object'
        )]

    errors = []
    for field in SNIPPET_FIELDS:
        value = body.get(field)
        if not isinstance(value, str) or not value:
            errors.append(ValidationError(
                category='MISSING_REQUIRED_FIELD',
                field=field,
                actual_value=value,
                message=f'Required field {field} is missing or empty'
            ))

    unknown = set(body.keys()) - set(SNIPPET_FIELDS)
    for field in sorted(unknown):
        errors.append(ValidationError(
            category='UNKNOWN_FIELD',
            field=field,
            actual_value=body[field],
            message=f'Unexpected field {field}'
        ))

    uid = body.get('uid')
    if isinstance(uid, str) and uid and not UID_PATTERN.match(uid):
        errors.append(ValidationError(
            category='FORMAT_MISMATCH',
            field='uid',
            actual_value=uid,
            message='uid must be five uppercase hex groups of 8-4-4-4-12'
        ))

    keyword = body.get('keyword')
    if isinstance(keyword, str) and keyword and not KEYWORD_PATTERN.match(keyword):
        errors.append(ValidationError(
            category='FORMAT_MISMATCH',
            field='keyword',
            actual_value=keyword,
            message='keyword must be lowercase, colon-wrapped, without spaces'
        ))

    return len(errors) == 0, errors
