"""
Body Sanitizer

Document-wide textual fixes applied before the line-by-line SGML
conversion.
"""
import re

# <TRNTYPE> followed by blanks and then nothing: end of line, end of
# text or the next tag.
EMPTY_TRNTYPE_PATTERN = re.compile(r'<TRNTYPE>[ \t]+(?=[\r\n<]|$)')


def strip_ampersands(body: str) -> str:
    """
    Remove every '&'.

    Bare ampersands in merchant names make the file invalid XML; they
    are dropped, not escaped.
    """
    return body.replace('&', '')


def fill_empty_trntype(body: str, placeholder: str = 'OTHER') -> str:
    """When TRNTYPE is empty it is filled with the placeholder."""
    return EMPTY_TRNTYPE_PATTERN.sub(lambda _: f'<TRNTYPE>{placeholder}', body)


def sanitize_body(body: str, placeholder: str = 'OTHER') -> str:
    """
    Apply both fixes. Never fails.
    """
    return fill_empty_trntype(strip_ampersands(body), placeholder)
