"""
OFX Charset Detection and Decoding

OFX 1.x headers declare their charset as a Windows code page number
(``CHARSET:1252``, ``CHARSET:65001``...). Exporters are unreliable about
it, so only a small table of codes is trusted and everything else is
read as Windows-1252.
"""
import re
import codecs
from typing import Mapping, Optional, Union

from ofx_ingest.common.logging_config import get_logger
from ofx_ingest.common.models import EncodingTag
from ..config.settings import LoaderSettings

logger = get_logger(__name__)

CHARSET_PATTERN = re.compile(r'CHARSET:(\d+)', re.IGNORECASE)
CHARSET_PATTERN_BYTES = re.compile(rb'CHARSET:(\d+)', re.IGNORECASE)

_DEFAULTS = LoaderSettings()


def detect_encoding(
    text: Union[str, bytes],
    charset_map: Optional[Mapping[str, str]] = None,
    default_encoding: Optional[str] = None,
) -> EncodingTag:
    """
    Detect encoding from the CHARSET header field.

    Never fails: an absent declaration or an unknown code resolves to
    the default legacy encoding.

    Args:
        text: Header text, or the whole raw document
        charset_map: Declared code -> codec name (defaults to LoaderSettings)
        default_encoding: Codec for absent/unknown codes (defaults to cp1252)

    Returns:
        EncodingTag with the declared code (or None) and resolved codec
    """
    if charset_map is None:
        charset_map = _DEFAULTS.charset_map
    if default_encoding is None:
        default_encoding = _DEFAULTS.default_encoding

    pattern = CHARSET_PATTERN_BYTES if isinstance(text, bytes) else CHARSET_PATTERN
    match = pattern.search(text)
    if not match:
        return EncodingTag(code=None, name=default_encoding)

    charset = match.group(1)
    if isinstance(charset, bytes):
        charset = charset.decode('ascii')

    # The digit string is the key as written; very long runs carry no code
    code = int(charset) if len(charset) <= 10 else None
    return EncodingTag(code=code, name=charset_map.get(charset, default_encoding))


def decode_document(
    raw: Union[str, bytes],
    encoding: str,
    fallback_encoding: Optional[str] = None,
) -> str:
    """
    Convert the raw document into text.

    Bytes that are not valid in the declared encoding fall back to the
    legacy encoding, dropping bytes that code page leaves undefined.
    Text input is taken as already decoded.
    """
    if fallback_encoding is None:
        fallback_encoding = _DEFAULTS.default_encoding

    if isinstance(raw, str):
        return raw.lstrip('\ufeff')

    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8):]

    if encoding == fallback_encoding:
        return raw.decode(encoding, errors='ignore')

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        logger.info(
            f"Content is not valid {encoding}, falling back to {fallback_encoding}",
            declared=encoding,
            fallback=fallback_encoding,
            position=e.start,
        )

    return raw.decode(fallback_encoding, errors='ignore')
