# Source loaders
from .ofx import OfxLoader
from .encoding import detect_encoding, decode_document
from .splitter import split_document, parse_header
from .sanitizer import sanitize_body
from .sgml import close_unclosed_tags, convert_sgml_to_xml, infer_end_tags
from .xml_loader import load_xml

__all__ = [
    'OfxLoader',
    'detect_encoding',
    'decode_document',
    'split_document',
    'parse_header',
    'sanitize_body',
    'close_unclosed_tags',
    'convert_sgml_to_xml',
    'infer_end_tags',
    'load_xml',
]
