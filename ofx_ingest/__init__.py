"""
ofx_ingest - load real-world OFX exports as well-formed XML trees.
"""
from .common.models import EncodingTag, LoadedDocument, XmlParseError
from .parsing import (
    OfxLoader,
    LoaderSettings,
    OfxLoadError,
    DocumentNotFoundError,
    MalformedDocumentError,
    ParseFailureError,
    load_from_path,
    load_from_text,
)

__version__ = "0.1.0"

__all__ = [
    'EncodingTag',
    'LoadedDocument',
    'XmlParseError',
    'OfxLoader',
    'LoaderSettings',
    'OfxLoadError',
    'DocumentNotFoundError',
    'MalformedDocumentError',
    'ParseFailureError',
    'load_from_path',
    'load_from_text',
]
