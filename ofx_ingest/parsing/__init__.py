"""
OFX Parsing Module

This module consolidates the OFX loading pipeline:
- Charset detection and decoding
- Header / body splitting
- Body sanitizing and SGML to XML conversion
- Strict XML loading with full error reporting
"""

# Base classes
from .base import BaseLoader

# Configuration
from .config.settings import LoaderSettings, load_settings

# Errors
from .exceptions import (
    OfxLoadError,
    DocumentNotFoundError,
    MalformedDocumentError,
    ParseFailureError,
)

# Sources
from .sources.ofx import OfxLoader

# Entry points
from .facade import get_loader, load_from_path, load_from_text

__all__ = [
    # Base
    'BaseLoader',
    # Config
    'LoaderSettings',
    'load_settings',
    # Errors
    'OfxLoadError',
    'DocumentNotFoundError',
    'MalformedDocumentError',
    'ParseFailureError',
    # Sources
    'OfxLoader',
    # Entry points
    'get_loader',
    'load_from_path',
    'load_from_text',
]
