"""
XML Loading

Parses the normalized OFX body with lxml. Errors are collected from the
parser's own error log, which belongs to this call only, and raised
together instead of stopping at the first one.
"""
from typing import List

import lxml.etree as LET

from ofx_ingest.common.logging_config import get_logger
from ofx_ingest.common.models import XmlParseError
from ..exceptions import ParseFailureError

logger = get_logger(__name__)

_FAILING_LEVELS = (LET.ErrorLevels.ERROR, LET.ErrorLevels.FATAL)


def _make_parser() -> LET.XMLParser:
    # recover=True keeps libxml2 going after the first problem so the
    # error log holds all of them; the tree is discarded if any exist.
    return LET.XMLParser(
        recover=True,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
    )


def _collect_errors(error_log) -> List[XmlParseError]:
    return [
        XmlParseError(
            line=entry.line,
            column=entry.column,
            severity=entry.level_name,
            message=entry.message,
            code=entry.type,
        )
        for entry in error_log
        if entry.level in _FAILING_LEVELS
    ]


def load_xml(xml_string: str):
    """
    Load an XML string, raising every well-formedness error at once.

    Args:
        xml_string: Normalized OFX body

    Returns:
        Root lxml element

    Raises:
        ParseFailureError: carrying the complete ordered error list
    """
    parser = _make_parser()
    try:
        root = LET.fromstring(xml_string.encode('utf-8'), parser)
        error_log = parser.error_log
    except LET.XMLSyntaxError as e:
        root = None
        error_log = e.error_log

    errors = _collect_errors(error_log)
    if root is None and not errors:
        errors = [XmlParseError(line=1, column=0, severity='FATAL', message='Document is empty')]

    if errors:
        logger.warning("Failed to parse OFX as XML", error_count=len(errors), first_error=str(errors[0]))
        raise ParseFailureError(errors)

    return root
