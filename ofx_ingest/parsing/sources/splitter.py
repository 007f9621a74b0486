"""
OFX Header / Body Splitter

An OFX file is a block of header fields followed by the markup body,
which starts at the <OFX> root tag.
"""
import re
from typing import Dict

from ofx_ingest.common.models import SplitDocument
from ..exceptions import MalformedDocumentError

# OFX 1.x: one KEY:VALUE per line
HEADER_LINE_PATTERN = re.compile(r'^\s*([A-Za-z][A-Za-z0-9_]*)\s*:(.*)$')
# OFX 2.x: <?OFX OFXHEADER="200" VERSION="211" ...?>
OFX_PI_PATTERN = re.compile(r'<\?OFX\s+(.*?)\?>', re.IGNORECASE | re.DOTALL)
PI_ATTR_PATTERN = re.compile(r'([A-Za-z][A-Za-z0-9_]*)\s*=\s*["\']([^"\']*)["\']')


def split_document(content: str, root_tag: str = '<OFX>') -> SplitDocument:
    """
    Split decoded OFX content at the first occurrence of the root tag.

    Args:
        content: Whole decoded document
        root_tag: Marker of the markup body, matched case-insensitively

    Raises:
        MalformedDocumentError: if the root tag is not present
    """
    start = content.lower().find(root_tag.lower())
    if start < 0:
        raise MalformedDocumentError(
            "Root tag not found; input is not an OFX document",
            root_tag=root_tag,
            sample=content[:200],
        )

    return SplitDocument(
        header=content[:start].strip(),
        body=content[start:].strip(),
    )


def parse_header(header: str) -> Dict[str, str]:
    """
    Read the header fields of either OFX flavour into a dict.

    Keys are upper-cased; values are stripped. Lines that are not
    fields (blank lines, the XML declaration) are ignored.
    """
    fields: Dict[str, str] = {}

    pi = OFX_PI_PATTERN.search(header)
    if pi:
        for key, value in PI_ATTR_PATTERN.findall(pi.group(1)):
            fields[key.upper()] = value.strip()
        return fields

    for line in header.splitlines():
        match = HEADER_LINE_PATTERN.match(line)
        if match:
            fields[match.group(1).upper()] = match.group(2).strip()
    return fields
