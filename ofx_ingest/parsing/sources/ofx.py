"""
OFX Loader

Turns an OFX document (SGML 1.x or XML 2.x) into a well-formed lxml
tree. Stages run strictly in order:

1. detect the declared charset
2. decode to text
3. split header from body at <OFX>
4. sanitize the body
5. close unclosed tags line by line, then infer omitted end tags
6. parse as XML, failing with every error found
"""
import uuid
from collections import Counter
from typing import Optional, Union

from ofx_ingest.common.logging_config import get_logger
from ofx_ingest.common.models import LoadedDocument
from ..base import BaseLoader
from ..config.settings import LoaderSettings
from ..exceptions import MalformedDocumentError
from .encoding import detect_encoding, decode_document
from .splitter import split_document, parse_header
from .sanitizer import sanitize_body
from .sgml import convert_sgml_to_xml, infer_end_tags
from .xml_loader import load_xml

logger = get_logger(__name__)


class OfxLoader(BaseLoader):
    """
    Loader for OFX files.

    Handles the encoding and markup problems common in bank exports:
    untrustworthy charset headers, unclosed SGML tags, bare ampersands
    and blank transaction types. Holds no state between calls.
    """

    def __init__(self, settings: Optional[LoaderSettings] = None):
        self.settings = settings or LoaderSettings()

    def parse(self, content: Union[str, bytes]) -> LoadedDocument:
        """
        Run the whole pipeline.

        Args:
            content: Raw bytes as read from disk, or already decoded text

        Returns:
            LoadedDocument with encoding, header fields and root element

        Raises:
            MalformedDocumentError: if the <OFX> root tag is missing
            ParseFailureError: if the repaired body is still not well-formed
        """
        log = logger.bind(document_id=uuid.uuid4().hex)
        settings = self.settings

        # 1. Charset from the CHARSET header field
        encoding = detect_encoding(content, settings.charset_map, settings.default_encoding)
        log.debug("Encoding detected", charset=encoding.code, encoding=encoding.name)

        # 2. Decode
        text = decode_document(content, encoding.name, settings.default_encoding)

        # 3. Split header / body
        try:
            split = split_document(text, settings.root_tag)
        except MalformedDocumentError:
            log.warning("Root tag not found", root_tag=settings.root_tag, length=len(text))
            raise
        header = parse_header(split.header)
        log.debug("Document split", header_fields=len(header), body_length=len(split.body))

        # 4. Sanitize
        body = sanitize_body(split.body, settings.trntype_placeholder)

        # 5. SGML -> XML
        stats = Counter()
        xml = convert_sgml_to_xml(body, stats)
        xml, inferred = infer_end_tags(xml)
        log.debug("SGML converted", inferred_end_tags=inferred, **dict(stats))

        # 6. Strict XML load
        root = load_xml(xml)
        log.debug("OFX loaded", root=root.tag)

        return LoadedDocument(encoding=encoding, root=root, header=header)

    def load_from_text(self, content: Union[str, bytes]):
        """
        Load an OFX by directly using the content.

        Returns:
            Root lxml element of the parsed document
        """
        return self.parse(content).root
