"""
Exceptions raised while loading an OFX document.

Every failure of the pipeline is one of these; nothing is recovered
internally, so callers see either a parsed tree or one of the errors
below with enough context to diagnose the input.
"""
from typing import Iterable, Optional

from ofx_ingest.common.models import XmlParseError


class OfxLoadError(Exception):
    """Base class for all OFX loading failures."""


class DocumentNotFoundError(OfxLoadError, FileNotFoundError):
    """
    Raised when the OFX file to load does not exist.
    """

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"File '{self.path}' could not be found")


class MalformedDocumentError(OfxLoadError):
    """
    Raised when the root markup tag cannot be located.

    The input is not OFX-shaped at all. The exception keeps:
    - The root tag that was searched for
    - A sample of the decoded text that was searched
    """

    def __init__(self, message: str, root_tag: str = None, sample: Optional[str] = None):
        self.root_tag = root_tag
        self.sample = sample

        details = []
        if root_tag:
            details.append(f"Root tag: {root_tag}")
        if sample:
            details.append(f"Sample: {sample[:200]!r}")

        full_message = f"{message}\n" + "\n".join(details) if details else message
        super().__init__(full_message)


class ParseFailureError(OfxLoadError):
    """
    Raised when the normalized text is still not well-formed XML.

    ``errors`` holds every problem the parser reported, in order, not
    just the first one.
    """

    def __init__(self, errors: Iterable[XmlParseError]):
        self.errors = tuple(errors)
        lines = [str(e) for e in self.errors]
        super().__init__(
            f"Failed to parse OFX: {len(self.errors)} error(s)\n" + "\n".join(lines)
        )
