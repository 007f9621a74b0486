from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EncodingTag:
    """
    A declared OFX charset and the codec it resolves to.

    ``code`` is the number found in the ``CHARSET:`` header (None when the
    header has no declaration); ``name`` is always a usable Python codec.
    """
    code: Optional[int]
    name: str


@dataclass(frozen=True)
class SplitDocument:
    """Decoded document cut at the root markup tag."""
    header: str
    body: str


@dataclass(frozen=True)
class XmlParseError:
    """
    One well-formedness problem reported by the XML parser.
    """
    line: int
    column: int
    severity: str  # 'WARNING', 'ERROR', 'FATAL'
    message: str
    code: int = 0

    def __str__(self):
        return f"{self.line}:{self.column} [{self.severity}] {self.message}"


@dataclass
class LoadedDocument:
    """
    Result of a successful load: the parsed tree plus what was learned
    from the header on the way.
    """
    encoding: EncodingTag
    root: Any  # lxml.etree._Element
    header: Dict[str, str] = field(default_factory=dict)
