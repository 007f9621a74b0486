"""
SGML to XML Conversion

OFX 1.x is SGML: an element holding a value usually has no end tag and
ends with its line. This module closes those elements, one physical
line at a time, and then inserts the end tags SGML leaves implied.
"""
import re
from collections import Counter
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ofx_ingest.common.logging_config import get_logger

logger = get_logger(__name__)

TAG_NAME = r'[A-Za-z0-9.]+'

# <MEMO> alone on its line
EMPTY_TAG_PATTERN = re.compile(rf'^<({TAG_NAME})>\s*$')

# Matches: <SOMETHING>blah
# Does not match: <SOMETHING>
# Does not match: <SOMETHING>blah</SOMETHING>
# \w is Unicode-aware, so accented Latin letters are covered.
VALUE_TAG_PATTERN = re.compile(
    rf"<({TAG_NAME})>([\w.\-+, ;:\[\]'&/\\*(){{}}!£$?=@€#%±§~`]+)$"
)

ANY_TAG_PATTERN = re.compile(rf'<(/?)({TAG_NAME})>')


class LineRewrite(Enum):
    EMPTY_CLOSED = 'empty_closed'
    VALUE_CLOSED = 'value_closed'
    UNCHANGED = 'unchanged'


def _rewrite_line(line: str, closed_later: bool = False) -> Tuple[LineRewrite, str]:
    trimmed = line.strip()

    empty = EMPTY_TAG_PATTERN.match(trimmed)
    if empty:
        if closed_later:
            return LineRewrite.UNCHANGED, line
        return LineRewrite.EMPTY_CLOSED, f'<{empty.group(1)}></{empty.group(1)}>'

    value = VALUE_TAG_PATTERN.search(trimmed)
    if value:
        return LineRewrite.VALUE_CLOSED, f'{trimmed}</{value.group(1)}>'

    return LineRewrite.UNCHANGED, line


def close_unclosed_tags(line: str) -> str:
    """
    Detect an unclosed tag on a single line and close it.

    ``<MEMO>`` becomes ``<MEMO></MEMO>``; ``<NAME>Foo`` becomes
    ``<NAME>Foo</NAME>``. Anything else is returned unchanged.
    """
    return _rewrite_line(line)[1]


def _closed_later_flags(lines: List[str]) -> List[bool]:
    """
    For each line, whether the next later mention of a lone opening
    tag's name is its end tag, i.e. the tag opens an aggregate.
    """
    flags = [False] * len(lines)
    next_is_close: Dict[str, bool] = {}

    for i in range(len(lines) - 1, -1, -1):
        line = lines[i]
        empty = EMPTY_TAG_PATTERN.match(line.strip())
        if empty:
            flags[i] = next_is_close.get(empty.group(1), False)

        # Rightmost first so the leftmost tag of the line wins
        for match in reversed(list(ANY_TAG_PATTERN.finditer(line))):
            next_is_close[match.group(2)] = bool(match.group(1))

    return flags


def convert_sgml_to_xml(sgml: str, stats: Optional[Counter] = None) -> str:
    """
    Convert an SGML body to XML, line by line.

    Args:
        sgml: Sanitized OFX body
        stats: Optional Counter receiving one count per LineRewrite outcome

    Returns:
        The rewritten body. Not guaranteed to be well-formed.
    """
    sgml = sgml.replace('\r\n', '\n').replace('\r', '\n')
    lines = sgml.split('\n')
    flags = _closed_later_flags(lines)

    out = []
    for line, closed_later in zip(lines, flags):
        outcome, rewritten = _rewrite_line(line, closed_later)
        if stats is not None:
            stats[outcome.value] += 1
        out.append(rewritten.strip())

    return '\n'.join(out).strip()


def infer_end_tags(xml: str) -> Tuple[str, int]:
    """
    Insert the end tags SGML allows to be omitted.

    An open element is ended by the end tag of an element enclosing it,
    or, when it already holds character data, by the next start tag.
    Unmatched end tags and elements left open at the end are kept as
    they are so the XML parser reports them.

    Returns:
        (text, number of end tags inserted)
    """
    # Entries are [tag name, has character data]
    stack: List[list] = []
    out: List[str] = []
    inserted = 0
    pos = 0

    for match in ANY_TAG_PATTERN.finditer(xml):
        text = xml[pos:match.start()]
        out.append(text)
        if stack and text.strip():
            stack[-1][1] = True
        pos = match.end()

        is_close, name = match.group(1), match.group(2)
        if not is_close:
            if stack and stack[-1][1]:
                out.append(f'</{stack.pop()[0]}>')
                inserted += 1
            stack.append([name, False])
        elif any(entry[0] == name for entry in stack):
            while stack[-1][0] != name:
                out.append(f'</{stack.pop()[0]}>')
                inserted += 1
            stack.pop()
        out.append(match.group(0))

    out.append(xml[pos:])
    return ''.join(out), inserted
