"""
HTML text cleanup for upstream rich-text fields.

WordPress returns titles and content as rendered HTML. These helpers turn that
into plain text without an HTML parser:
- decode_entities: named entities from a fixed table plus decimal numeric entities
- strip_tags: drop tags, collapse whitespace, then decode entities

This is regex based best effort. Malformed or nested angle brackets are not
handled specially and may leave stray characters behind.
"""
import re
from typing import Optional

ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#039;": "'",
    "&#8217;": "'",
    "&#8216;": "'",
    "&#8220;": '"',
    "&#8221;": '"',
    "&#8211;": "–",
    "&#8212;": "—",
    "&nbsp;": " ",
    "&ndash;": "–",
    "&mdash;": "—",
    "&rsquo;": "'",
    "&lsquo;": "'",
    "&rdquo;": '"',
    "&ldquo;": '"',
}

# Table entries first so "&#039;" maps through the table, then any &#NNN;
# optionally followed by a second one (UTF-16 surrogate pairs span two)
_ENTITY_RE = re.compile(
    "|".join(re.escape(entity) for entity in ENTITIES) + r"|&#(\d+);(?:&#(\d+);)?"
)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


_MAX_CODE_POINT = 0x10FFFF
_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _decode_numeric(digits: str) -> str:
    """One &#NNN; entity; lone surrogates and out-of-range values stay as text."""
    entity = f"&#{digits};"
    literal = ENTITIES.get(entity)
    if literal is not None:
        return literal
    if len(digits) > 7:
        return entity
    code_point = int(digits)
    if code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return entity
    return chr(code_point)


def _replace_entity(match: re.Match) -> str:
    literal = ENTITIES.get(match.group(0))
    if literal is not None:
        return literal

    first, second = match.group(1), match.group(2)
    if second is None:
        return _decode_numeric(first)

    if len(first) <= 5 and len(second) <= 5:
        high, low = int(first), int(second)
        if high in _HIGH_SURROGATES and low in _LOW_SURROGATES:
            return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))
    return _decode_numeric(first) + _decode_numeric(second)


def decode_entities(text: Optional[str]) -> Optional[str]:
    """
    Decode HTML entities in a single left-to-right pass.

    Replacement text is never rescanned, so "&amp;lt;" becomes "&lt;" and
    not "<". Text without entities comes back unchanged, which makes the
    function idempotent on already-decoded text.
    Surrogate pairs written as two entities ("&#55357;&#56842;") join into
    one character; a lone surrogate is left as entity text.

    Args:
        text: Text possibly containing entities; None and "" pass through

    Returns:
        Decoded text
    """
    if not text:
        return text
    return _ENTITY_RE.sub(_replace_entity, text)


def strip_tags(html: Optional[str]) -> str:
    """
    Convert rendered HTML into a single line of plain text.

    Examples:
        "<p>A &amp; B</p>" -> "A & B"
        "<p>One</p>\\n\\n<p>Two</p>" -> "One Two"
    """
    if not html:
        return ""
    text = _TAG_RE.sub(" ", html)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return decode_entities(text)
