"""
Allow-list sanitizer for highlight markup.

Reduces a markup string to plain escaped text plus ``<mark>`` elements
carrying a ``class`` attribute. Everything else (scripts, event handler
attributes, arbitrary tags) is escaped so it renders as inert text.

Existing character references are kept as they are, which makes the
operation idempotent: sanitizing sanitized output changes nothing.
"""

import re
from html.entities import html5
from typing import List

from markupsafe import Markup, escape

from ..core import SanitizationError, get_logger
from ..utils import ensure_text

logger = get_logger(__name__)


ALLOWED_TAG = "mark"

_TAG_RE = re.compile(
    r"<mark(?:\s+class\s*=\s*(?:\"([^\"<>]*)\"|'([^'<>]*)'))?\s*>"
    r"|</mark\s*>",
    re.IGNORECASE
)

_ENTITY_RE = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")

_CLASS_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def escape_text(text: str) -> str:
    """HTML-escape plain text for inclusion between markers."""
    return str(escape(text))


class Sanitizer:
    """
    Enforces the highlight markup allow-list.

    Only ``<mark>`` / ``</mark>`` survive, with the class attribute reduced
    to safe class tokens. Unclosed markers are closed at the end and
    unmatched closers are escaped.
    """

    def clean(self, html: str) -> str:
        """
        Sanitize a markup string.

        Args:
            html: Markup produced by the highlighter, or any string.

        Returns:
            Sanitized markup.

        Raises:
            SanitizationError: If the input cannot be processed.
        """
        try:
            return self._clean(html)
        except (TypeError, ValueError, re.error) as e:
            raise SanitizationError(
                f"Could not sanitize markup: {e}",
                fragment=html[:80] if isinstance(html, str) else None
            ) from e

    def _clean(self, html: str) -> str:
        parts: List[str] = []
        depth = 0
        last = 0

        for match in _TAG_RE.finditer(html):
            parts.append(self._escape_segment(html[last:match.start()]))
            last = match.end()

            if match.group(0).startswith("</"):
                if depth > 0:
                    parts.append(f"</{ALLOWED_TAG}>")
                    depth -= 1
                else:
                    parts.append(escape_text(match.group(0)))
                continue

            class_value = match.group(1) if match.group(1) is not None else match.group(2)
            parts.append(self._open_tag(class_value))
            depth += 1

        parts.append(self._escape_segment(html[last:]))
        parts.append(f"</{ALLOWED_TAG}>" * depth)

        return "".join(parts)

    @staticmethod
    def _open_tag(class_value: str) -> str:
        """Rebuild an opening marker keeping only safe class tokens."""
        tokens = [
            token for token in (class_value or "").split()
            if _CLASS_TOKEN_RE.match(token)
        ]
        if not tokens:
            return f"<{ALLOWED_TAG}>"
        return f'<{ALLOWED_TAG} class="{" ".join(tokens)}">'

    @staticmethod
    def _escape_segment(segment: str) -> str:
        """Escape text while leaving valid character references intact."""
        if not segment:
            return ""

        parts = []
        last = 0
        for match in _ENTITY_RE.finditer(segment):
            entity = match.group(0)
            if not entity.startswith("&#") and entity[1:] not in html5:
                continue
            parts.append(escape_text(segment[last:match.start()]))
            parts.append(entity)
            last = match.end()

        parts.append(escape_text(segment[last:]))
        return "".join(parts)


_sanitizer = Sanitizer()


def sanitize(html: str) -> Markup:
    """
    Sanitize markup against the highlight allow-list.

    This is the last step before any highlighting result is returned.
    If the markup cannot be processed, the fully escaped input is
    returned instead.

    Args:
        html: Markup string.

    Returns:
        Markup safe to render as trusted HTML.
    """
    text = ensure_text(html, "html")
    try:
        return Markup(_sanitizer.clean(text))
    except SanitizationError as e:
        logger.warning(f"Sanitizer fell back to escaping: {e.message}")
        return Markup(escape_text(text))


if __name__ == "__main__":
    samples = [
        'Hello <script>alert("xss")</script> world',
        '<mark class="search-highlight highlight-primary">machine</mark> learning',
        '<mark class="x" onclick="steal()">click</mark>',
        '<img src=x onerror=alert(1)>',
        'R&amp;D &copy; &bogus; 5 < 6',
        '<mark>unclosed',
    ]
    for sample in samples:
        once = sanitize(sample)
        print(f"  {sample!r}\n    -> {str(once)!r} (idempotent: {sanitize(once) == once})")
