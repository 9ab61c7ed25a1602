"""Render annotation spans as ruby markup or plain text."""

import html
from collections.abc import Sequence

from services.matcher import AnnotationSpan


RUBY_CLASS = "word-wise-korean"
HIGHLIGHT_CLASS = "word-wise-highlight"

# rt size at 100%, in em
BASE_FONT_SIZE_EM = 0.6

_STYLESHEET = """\
/* Ruby tag styling for annotations */
ruby.{ruby} {{
  ruby-position: over;
  line-height: 2.2;
}}

ruby.{ruby} rt {{
  font-size: {size}em;
  color: inherit;
  font-weight: 500;
  line-height: 1;
  text-align: center;
  user-select: none;
  letter-spacing: 0;
}}

/* Optional highlight under annotated words */
ruby.{highlight} {{
  background: linear-gradient(transparent 70%, rgba(102, 126, 234, 0.12) 70%);
  border-radius: 2px;
  padding: 0 1px;
}}
"""


def rt_font_size(font_size: float = 100) -> float:
    """Annotation size in em for a user font-size percentage."""
    return round(BASE_FONT_SIZE_EM * font_size / 100, 4)


def annotation_stylesheet(font_size: float = 100) -> str:
    """CSS for annotated ruby tags at the given font-size percentage."""
    return _STYLESHEET.format(ruby=RUBY_CLASS, highlight=HIGHLIGHT_CLASS, size=rt_font_size(font_size))


def render_ruby(text: str, spans: Sequence[AnnotationSpan], show_highlight: bool = False) -> str:
    """
    Wrap each span of text in a ruby tag carrying its translation.

    Text outside spans is HTML-escaped and passed through. Spans must be
    sorted and non-overlapping, as annotate returns them.
    """
    classes = RUBY_CLASS + (f" {HIGHLIGHT_CLASS}" if show_highlight else "")
    parts: list[str] = []
    cursor = 0
    for span in spans:
        parts.append(html.escape(text[cursor:span.start]))
        parts.append(
            f'<ruby class="{classes}">{html.escape(span.surface)}'
            f"<rt>{html.escape(span.translation)}</rt></ruby>"
        )
        cursor = span.end
    parts.append(html.escape(text[cursor:]))
    return "".join(parts)


def format_annotations(spans: Sequence[AnnotationSpan]) -> str:
    """Human-readable summary, one span per line."""
    lines = []
    for span in spans:
        if span.surface == span.entry.word:
            lines.append(f"{span.surface} ({span.translation})")
        else:
            lines.append(f"{span.surface} → {span.entry.word} ({span.translation})")
    return "\n".join(lines)
