"""
Render an ordered list of TOC entries as a nested HTML fragment.

Nesting is driven by an explicit stack of open sublists (no recursion): before
each entry, sublists are closed until the open depth is at most ``level - 1``,
then opened until it equals ``level - 1``. A jump from level 1 to level 3
therefore synthesizes an empty level-2 sublist, and every opened sublist is
closed by the end of the pass. Unlike the flat layout of older course exports,
a level-2 entry directly after a level-1 entry is nested one sublist deep.

Class names (table-of-contents, toc-list, toc-item, toc-sublist, toc-level-N,
toc-title, toc-page, toc-error) are part of the output contract.
"""

import html

from toc_extract.models import ExtractionOutcome, TOCEntry

DEFAULT_HEADING = "Table of Contents"

NO_HEADING_MESSAGE = (
    'Unable to find a "Table of Contents" heading in this PDF. The PDF may not have '
    "a structured TOC, or it may be in an image format."
)
NO_ENTRIES_MESSAGE = (
    "Unable to extract table of contents from this PDF. The TOC section may be in "
    "an image format or have an unusual structure."
)

TOC_STYLESHEET = """<style>
.table-of-contents {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
  line-height: 1.6;
  color: #333;
  max-width: 800px;
  margin: 0 auto;
  padding: 20px;
}

.table-of-contents h2 {
  font-size: 24px;
  font-weight: 600;
  margin-bottom: 20px;
  color: #1a1a1a;
  border-bottom: 2px solid #e0e0e0;
  padding-bottom: 10px;
}

.toc-list {
  list-style: none;
  padding: 0;
  margin: 0;
}

.toc-item {
  display: flex;
  justify-content: space-between;
  align-items: baseline;
  padding: 8px 0;
  border-bottom: 1px solid #f0f0f0;
}

.toc-item:last-child {
  border-bottom: none;
}

.toc-item:hover {
  background-color: #f9f9f9;
  padding-left: 10px;
  padding-right: 10px;
  margin-left: -10px;
  margin-right: -10px;
  border-radius: 4px;
}

.toc-title {
  flex: 1;
  margin-right: 20px;
}

.toc-page {
  color: #666;
  font-weight: 500;
  white-space: nowrap;
}

.toc-sublist {
  list-style: none;
  padding-left: 30px;
  margin: 5px 0;
}

.toc-level-2 .toc-title {
  font-weight: 500;
}

.toc-level-3 .toc-title {
  font-weight: 400;
  font-size: 0.95em;
}

.toc-error {
  padding: 20px;
  background-color: #fff3cd;
  border: 1px solid #ffc107;
  border-radius: 4px;
  color: #856404;
}
</style>
"""


def escape_title(text: str) -> str:
    """Escape & < > " ' for embedding in element content."""
    return html.escape(text, quote=True)


def _item_html(entry: TOCEntry, indent: str) -> list[str]:
    level_class = f" toc-level-{entry.level}" if entry.level > 1 else ""
    return [
        f'{indent}<li class="toc-item{level_class}">',
        f'{indent}  <span class="toc-title">{escape_title(entry.title)}</span>',
        f'{indent}  <span class="toc-page">{int(entry.page)}</span>',
        f"{indent}</li>",
    ]


def render_entries(entries: list[TOCEntry]) -> str:
    """Render the nested <ul class="toc-list"> for a non-empty entry list."""
    lines = ['<ul class="toc-list">']
    # One marker per open <ul class="toc-sublist">; len(open_lists) is the current depth
    open_lists: list[int] = []
    for entry in entries:
        target = max(entry.level, 1) - 1
        while len(open_lists) > target:
            open_lists.pop()
            lines.append("  " * (len(open_lists) + 1) + "</ul>")
        while len(open_lists) < target:
            lines.append("  " * (len(open_lists) + 1) + '<ul class="toc-sublist">')
            open_lists.append(len(open_lists) + 2)
        lines.extend(_item_html(entry, "  " * (len(open_lists) + 1)))
    while open_lists:
        open_lists.pop()
        lines.append("  " * (len(open_lists) + 1) + "</ul>")
    lines.append("</ul>")
    return "\n".join(lines)


def render_placeholder(outcome: ExtractionOutcome) -> str:
    """Descriptive error element used instead of an empty list."""
    if outcome == ExtractionOutcome.NO_HEADING:
        message, reason = NO_HEADING_MESSAGE, "no-heading"
    else:
        message, reason = NO_ENTRIES_MESSAGE, "no-entries"
    return f'<div class="toc-error" data-reason="{reason}">{html.escape(message, quote=False)}</div>'


def render_toc_html(
    entries: list[TOCEntry],
    outcome: ExtractionOutcome = ExtractionOutcome.NO_ENTRIES,
    heading: str = DEFAULT_HEADING,
) -> str:
    """
    Render the full fragment: titled container, entry list (or placeholder when
    entries is empty), then the stylesheet.

    ``outcome`` only matters for an empty list; it selects which placeholder
    message is shown (no heading found vs. heading found but nothing extracted).
    """
    if entries:
        body = render_entries(entries)
    else:
        body = render_placeholder(outcome)
    return (
        '<div class="table-of-contents">\n'
        f"<h2>{escape_title(heading)}</h2>\n"
        f"{body}\n"
        "</div>\n"
        f"{TOC_STYLESHEET}"
    )
