"""Text formatting helpers for the chat view."""

import re
from datetime import datetime

_UNORDERED_ITEM = re.compile(r"^[-*]\s+")
_ORDERED_ITEM = re.compile(r"^\d+\.\s+")


def _wrap_list_items(lines: list[str], marker: re.Pattern[str], tag: str, css: str) -> list[str]:
    """Group consecutive list lines into one <ul>/<ol> element."""
    result: list[str] = []
    in_list = False
    for line in lines:
        stripped = line.strip()
        if marker.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{css}">')
                in_list = True
            result.append(f"<li>{marker.sub('', stripped)}</li>")
            continue
        if in_list:
            result.append(f"</{tag}>")
            in_list = False
        result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return result


def markdown_to_html(text: str) -> str:
    """Convert the markdown Gemini answers with into HTML for a chat bubble.

    Supports: bold, italic, inline code, code blocks, lists.
    """
    # Escape HTML entities first
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        r'<pre class="bg-gray-900 text-cyan-100 rounded-lg p-3 my-2 overflow-x-auto text-xs">'
        r"<code>\2</code></pre>",
        text,
    )
    text = re.sub(
        r"`([^`]+)`",
        r'<code class="bg-gray-700 text-cyan-300 px-1.5 py-0.5 rounded text-xs">\1</code>',
        text,
    )
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"(?<!\w)\*([^*\n]+)\*(?!\w)", r"<em>\1</em>", text)

    lines = text.split("\n")
    lines = _wrap_list_items(lines, _UNORDERED_ITEM, "ul", "list-disc list-inside my-2 space-y-1")
    lines = _wrap_list_items(lines, _ORDERED_ITEM, "ol", "list-decimal list-inside my-2 space-y-1")

    html = ""
    for line in lines:
        html += line
        # Block tags already break the line
        if not re.search(r"</?(ul|ol|li)[^>]*>$", line):
            html += "<br>"
    return html.removesuffix("<br>")


def format_file_size(size: int) -> str:
    """Human readable size, e.g. '2.4 MB'."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    for unit in ("Bytes", "KB", "MB"):
        if value < 1024:
            return f"{round(value, 2):g} {unit}"
        value /= 1024
    return f"{round(value, 2):g} GB"


def format_date(value: datetime) -> str:
    """Date as shown in the history dialog, e.g. 'Dec 15, 2024'."""
    return f"{value:%b} {value.day}, {value.year}"


def format_time(value: datetime) -> str:
    return value.strftime("%I:%M %p")
