"""Convert the Markdown of a text block into Bloom-ready HTML."""

import re

HEADING_1 = re.compile(r"^# (.*?)$", re.MULTILINE)
HEADING_2 = re.compile(r"^## (.*?)$", re.MULTILINE)
BOLD = re.compile(r"\*\*(.*?)\*\*")
ITALIC = re.compile(r"\*([^*]+?)\*")
LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

# Paragraphs starting with one of these are not wrapped in <p>
BLOCK_TAG = re.compile(
    r"^<(h[1-6]|p|div|ul|ol|li|blockquote|hr|table|figure|figcaption)",
    re.IGNORECASE,
)


def markdown_to_html(markdown: str) -> str:
    """Convert headings, emphasis and links, then wrap paragraphs.

    Headings are converted first, inline formatting is applied across the
    whole result, and blank lines separate paragraphs. Paragraph fragments
    are joined without a separator.
    """
    html = HEADING_1.sub(r"<h1>\1</h1>", markdown)
    html = HEADING_2.sub(r"<h2>\1</h2>", html)

    html = BOLD.sub(r"<strong>\1</strong>", html)
    html = ITALIC.sub(r"<em>\1</em>", html)
    html = LINK.sub(r'<a href="\2">\1</a>', html)

    paragraphs = []
    for block in PARAGRAPH_BREAK.split(html):
        paragraph = block.replace("\n", " ").strip()
        if not paragraph:
            continue
        if BLOCK_TAG.match(paragraph):
            paragraphs.append(paragraph)
        else:
            paragraphs.append(f"<p>{paragraph}</p>")

    return "".join(paragraphs)
