"""Nested split-pane ("origami") scaffolding for Bloom pages.

A page with N items becomes a right-leaning binary tree of two-pane
containers: the first item fills the first pane and the remaining items
fill the second pane, nested the same way. Each leaf holds a placeholder
comment that the HTML generator later replaces with real content::

    <!-- text-block goes here !-->
    <!-- image-block goes here !-->
"""

import re
import textwrap
from collections.abc import Sequence
from enum import Enum

from bloom_gen.errors import EmptyInputError

INDENT = "  "

ITEM_KIND_PATTERN = re.compile(r"\w+(?:-\w+)*")


class Orientation(str, Enum):
    """Page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


def placeholder(kind: str) -> str:
    """Placeholder comment for an item of the given kind."""
    return f"<!-- {kind}-block goes here !-->"


def generate_origami_html(
    kinds: Sequence[str],
    orientation: Orientation | str = Orientation.PORTRAIT,
) -> str:
    """Build split-pane markup for an ordered sequence of item kinds.

    Args:
        kinds: Item kinds in page order, e.g. ``["text", "image"]``
        orientation: Portrait pages are split by horizontal dividers
            (top/bottom panes), landscape pages by vertical dividers
            (left/right panes)

    Returns:
        HTML fragment. A single item is one leaf without a split-pane
        wrapper.

    Raises:
        EmptyInputError: If ``kinds`` is empty
        ValueError: If a kind is not a word or hyphen-joined words
    """
    if not kinds:
        raise EmptyInputError()

    for kind in kinds:
        if not ITEM_KIND_PATTERN.fullmatch(kind):
            raise ValueError(f"Invalid item kind: {kind!r}")

    orientation = Orientation(orientation)

    if len(kinds) == 1:
        return _inner(placeholder(kinds[0]))

    return _build_split_pane(list(kinds), orientation)


def _build_split_pane(kinds: list[str], orientation: Orientation) -> str:
    """Split the first item from the rest, nesting the rest recursively."""
    first, remaining = kinds[0], kinds[1:]

    if len(remaining) == 1:
        second_content = placeholder(remaining[0])
    else:
        second_content = _build_split_pane(remaining, orientation)

    # Named after the divider's axis, so it is the opposite of the page's
    if orientation == Orientation.LANDSCAPE:
        axis, first_position, second_position = "vertical", "left", "right"
    else:
        axis, first_position, second_position = "horizontal", "top", "bottom"

    body = "\n".join(
        [
            _component(first_position, placeholder(first)),
            f'<div class="split-pane-divider {axis}-divider"></div>',
            _component(second_position, second_content),
        ]
    )
    return _wrap(f'<div class="split-pane {axis}-percent">', body)


def _component(position: str, content: str) -> str:
    return _wrap(
        f'<div class="split-pane-component position-{position}">', _inner(content)
    )


def _inner(content: str) -> str:
    return _wrap('<div class="split-pane-component-inner">', content)


def _wrap(open_tag: str, content: str) -> str:
    return "\n".join([open_tag, textwrap.indent(content, INDENT), "</div>"])
