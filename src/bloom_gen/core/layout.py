"""Pick a page layout from the flavors of the page's elements."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bloom_gen.models.layout import ElementFlavor, Layout

log = logging.getLogger(__name__)

IMAGE = ElementFlavor.IMAGE
L1 = ElementFlavor.L1_ONLY
L2 = ElementFlavor.L2_ONLY
MULTI = ElementFlavor.MULTIPLE_LANGUAGES


@dataclass(frozen=True)
class LayoutRule:
    """A signature that selects ``layout`` when a page matches it exactly."""

    pattern: tuple[ElementFlavor, ...]
    layout: Layout


# Checked in order, first match wins
LAYOUT_RULES: list[LayoutRule] = [
    LayoutRule((IMAGE,), Layout.IMAGE_ONLY),
    LayoutRule((L1,), Layout.TEXT_ONLY),
    LayoutRule((L2,), Layout.TEXT_ONLY),
    LayoutRule((L1, IMAGE, L2), Layout.BILINGUAL_TEXT_IMAGE_TEXT),
    LayoutRule((IMAGE, L1), Layout.IMAGE_TOP_TEXT_BOTTOM),
    LayoutRule((IMAGE, MULTI), Layout.IMAGE_TOP_TEXT_BOTTOM),
    LayoutRule((L1, IMAGE), Layout.TEXT_TOP_IMAGE_BOTTOM),
    LayoutRule((MULTI, IMAGE), Layout.TEXT_TOP_IMAGE_BOTTOM),
    LayoutRule((L1, IMAGE, L1), Layout.TEXT_IMAGE_TEXT),
    LayoutRule((L2, IMAGE, L2), Layout.TEXT_IMAGE_TEXT),
]

DEFAULT_LAYOUT = Layout.TEXT_ONLY


def determine_page_layout(signature: Sequence[ElementFlavor | str]) -> Layout:
    """Match a page signature against ``LAYOUT_RULES``.

    Args:
        signature: One flavor per page element, in page order. Plain
            strings such as ``"l1-only"`` are accepted.

    Returns:
        The layout of the first rule whose pattern equals the signature,
        or ``text-only`` when no rule matches.
    """
    items = tuple(signature)
    for rule in LAYOUT_RULES:
        if len(items) == len(rule.pattern) and all(
            item == expected for item, expected in zip(items, rule.pattern)
        ):
            return rule.layout

    names = ", ".join(getattr(item, "value", str(item)) for item in items)
    log.debug(f"No layout rule for [{names}], using {DEFAULT_LAYOUT.value}")
    return DEFAULT_LAYOUT
