"""Layout names and element flavors used to pick a page layout."""

from enum import Enum


class Layout(str, Enum):
    """Bloom page layout assigned from the shape of a page's content."""

    IMAGE_ONLY = "image-only"
    TEXT_ONLY = "text-only"
    BILINGUAL_TEXT_IMAGE_TEXT = "bilingual-text-image-text"
    IMAGE_TOP_TEXT_BOTTOM = "image-top-text-bottom"
    TEXT_TOP_IMAGE_BOTTOM = "text-top-image-bottom"
    TEXT_IMAGE_TEXT = "text-image-text"


class ElementFlavor(str, Enum):
    """Abstract classification of a page element for layout matching."""

    IMAGE = "image"
    L1_ONLY = "l1-only"
    L2_ONLY = "l2-only"
    MULTIPLE_LANGUAGES = "multiple-languages"
