"""Summary statistics for a converted book."""

from collections import Counter

from bloom_gen.models.book import Book, ImageElement, TextBlockElement
from bloom_gen.models.output import ConversionStats


def compute_stats(book: Book) -> ConversionStats:
    """Count pages, images, languages used in text and layouts."""
    languages: set[str] = set()
    images = 0
    layouts: Counter[str] = Counter()

    for page in book.pages:
        layouts[page.layout.value] += 1
        for element in page.elements:
            if isinstance(element, ImageElement):
                images += 1
            elif isinstance(element, TextBlockElement):
                languages.update(element.content)

    return ConversionStats(
        pages=len(book.pages),
        languages=sorted(languages),
        images=images,
        layouts=dict(layouts),
    )
