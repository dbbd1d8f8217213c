"""Shared fixtures."""

import pytest

from bloom_gen.core.diagnostics import Diagnostics
from bloom_gen.models.book import BookMetadata

BILINGUAL_FRONTMATTER = """---
allTitles:
  en: "Test Book"
  es: "Libro de Prueba"
languages:
  en: "English"
  es: "Español"
l1: en
l2: es
---
"""


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def metadata() -> BookMetadata:
    return BookMetadata(
        allTitles={"en": "Test Book", "es": "Libro de Prueba"},
        languages={"en": "English", "es": "Español"},
        l1="en",
        l2="es",
    )


@pytest.fixture
def make_document():
    """Build a document from a body, using the bilingual frontmatter by default."""

    def _make(body: str, frontmatter: str = BILINGUAL_FRONTMATTER) -> str:
        return frontmatter + body

    return _make
