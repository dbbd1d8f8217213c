"""Collector for errors and warnings recorded during one conversion."""

import logging
from collections.abc import Iterable, Iterator

from bloom_gen.models.diagnostics import Severity, ValidationError

log = logging.getLogger(__name__)


class Diagnostics:
    """Ordered errors and warnings for a single parse.

    Create a fresh instance per conversion; instances are not shared
    between documents.
    """

    def __init__(self) -> None:
        self._entries: list[ValidationError] = []

    def add_error(self, message: str, line: int | None = None) -> None:
        self._add(Severity.ERROR, message, line)

    def add_warning(self, message: str, line: int | None = None) -> None:
        self._add(Severity.WARNING, message, line)

    def _add(self, severity: Severity, message: str, line: int | None) -> None:
        self._entries.append(ValidationError(type=severity, message=message, line=line))
        log.debug(f"{severity.value}: {message}")

    def extend(self, entries: Iterable[ValidationError]) -> None:
        """Append entries recorded elsewhere, keeping their order."""
        self._entries.extend(entries)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> list[ValidationError]:
        return list(self._entries)

    @property
    def errors(self) -> list[ValidationError]:
        return [e for e in self._entries if e.type == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationError]:
        return [e for e in self._entries if e.type == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(e.type == Severity.ERROR for e in self._entries)

    def format(self) -> str:
        """Render all entries, one ``TYPE: message`` per line."""
        return "\n".join(e.format() for e in self._entries)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
