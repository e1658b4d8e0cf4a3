"""In-memory command index.

Holds the parsed catalog as a single ordered list and answers
case-insensitive exact-name lookups.  The list is built lazily on first use
(or whenever it is empty) from a loader callable, and replaced wholesale:
records are never added or removed one at a time.

Lifecycle: ``empty -> populated -> invalidated -> empty``.  Calling
:meth:`CommandIndex.invalidate` after the catalog has been regenerated makes
the next lookup reload from disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from blitzdoc.core.catalog.loader import load_catalog
from blitzdoc.core.catalog.model import Command, CommandFilter, IndexStats

logger = logging.getLogger(__name__)

Loader = Callable[[], list[Command]]

class CommandIndex:
    """Ordered, lazily populated store of :class:`Command` records.

    Not thread-safe: callers must not query while a populate or rebuild is
    in progress.
    """

    def __init__(self, loader: Loader | None = None) -> None:
        self._loader = loader
        self._commands: list[Command] | None = None

    @classmethod
    def from_path(cls, path: Path) -> CommandIndex:
        """Build an index that loads the catalog file at *path* on demand."""
        return cls(lambda: load_catalog(path))

    @property
    def is_populated(self) -> bool:
        return bool(self._commands)

    def __len__(self) -> int:
        return len(self._commands) if self._commands else 0

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands or ())

    def load(self, commands: list[Command]) -> None:
        """Replace the backing list with *commands*."""
        self._commands = list(commands)

    def invalidate(self) -> None:
        """Drop all cached records so the next access reloads the catalog."""
        self._commands = None

    def ensure_populated(self, notify_if_empty: bool = False) -> bool:
        """Load the catalog if the index is empty.

        Read failures leave the index empty and are only logged.  With
        *notify_if_empty*, a warning suggests regenerating the documentation
        when nothing could be loaded.

        Returns:
            ``True`` if the index now holds at least one command.
        """
        if not self._commands and self._loader is not None:
            try:
                self._commands = self._loader()
            except (OSError, ValueError):
                logger.debug("Could not load command catalog", exc_info=True)
                self._commands = None

        if notify_if_empty and not self._commands:
            logger.warning(
                "Documentation not found. Run 'blitzdoc rebuild' to regenerate it."
            )

        return self.is_populated

    def find(
        self,
        name: str | None = None,
        filter: CommandFilter | None = None,  # noqa: A002
    ) -> list[Command]:
        """Return commands named *name* (case-insensitive), in catalog order.

        With no *name*, every command is returned.  Several commands may share
        a name when different modules define the same symbol.  *filter* keeps
        only records satisfying all of its enabled flags.
        """
        self.ensure_populated()
        if not self._commands:
            return []

        search_name = name.lower() if name else None
        matches: list[Command] = []
        for command in self._commands:
            if search_name is not None and command.search_name != search_name:
                continue
            if filter is not None and not filter.accepts(command):
                continue
            matches.append(command)
        return matches

    def modules(self) -> list[str]:
        """Return distinct module names in first-seen order."""
        self.ensure_populated()
        seen: dict[str, None] = {}
        for command in self:
            if command.module:
                seen.setdefault(command.module, None)
        return list(seen)

    def stats(self) -> IndexStats:
        """Return summary counts for the index."""
        self.ensure_populated()
        commands = list(self)
        return IndexStats(
            commands=len(commands),
            functions=sum(1 for c in commands if c.is_function),
            modules=len(self.modules()),
            described=sum(1 for c in commands if c.has_description),
        )
