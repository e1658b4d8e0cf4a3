"""Command catalog data model.

Defines the records produced by the line parser: one :class:`Command` per
catalog line, each owning an ordered list of :class:`Param` entries when the
command is callable.
"""

from __future__ import annotations

from dataclasses import dataclass

from blitzdoc.config.types import DEFAULT_PARAM_TYPE

NO_NAME = "No Name"

@dataclass
class Param:
    """A single formal parameter of a command."""

    name: str = ""
    type: str = DEFAULT_PARAM_TYPE
    default: str = ""  # may contain commas when quoted

    def pretty(self) -> str:
        """Render as ``name:type`` with `` = default`` when a default is set."""
        text = f"{self.name}:{self.type}"
        if self.default:
            text += f" = {self.default}"
        return text

@dataclass
class Command:
    """A documented API entry parsed from one catalog line.

    ``real_name`` and ``search_name`` always carry a value; everything else is
    optional and only set when the corresponding delimiter was found.
    """

    real_name: str = NO_NAME
    search_name: str = NO_NAME.lower()
    description: str | None = None

    is_function: bool = False
    returns: str | None = None
    params: list[Param] | None = None
    params_raw: str | None = None
    params_pretty: str | None = None

    url: str | None = None
    url_location: str | None = None  # includes the leading "#"

    module: str | None = None

    @property
    def has_description(self) -> bool:
        return bool(self.description)

    @property
    def has_parameters(self) -> bool:
        return bool(self.params)

    @property
    def has_markdown(self) -> bool:
        """``True`` when Markdown help can be rendered for this command."""
        return bool(self.description or self.params_pretty)

    def signature(self) -> str:
        """Return ``Name[:Returns][( params )]`` for display."""
        text = self.real_name
        if self.returns:
            text += f":{self.returns}"
        if self.is_function:
            text += f"( {self.params_pretty} )" if self.params_pretty else "()"
        return text

@dataclass
class CommandFilter:
    """Inclusion filters for :meth:`CommandIndex.find`.

    A flag set to ``True`` keeps only records satisfying it; ``False`` never
    excludes anything.
    """

    has_description: bool = False
    has_markdown: bool = False
    has_parameters: bool = False

    def accepts(self, command: Command) -> bool:
        if self.has_description and not command.has_description:
            return False
        if self.has_markdown and not command.has_markdown:
            return False
        if self.has_parameters and not command.has_parameters:
            return False
        return True

@dataclass
class IndexStats:
    """Summary counts for a populated index."""

    commands: int = 0
    functions: int = 0
    modules: int = 0
    described: int = 0
