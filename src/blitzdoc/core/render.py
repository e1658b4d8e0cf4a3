"""Text rendering for parsed commands.

Produces Markdown help, short help, editor insertion snippets and plain-text
match listings from :class:`Command` records.  Nothing here feeds back into
parsing; every function is a pure view of an already-parsed record.
"""

from __future__ import annotations

from blitzdoc.core.catalog.model import Command

def markdown_help(command: Command) -> str | None:
    """Return Markdown help for *command*, or ``None`` if there is nothing to show.

    Layout: a ``blitzmax`` code block with the signature (only when the
    command has parameters), the description, then the module in italics.
    """
    if not command.has_markdown:
        return None

    parts: list[str] = []
    if command.params_pretty:
        code = command.real_name
        if command.returns:
            code += f":{command.returns}"
        code += f"( {command.params_pretty} )"
        parts.append(f"```blitzmax\n{code}\n```\n")

    parts.extend(_help_lines(command))
    return "".join(parts)

def short_help(command: Command) -> str | None:
    """Return description and module only, or ``None`` if *command* has no help."""
    if not command.has_markdown:
        return None
    return "".join(_help_lines(command))

def _help_lines(command: Command) -> list[str]:
    lines: list[str] = []
    if command.description:
        lines.append(f"{command.description}\n")
    if command.module:
        lines.append(f"_{command.module}_\n")
    return lines

def _escape_placeholder(text: str) -> str:
    """Escape characters that are special inside a snippet placeholder."""
    return text.replace("\\", "\\\\").replace("$", "\\$").replace("}", "\\}")

def insert_snippet(command: Command) -> str | None:
    """Return an editor snippet that inserts a call to *command*.

    Each parameter becomes a numbered tab stop showing its default value when
    one exists, otherwise ``name:type``::

        DrawText( ${1:t:String}, ${2:x:Float}, ${3:y:Float} )

    Returns ``None`` for commands that are not functions.
    """
    if not command.is_function:
        return None

    if not command.params:
        return f"{command.real_name}()"

    stops: list[str] = []
    for number, param in enumerate(command.params, 1):
        label = param.default or f"{param.name}:{param.type}"
        stops.append(f"${{{number}:{_escape_placeholder(label)}}}")
    return f"{command.real_name}( {', '.join(stops)} )"

def format_matches(commands: list[Command]) -> str:
    """Format several commands as a numbered list with their modules."""
    if not commands:
        return "No matching commands."

    lines = [f"Matches ({len(commands)}):", ""]
    for i, command in enumerate(commands, 1):
        lines.append(f"  {i}. {command.signature()}")
        if command.module:
            lines.append(f"     Module: {command.module}")
    return "\n".join(lines)
