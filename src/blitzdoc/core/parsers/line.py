"""Catalog line parser.

Turns one line of ``commands.txt`` into a :class:`Command`.  A line looks
like::

    Name[(Params)][:ReturnType][ : Description] | ... | Path[#Anchor]

Fields are peeled off the left side from the tail in a fixed order
(description, then parameter list, then return type) so that a colon inside
a description is never mistaken for a return type separator.
"""

from __future__ import annotations

import logging

from blitzdoc.config.types import is_sigil
from blitzdoc.core.catalog.model import Command
from blitzdoc.core.parsers.params import parse_params, render_params

logger = logging.getLogger(__name__)

DESCRIPTION_SEPARATOR = " : "

def module_from_url(url: str) -> str | None:
    """Derive the ``group/module`` path from a documentation URL.

    Two documentation tree layouts are recognised::

        /docs/html/Modules/<group>/<module>/...  ->  <group>/<module>
        /mod/<group>/<module>/...                ->  <group>/<module>

    Any other layout yields ``None``.
    """
    parts = url.split("/")
    if len(parts) < 2:
        return None

    root = parts[1].lower()
    if root == "docs" and len(parts) > 5:
        return f"{parts[4]}/{parts[5]}"
    if root == "mod" and len(parts) > 3:
        return f"{parts[2]}/{parts[3]}"
    return None

def parse_line(line: str) -> Command:
    """Parse a single non-blank catalog line into a :class:`Command`.

    Malformed input never raises; missing pieces are simply left unset and a
    nameless line keeps the ``"No Name"`` placeholder.
    """
    command = Command()

    fields = line.split("|")
    left = fields[0].strip()
    right = fields[-1].strip()

    # URL and in-page anchor
    anchor_at = right.find("#")
    if anchor_at >= 0:
        command.url = right[:anchor_at]
        command.url_location = right[anchor_at:]
    else:
        command.url = right

    if command.url:
        command.module = module_from_url(command.url)

    # Description
    desc_at = left.find(DESCRIPTION_SEPARATOR)
    if desc_at >= 0:
        command.description = left[desc_at + len(DESCRIPTION_SEPARATOR):].strip()
        left = left[:desc_at]

    # Parameter list
    open_at = left.find("(")
    if open_at >= 0:
        close_at = left.rfind(")")
        if close_at < open_at:
            close_at = len(left)
        command.params_raw = left[open_at + 1:close_at].strip()
        command.params = parse_params(command.params_raw)
        command.params_pretty = render_params(command.params)
        command.is_function = True
        # Keep a ":Type" written after the closing parenthesis.
        left = left[:open_at] + left[close_at + 1:]

    # Return type
    colon_at = left.find(":")
    if colon_at >= 0:
        command.returns = left[colon_at + 1:].strip() or None
        left = left[:colon_at]

    name = left.strip()
    if len(name) > 1 and is_sigil(name[-1]):
        # "Sin#" and "Sin" name the same command.
        name = name[:-1].rstrip()
    if name:
        command.real_name = name
        command.search_name = name.lower()

    return command

def parse_catalog(text: str) -> list[Command]:
    """Parse every non-blank line of *text*, preserving file order."""
    commands = [parse_line(line) for line in text.splitlines() if line.strip()]
    logger.debug("Parsed %d catalog lines", len(commands))
    return commands
