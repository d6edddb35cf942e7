#!/usr/bin/env python3
"""
The interpreter's side of the text editor.

`nano`, `vim` and `vi` only open the editor: they put the file's path and
current content into the state. Whoever presents the editor calls
`save_editor` and `close_editor`, which write back through the same path as
`echo` and `touch`.
"""

import logging
from typing import Optional

from .context import CommandRequest
from .filesystem import write_file
from .paths import lookup, resolve
from .state import CommandResult, OutputLine, StatePatch, TerminalState

logger = logging.getLogger(__name__)


def open_editor(req: CommandRequest) -> CommandResult:
    """Handler for nano/vim/vi."""
    if not req.args:
        return CommandResult.error(f"{req.name}: no file specified")

    target = req.args[0]
    resolved = resolve(target, req.cwd)
    node = lookup(req.root, resolved)
    if node is not None and node.is_dir():
        return CommandResult.error(f"{req.name}: {target}: Is a directory")

    content = node.content if node is not None else ''
    return CommandResult(
        [OutputLine.info(f"Opening {target} in editor...")],
        StatePatch(editing_file=resolved, editing_content=content),
    )


def save_editor(state: TerminalState, content: Optional[str] = None) -> CommandResult:
    """
    Write the editor buffer back to the open file.

    `content` replaces the buffer when given. Existing permissions and the
    executable flag survive the save.
    """
    if state.editing_file is None:
        return CommandResult.error('No file is open in the editor')

    buffer = state.editing_content if content is None else content
    try:
        new_root = write_file(state.file_system, state.editing_file, buffer)
    except (FileNotFoundError, IsADirectoryError):
        logger.debug("Editor save failed for %s", state.editing_file)
        return CommandResult.error(f"Cannot save {state.editing_file}: No such file or directory")

    logger.debug("Editor saved %d characters to %s", len(buffer), state.editing_file)
    return CommandResult(
        [OutputLine.success(f"File saved: {state.editing_file}")],
        StatePatch(file_system=new_root, editing_content=buffer),
    )


def close_editor(state: TerminalState) -> CommandResult:
    """Leave the editor without saving."""
    return CommandResult(patch=StatePatch(editing_file=None, editing_content=''))
