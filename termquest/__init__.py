"""
termquest - A simulated Linux shell for terminal puzzle missions

This package provides an immutable virtual filesystem, a pure command
interpreter over a fixed command set, tab completion, and a session object
that ties a mission's starting world and win condition to the interpreter.
"""

__version__ = "0.1.0"

from .filesystem import (
    FileNode,
    DirNode,
    Node,
    create_base_filesystem,
    from_dict,
    to_dict,
)

from .state import (
    CommandResult,
    LineKind,
    OutputLine,
    ShellError,
    StatePatch,
    TerminalState,
    apply_patch,
)

from .command_parser import (
    CommandKind,
    CommandParser,
    ParsedCommand,
    Redirect,
    RedirectType,
)

from .config import TerminalConfig
from .context import CommandRequest, MissionContext
from .interpreter import CommandInterpreter, execute_command
from .completion import TabCompleter
from .editor import open_editor, save_editor, close_editor
from .mission import Mission
from .terminal import TerminalSession

__all__ = [
    # Filesystem
    "FileNode",
    "DirNode",
    "Node",
    "create_base_filesystem",
    "from_dict",
    "to_dict",

    # State
    "CommandResult",
    "LineKind",
    "OutputLine",
    "ShellError",
    "StatePatch",
    "TerminalState",
    "apply_patch",

    # Parsing
    "CommandKind",
    "CommandParser",
    "ParsedCommand",
    "Redirect",
    "RedirectType",

    # Interpreter
    "TerminalConfig",
    "CommandRequest",
    "MissionContext",
    "CommandInterpreter",
    "execute_command",
    "TabCompleter",
    "open_editor",
    "save_editor",
    "close_editor",

    # Session
    "Mission",
    "TerminalSession",
]
