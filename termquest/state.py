#!/usr/bin/env python3
"""
Session state, state patches and command results.

A command never edits a TerminalState. It returns a CommandResult whose
StatePatch names only the fields it wants replaced; `apply_patch` builds the
next snapshot from the previous one.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .filesystem import DirNode, create_base_filesystem
from .paths import HOME_DIR


class LineKind(Enum):
    """How an output line should be presented. Carries no logic."""
    INPUT = 'input'
    OUTPUT = 'output'
    ERROR = 'error'
    SUCCESS = 'success'
    INFO = 'info'


@dataclass(frozen=True)
class OutputLine:
    """A single line of terminal output."""
    text: str
    kind: LineKind = LineKind.OUTPUT

    @classmethod
    def output(cls, text: str) -> 'OutputLine':
        return cls(text, LineKind.OUTPUT)

    @classmethod
    def error(cls, text: str) -> 'OutputLine':
        return cls(text, LineKind.ERROR)

    @classmethod
    def success(cls, text: str) -> 'OutputLine':
        return cls(text, LineKind.SUCCESS)

    @classmethod
    def info(cls, text: str) -> 'OutputLine':
        return cls(text, LineKind.INFO)


@dataclass(frozen=True)
class TerminalState:
    """Authoritative snapshot of one play session."""
    current_directory: str = HOME_DIR
    file_system: DirNode = field(default_factory=create_base_filesystem)
    command_history: Tuple[str, ...] = ()
    output_history: Tuple[OutputLine, ...] = ()
    installed_packages: Tuple[str, ...] = ()
    environment: Dict[str, str] = field(default_factory=dict)
    editing_file: Optional[str] = None
    editing_content: str = ''


class _Unset:
    """Marker for a patch slot that leaves its field alone."""

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class StatePatch:
    """
    Partial TerminalState.

    Every slot defaults to UNSET. Any other value, None included, replaces
    the corresponding field when the patch is applied.
    """
    current_directory: Any = UNSET
    file_system: Any = UNSET
    command_history: Any = UNSET
    output_history: Any = UNSET
    installed_packages: Any = UNSET
    environment: Any = UNSET
    editing_file: Any = UNSET
    editing_content: Any = UNSET

    def changes(self) -> Dict[str, Any]:
        """Return the slots that are set, by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()


def apply_patch(state: TerminalState, patch: StatePatch) -> TerminalState:
    """Return a new state with every set slot of `patch` replacing its field."""
    changes = patch.changes()
    if not changes:
        return state
    for name in ('command_history', 'output_history', 'installed_packages'):
        if name in changes:
            changes[name] = tuple(changes[name])
    return replace(state, **changes)


class ShellError(Exception):
    """A command failed in one of the ordinary ways; the message is user-facing."""


@dataclass
class CommandResult:
    """
    The outcome of executing one input line.

    Holds the lines to display and the patch to merge into the session state.
    """
    output: List[OutputLine] = field(default_factory=list)
    patch: StatePatch = field(default_factory=StatePatch)

    @classmethod
    def error(cls, text: str) -> 'CommandResult':
        return cls([OutputLine.error(text)])

    @classmethod
    def lines_of(cls, texts, kind: LineKind = LineKind.OUTPUT) -> 'CommandResult':
        return cls([OutputLine(text, kind) for text in texts])

    @property
    def text(self) -> str:
        return '\n'.join(line.text for line in self.output)

    def lines(self) -> List[str]:
        """Get output as list of strings."""
        return [line.text for line in self.output]

    @property
    def has_errors(self) -> bool:
        return any(line.kind is LineKind.ERROR for line in self.output)

    @property
    def exit_code(self) -> int:
        return 1 if self.has_errors else 0
