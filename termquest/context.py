#!/usr/bin/env python3
"""What a command handler is given: the parsed command, the state and its context."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import TerminalConfig
from .state import TerminalState
from .tables import AVAILABLE_PACKAGES


@dataclass(frozen=True)
class MissionContext:
    """
    Per-mission settings the interpreter consults.

    `packages` overrides the default package catalog when given.
    """
    packages: Optional[Sequence[str]] = None

    @property
    def catalog(self) -> Sequence[str]:
        return tuple(self.packages) if self.packages is not None else AVAILABLE_PACKAGES


@dataclass(frozen=True)
class CommandRequest:
    """A single command invocation as seen by its handler."""
    name: str
    args: List[str]
    raw: str
    state: TerminalState
    context: MissionContext = field(default_factory=MissionContext)
    config: TerminalConfig = field(default_factory=TerminalConfig)

    @property
    def cwd(self) -> str:
        return self.state.current_directory

    @property
    def root(self):
        return self.state.file_system
