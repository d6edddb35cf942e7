#!/usr/bin/env python3
"""
The contract a mission or ticket fulfils towards the interpreter.

Missions are content and live outside this package. They hand over a tree
factory, a starting directory, a win predicate and hints. Scoring fields are
carried along for the caller and never read here.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .context import MissionContext
from .filesystem import DirNode
from .paths import HOME_DIR
from .state import TerminalState


@dataclass(frozen=True)
class Mission:
    """One puzzle: its starting world and the condition that completes it."""
    id: str
    title: str
    objective: str
    build_filesystem: Callable[[], DirNode]
    check_win_condition: Callable[[TerminalState], bool]
    initial_directory: str = HOME_DIR
    hints: Sequence[str] = ()
    max_hints: Optional[int] = None
    description: str = ''
    packages: Optional[Sequence[str]] = None
    installed_packages: Sequence[str] = ()
    base_score: int = 0
    time_bonus: int = 0
    time_limit_seconds: int = 0

    @property
    def hint_limit(self) -> int:
        """How many hints may be revealed; `max_hints=None` means all of them."""
        if self.max_hints is None:
            return len(self.hints)
        return max(0, min(self.max_hints, len(self.hints)))

    def create_state(self) -> TerminalState:
        """Build a fresh state for a new attempt."""
        return TerminalState(
            current_directory=self.initial_directory,
            file_system=self.build_filesystem(),
            installed_packages=tuple(dict.fromkeys(self.installed_packages)),
        )

    def context(self) -> MissionContext:
        return MissionContext(packages=self.packages)
