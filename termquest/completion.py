#!/usr/bin/env python3
"""
Tab completion for the simulated shell.

The first word completes against the command names; any later word is
treated as a path and completes against the virtual filesystem, keeping the
prefix style the player typed (`/abs/`, `~/`, `./` or a bare name).
Pressing tab again without changing the line cycles to the next candidate.
"""

from typing import List, Optional, Tuple

from .command_parser import COMMAND_NAMES
from .paths import lookup, resolve
from .state import TerminalState


class TabCompleter:
    """
    Provides tab completion for commands and file paths.

    Instances remember the last suggestion so repeated calls can cycle; they
    never modify the state they are given.
    """

    def __init__(self):
        self._command_cache = sorted(COMMAND_NAMES)
        self._stem = ''
        self._matches: List[str] = []
        self._index = 0
        self._last_line: Optional[str] = None
        self._last_state: Optional[TerminalState] = None

    def candidates(self, line: str, state: TerminalState) -> List[str]:
        """Return the sorted completion candidates for `line`."""
        return self._analyse(line, state)[1]

    def complete(self, line: str, state: TerminalState) -> Optional[str]:
        """
        Return `line` with its last word completed, or None without candidates.

        Called again with the line it just returned (and the same state), it
        returns the next candidate instead, wrapping around.
        """
        if self._matches and line == self._last_line and state is self._last_state:
            self._index = (self._index + 1) % len(self._matches)
        else:
            self._stem, self._matches = self._analyse(line, state)
            self._index = 0
            if not self._matches:
                self.reset()
                return None

        suggestion = self._stem + self._matches[self._index]
        self._last_line = suggestion
        self._last_state = state
        return suggestion

    def reset(self):
        """Forget the current cycle."""
        self._stem = ''
        self._matches = []
        self._index = 0
        self._last_line = None
        self._last_state = None

    def _analyse(self, line: str, state: TerminalState) -> Tuple[str, List[str]]:
        """Split `line` into the untouched stem and the candidates for the rest."""
        words = line.split()
        trailing_space = bool(line) and line[-1].isspace()

        if len(words) <= 1 and not trailing_space:
            prefix = words[0] if words else ''
            return line[:len(line) - len(prefix)], self._complete_command(prefix)

        fragment = '' if trailing_space else words[-1]
        return line[:len(line) - len(fragment)], self._complete_path(fragment, state)

    def _complete_command(self, text: str) -> List[str]:
        """Complete command names."""
        return [cmd for cmd in self._command_cache if cmd.startswith(text)]

    def _complete_path(self, text: str, state: TerminalState) -> List[str]:
        """Complete file paths in the virtual filesystem."""
        if text == '~':
            return ['~/']

        # Everything up to the last '/' is kept exactly as typed
        split_at = text.rfind('/') + 1
        dir_part, prefix = text[:split_at], text[split_at:]

        search_dir = resolve(dir_part, state.current_directory) if dir_part else state.current_directory
        directory = lookup(state.file_system, search_dir)
        if directory is None or not directory.is_dir():
            return []

        matches = []
        for name in sorted(directory.children):
            if not name.startswith(prefix):
                continue
            # Hidden entries only complete when the player typed the dot
            if name.startswith('.') and not prefix.startswith('.'):
                continue
            suffix = '/' if directory.children[name].is_dir() else ''
            matches.append(dir_part + name + suffix)
        return matches
