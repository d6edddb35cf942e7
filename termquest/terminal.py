#!/usr/bin/env python3
"""
Terminal session for termquest.

The interpreter only computes results; the session owns the authoritative
state for one mission attempt. It echoes input, merges patches, records the
command history, serves hints and checks the win condition after every
command.
"""

import logging
from dataclasses import replace
from typing import Optional

from . import editor
from .completion import TabCompleter
from .config import TerminalConfig
from .context import MissionContext
from .interpreter import CommandInterpreter
from .mission import Mission
from .state import (
    UNSET, CommandResult, LineKind, OutputLine, TerminalState, apply_patch,
)

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Main terminal session manager.

    Without a mission the session starts on the base filesystem and never
    completes.
    """

    def __init__(self, mission: Optional[Mission] = None,
                 config: Optional[TerminalConfig] = None):
        """Initialize terminal session."""
        self.mission = mission
        self.config = config or TerminalConfig()
        self.interpreter = CommandInterpreter(self.config)
        self.completer = TabCompleter()
        self.context = mission.context() if mission else MissionContext()
        self.state = self._initial_state()
        self.hints_used = 0
        self.completed = False

    def _initial_state(self) -> TerminalState:
        return self.mission.create_state() if self.mission else TerminalState()

    def get_prompt(self) -> str:
        """Generate the command prompt."""
        return self.config.prompt(self.state.current_directory)

    def execute(self, command_line: str) -> CommandResult:
        """
        Run one input line and merge the result into the session state.

        Returns the CommandResult so callers can inspect the lines produced
        by this command alone.
        """
        command = command_line.strip()
        input_line = OutputLine(f"{self.get_prompt()}{command}", LineKind.INPUT)

        if command == 'hint':
            result = CommandResult([self.request_hint()])
        else:
            result = self.interpreter.execute(command, self.state, self.context)

        new_state = apply_patch(self.state, result.patch)
        if result.patch.output_history is UNSET:
            output_history = self.state.output_history + (input_line,)
        else:
            # The command replaced the scrollback (clear); start from that
            output_history = new_state.output_history

        command_history = new_state.command_history
        if command:
            command_history = command_history + (command,)

        self.state = replace(
            new_state,
            output_history=tuple(output_history) + tuple(result.output),
            command_history=command_history,
        )
        self._check_win_condition()
        return result

    def request_hint(self) -> OutputLine:
        """Reveal the next mission hint."""
        limit = self.mission.hint_limit if self.mission else 0
        if self.hints_used >= limit:
            return OutputLine.info('No more hints available.')

        hint = self.mission.hints[self.hints_used]
        self.hints_used += 1
        return OutputLine.info(f"Hint {self.hints_used}/{limit}: {hint}")

    def save_editor(self, content: Optional[str] = None) -> CommandResult:
        """Save the open editor buffer (or `content`) into the filesystem."""
        return self._apply(editor.save_editor(self.state, content))

    def close_editor(self) -> CommandResult:
        return self._apply(editor.close_editor(self.state))

    def complete(self, line: str) -> Optional[str]:
        """Tab-complete `line` against the current state."""
        return self.completer.complete(line, self.state)

    def restart(self):
        """Start the mission over with a fresh filesystem."""
        self.state = self._initial_state()
        self.hints_used = 0
        self.completed = False
        self.completer.reset()

    def _apply(self, result: CommandResult) -> CommandResult:
        new_state = apply_patch(self.state, result.patch)
        self.state = replace(new_state, output_history=new_state.output_history + tuple(result.output))
        self._check_win_condition()
        return result

    def _check_win_condition(self):
        if self.completed or self.mission is None:
            return
        if self.mission.check_win_condition(self.state):
            self.completed = True
            logger.info("Mission %s completed after %d commands",
                        self.mission.id, len(self.state.command_history))
