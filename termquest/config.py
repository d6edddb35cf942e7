#!/usr/bin/env python3
"""Configuration for a termquest terminal session."""

from dataclasses import dataclass


@dataclass
class TerminalConfig:
    """Configuration for terminal session."""
    user: str = 'user'
    hostname: str = 'terminal-quest'
    prompt_format: str = '{user}@{hostname}:{cwd}$ '
    kernel: str = '5.15.0-generic'

    def prompt(self, cwd: str) -> str:
        """Render the prompt for the given working directory."""
        return self.prompt_format.format(user=self.user, hostname=self.hostname, cwd=cwd)
