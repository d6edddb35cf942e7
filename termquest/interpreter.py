#!/usr/bin/env python3
"""
Command interpreter for termquest.

Turns one raw input line into output lines plus a state patch. The command
set is closed: the parser resolves the name to a CommandKind and a single
table lookup picks the handler. Names outside the set are tried as a script
(`./path`) or as a version query to an installed package before being
reported as unknown.

Design Principles:
- Handlers are pure functions of (request) -> CommandResult
- Every failure is an error line; nothing escapes `execute`
- Parsing and execution stay separate
"""

import logging
from typing import Callable, Dict, Optional

from . import apt, fs_commands, system_commands
from .command_parser import CommandKind, CommandParser, ParsedCommand
from .config import TerminalConfig
from .context import CommandRequest, MissionContext
from .editor import open_editor
from .state import CommandResult, ShellError, TerminalState

logger = logging.getLogger(__name__)


Handler = Callable[[CommandRequest], CommandResult]

HANDLERS: Dict[CommandKind, Handler] = {
    CommandKind.LS: fs_commands.ls,
    CommandKind.CD: fs_commands.cd,
    CommandKind.CAT: fs_commands.cat,
    CommandKind.PWD: system_commands.pwd,
    CommandKind.ECHO: fs_commands.echo,
    CommandKind.MKDIR: fs_commands.mkdir,
    CommandKind.TOUCH: fs_commands.touch,
    CommandKind.RM: fs_commands.rm,
    CommandKind.CHMOD: fs_commands.chmod,
    CommandKind.GREP: fs_commands.grep,
    CommandKind.FIND: fs_commands.find,
    CommandKind.DU: fs_commands.du,
    CommandKind.TAR: fs_commands.tar,
    CommandKind.APT: apt.apt,
    CommandKind.EDITOR: open_editor,
    CommandKind.CLEAR: system_commands.clear,
    CommandKind.HELP: system_commands.help_command,
    CommandKind.WHOAMI: system_commands.whoami,
    CommandKind.DATE: system_commands.date,
    CommandKind.UNAME: system_commands.uname,
    CommandKind.MAN: system_commands.man,
    CommandKind.HISTORY: system_commands.history,
    CommandKind.PS: system_commands.ps,
    CommandKind.FREE: system_commands.free,
    CommandKind.DF: system_commands.df,
    CommandKind.TOP: system_commands.top,
    CommandKind.IFCONFIG: system_commands.ifconfig,
    CommandKind.PING: system_commands.ping,
}


class CommandInterpreter:
    """
    Executes input lines against a TerminalState.

    Holds no session state of its own; the same interpreter can serve any
    number of states.
    """

    def __init__(self, config: Optional[TerminalConfig] = None):
        self.config = config or TerminalConfig()
        self.parser = CommandParser()

    def execute(self, command_line: str, state: TerminalState,
                context: Optional[MissionContext] = None) -> CommandResult:
        """Execute one raw input line and return its output and state patch."""
        command = self.parser.parse(command_line)
        if command is None:
            return CommandResult()

        request = CommandRequest(
            name=command.name,
            args=command.args,
            raw=command.raw,
            state=state,
            context=context or MissionContext(),
            config=self.config,
        )
        logger.debug("Dispatching %r (kind=%s)", command.raw, command.kind)

        handler = self._get_handler(command, request)
        try:
            return handler(request)
        except ShellError as e:
            return CommandResult.error(str(e))
        except Exception:
            logger.exception("Command %r failed unexpectedly", command.raw)
            return CommandResult.error(f"{command.name}: internal error")

    def _get_handler(self, command: ParsedCommand, request: CommandRequest) -> Handler:
        """Pick the handler for a parsed command, falling back to the special cases."""
        if command.kind is not None:
            return HANDLERS[command.kind]

        if command.raw.startswith('./'):
            return fs_commands.run_script

        version = apt.package_version(request)
        if version is not None:
            return lambda req: version

        return self._command_not_found

    def _command_not_found(self, request: CommandRequest) -> CommandResult:
        logger.debug("Unknown command %r", request.name)
        return CommandResult.error(
            f"{request.name}: command not found. Type 'help' for available commands."
        )


def execute_command(command_line: str, state: TerminalState,
                    context: Optional[MissionContext] = None,
                    config: Optional[TerminalConfig] = None) -> CommandResult:
    """Execute a single input line with a throwaway interpreter."""
    return CommandInterpreter(config).execute(command_line, state, context)
