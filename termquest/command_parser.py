#!/usr/bin/env python3
"""
Command parser for the termquest interpreter.

Translates a raw input line into a structured command. The grammar is
deliberately small: a command name followed by whitespace-separated
arguments. There is no quoting grammar; handlers that print literal text
strip one leading and one trailing quote themselves.

Design Principles:
- Single responsibility: parse commands, don't execute them
- The command set is closed and resolved once, at parse time
- Pure functions with predictable outputs
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple


class CommandKind(Enum):
    """The closed set of built-in commands."""
    LS = 'ls'
    CD = 'cd'
    CAT = 'cat'
    PWD = 'pwd'
    ECHO = 'echo'
    MKDIR = 'mkdir'
    TOUCH = 'touch'
    RM = 'rm'
    CHMOD = 'chmod'
    GREP = 'grep'
    FIND = 'find'
    DU = 'du'
    TAR = 'tar'
    APT = 'apt'
    EDITOR = 'nano'
    CLEAR = 'clear'
    HELP = 'help'
    WHOAMI = 'whoami'
    DATE = 'date'
    UNAME = 'uname'
    MAN = 'man'
    HISTORY = 'history'
    PS = 'ps'
    FREE = 'free'
    DF = 'df'
    TOP = 'top'
    IFCONFIG = 'ifconfig'
    PING = 'ping'

    @classmethod
    def from_name(cls, name: str) -> Optional['CommandKind']:
        """Map a typed command name, aliases included, to its kind."""
        return COMMAND_NAMES.get(name)


# Every name the interpreter answers to
COMMAND_NAMES = {kind.value: kind for kind in CommandKind}
COMMAND_NAMES.update({
    'apt-get': CommandKind.APT,
    'vim': CommandKind.EDITOR,
    'vi': CommandKind.EDITOR,
    'htop': CommandKind.TOP,
})


class RedirectType(Enum):
    """Types of output redirection."""
    WRITE = '>'      # Overwrite file
    APPEND = '>>'    # Append to file


@dataclass
class Redirect:
    """Represents an output redirection."""
    type: RedirectType
    target: Optional[str]


@dataclass
class ParsedCommand:
    """
    A single parsed input line.

    `kind` is None when the name is not a built-in; the interpreter then
    tries scripts and installed package binaries.
    """
    name: str
    args: List[str]
    raw: str
    kind: Optional[CommandKind] = None

    def __str__(self) -> str:
        return ' '.join([self.name] + self.args)


_QUOTE_PATTERN = re.compile(r'^["\']|["\']$')


def strip_quotes(text: str) -> str:
    """Strip one leading and one trailing quote character."""
    return _QUOTE_PATTERN.sub('', text)


def parse_short_flags(args: List[str]) -> Tuple[Set[str], List[str]]:
    """
    Split arguments into short flag letters and operands.

    `-la` contributes {'l', 'a'}. Long options (`--installed`) are kept whole.
    A lone '-' is an operand.
    """
    flags = set()
    operands = []
    for arg in args:
        if arg.startswith('--') and len(arg) > 2:
            flags.add(arg)
        elif arg.startswith('-') and len(arg) > 1:
            flags.update(arg[1:])
        else:
            operands.append(arg)
    return flags, operands


class CommandParser:
    """
    Parser for the simulated shell's input lines.

    This parser handles:
    - Trimming and empty input
    - Command name and positional arguments
    - Alias resolution to a CommandKind
    - Output redirection tokens (for the commands that honour them)
    """

    def parse(self, command_line: str) -> Optional[ParsedCommand]:
        """
        Parse a raw input line. Returns None for blank input.
        """
        trimmed = command_line.strip() if command_line else ''
        if not trimmed:
            return None

        tokens = trimmed.split()
        name = tokens[0]
        return ParsedCommand(
            name=name,
            args=tokens[1:],
            raw=trimmed,
            kind=CommandKind.from_name(name),
        )

    def extract_redirect(self, args: List[str]) -> Tuple[List[str], Optional[Redirect]]:
        """
        Find the first standalone '>' or '>>' token.

        Returns the arguments before it and the redirect; the target is None
        when the operator is the last token.
        """
        for i, arg in enumerate(args):
            if arg in ('>', '>>'):
                target = args[i + 1] if i + 1 < len(args) else None
                redirect_type = RedirectType.APPEND if arg == '>>' else RedirectType.WRITE
                return args[:i], Redirect(type=redirect_type, target=target)
        return list(args), None
