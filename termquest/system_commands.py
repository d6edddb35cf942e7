#!/usr/bin/env python3
"""
Informational commands. None of them change the filesystem.

Most of the system-inspection output is canned; missions only care that the
command was typed, which the session records in the command history.
"""

from datetime import datetime, timezone

from .command_parser import CommandKind, parse_short_flags
from .context import CommandRequest
from .state import CommandResult, StatePatch
from . import tables


def pwd(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of([req.cwd or '/'])


def whoami(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of([req.config.user])


def date(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of([datetime.now(timezone.utc).strftime('%a %b %d %H:%M:%S UTC %Y')])


def uname(req: CommandRequest) -> CommandResult:
    if '-a' in req.args:
        config = req.config
        return CommandResult.lines_of([f"Linux {config.hostname} {config.kernel} #1 SMP x86_64 GNU/Linux"])
    return CommandResult.lines_of(['Linux'])


def man(req: CommandRequest) -> CommandResult:
    if not req.args:
        return CommandResult.error('What manual page do you want?')

    page = tables.MAN_PAGES.get(req.args[0])
    if page is None:
        return CommandResult.error(f"No manual entry for {req.args[0]}")
    return CommandResult.lines_of(page)


def history(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of(
        f"  {i}  {cmd}" for i, cmd in enumerate(req.state.command_history, start=1)
    )


def clear(req: CommandRequest) -> CommandResult:
    return CommandResult(patch=StatePatch(output_history=()))


def _render_help_page(name: str, page) -> list:
    summary, synopsis, description, examples = page
    lines = ['NAME', f"    {name} - {summary}", '', 'SYNOPSIS', f"    {synopsis}", '', 'DESCRIPTION']
    lines.extend(f"    {line}" for line in description)
    lines.extend(['', 'EXAMPLES'])
    lines.extend(f"    {line}" for line in examples)
    return lines


def help_command(req: CommandRequest) -> CommandResult:
    """Show the command list, or the detailed page for one command."""
    if not req.args:
        return CommandResult.lines_of(tables.GENERAL_HELP)

    topic = req.args[0]
    kind = CommandKind.from_name(topic)
    key = kind.value if kind is not None else topic

    page = tables.HELP_PAGES.get(key)
    if page is None:
        return CommandResult.error(f"help: no help topics match '{topic}'. Try 'help' for a list of commands.")
    return CommandResult.lines_of(_render_help_page(key, page))


def ps(req: CommandRequest) -> CommandResult:
    full = any(arg.lstrip('-') in ('aux', 'ef', 'e', 'A') for arg in req.args)
    return CommandResult.lines_of(tables.PS_AUX_OUTPUT if full else tables.PS_OUTPUT)


def free(req: CommandRequest) -> CommandResult:
    flags, _ = parse_short_flags(req.args)
    return CommandResult.lines_of(tables.FREE_HUMAN_OUTPUT if 'h' in flags else tables.FREE_OUTPUT)


def df(req: CommandRequest) -> CommandResult:
    flags, _ = parse_short_flags(req.args)
    return CommandResult.lines_of(tables.DF_HUMAN_OUTPUT if 'h' in flags else tables.DF_OUTPUT)


def top(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of(tables.TOP_OUTPUT)


def ifconfig(req: CommandRequest) -> CommandResult:
    return CommandResult.lines_of(tables.IFCONFIG_OUTPUT)


def ping(req: CommandRequest) -> CommandResult:
    _, hosts = parse_short_flags(req.args)
    if not hosts:
        return CommandResult.error('ping: usage error: Destination address required')
    host = hosts[-1]
    return CommandResult.lines_of(line.format(host=host) for line in tables.PING_OUTPUT)
