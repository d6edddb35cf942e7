#!/usr/bin/env python3
"""
A pretend package manager.

Packages are names in a catalog; installing one only records the name in
`installed_packages`. Nothing is downloaded and nothing runs.
"""

from typing import Optional

from .context import CommandRequest
from .state import CommandResult, OutputLine, StatePatch
from .tables import PACKAGE_VERSIONS


APT_USAGE = (
    'Usage: apt <command> [package...]',
    '',
    'Commands:',
    '  install   install packages',
    '  remove    remove packages',
    '  list      list packages (--installed for installed only)',
    '  search    search the package catalog',
    '  update    update the package lists',
)


def apt(req: CommandRequest) -> CommandResult:
    """Dispatch an apt/apt-get subcommand."""
    if not req.args:
        return CommandResult([OutputLine.error('apt: missing command')]
                             + [OutputLine.info(line) for line in APT_USAGE])

    subcommand = req.args[0]
    rest = req.args[1:]
    handlers = {
        'install': _install,
        'remove': _remove,
        'uninstall': _remove,
        'list': _list,
        'search': _search,
        'update': _update,
    }

    handler = handlers.get(subcommand)
    if handler is None:
        return CommandResult.error(f"apt: unknown command '{subcommand}'")
    return handler(req, rest)


def _install(req: CommandRequest, args) -> CommandResult:
    packages = [a for a in args if not a.startswith('-')]
    if not packages:
        return CommandResult.error('apt: need at least one package name')

    catalog = req.context.catalog
    installed = list(req.state.installed_packages)
    output = []

    for pkg in packages:
        if pkg not in catalog:
            output.append(OutputLine.error(f"E: Unable to locate package {pkg}"))
            continue
        if pkg in installed:
            output.append(OutputLine.info(f"{pkg} is already installed."))
            continue

        output.append(OutputLine.output('Reading package lists... Done'))
        output.append(OutputLine.output(f"Setting up {pkg}..."))
        output.append(OutputLine.success(f"{pkg} has been successfully installed."))
        installed.append(pkg)

    if len(installed) == len(req.state.installed_packages):
        return CommandResult(output)
    return CommandResult(output, StatePatch(installed_packages=tuple(installed)))


def _remove(req: CommandRequest, args) -> CommandResult:
    packages = [a for a in args if not a.startswith('-')]
    if not packages:
        return CommandResult.error('apt: need at least one package name')

    installed = list(req.state.installed_packages)
    output = []
    for pkg in packages:
        if pkg not in installed:
            output.append(OutputLine.info(f"Package '{pkg}' is not installed."))
            continue

        output.append(OutputLine.output(f"Removing {pkg}..."))
        output.append(OutputLine.success(f"{pkg} has been removed."))
        installed.remove(pkg)

    if len(installed) == len(req.state.installed_packages):
        return CommandResult(output)
    return CommandResult(output, StatePatch(installed_packages=tuple(installed)))


def _list(req: CommandRequest, args) -> CommandResult:
    installed = req.state.installed_packages
    if '--installed' in args:
        if not installed:
            return CommandResult([OutputLine.info('No packages installed.')])
        return CommandResult.lines_of(f"{pkg}/stable installed" for pkg in installed)

    return CommandResult.lines_of(
        f"{pkg}/stable [installed]" if pkg in installed else f"{pkg}/stable"
        for pkg in req.context.catalog
    )


def _search(req: CommandRequest, args) -> CommandResult:
    query = args[0].lower() if args else ''
    matches = [pkg for pkg in req.context.catalog if query in pkg.lower()]
    if not matches:
        return CommandResult([OutputLine.info('No packages found.')])
    return CommandResult.lines_of(matches)


def _update(req: CommandRequest, args) -> CommandResult:
    return CommandResult.lines_of([
        'Hit:1 http://archive.ubuntu.com/ubuntu focal InRelease',
        'Reading package lists... Done',
    ])


def package_version(req: CommandRequest) -> Optional[CommandResult]:
    """
    Answer `<pkg> -v` / `<pkg> --version` for an installed package.

    Returns None when the line is not such a query.
    """
    if req.name not in req.state.installed_packages:
        return None
    if '-v' not in req.args and '--version' not in req.args:
        return None
    version = PACKAGE_VERSIONS.get(req.name, f"{req.name} version 1.0.0")
    return CommandResult.lines_of([version])
