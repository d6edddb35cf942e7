#!/usr/bin/env python3
"""
Filesystem commands: ls, cd, cat, echo, mkdir, touch, rm, chmod, grep,
find, du, tar and ./script execution.

Each handler takes a CommandRequest and returns a CommandResult. Handlers
never touch the state they are given; a changed tree is returned in the
patch. Commands with several operands report a failing operand and carry on
with the rest.
"""

import math
from dataclasses import replace
from typing import Iterator, List, Tuple

from .command_parser import CommandParser, RedirectType, parse_short_flags, strip_quotes
from .context import CommandRequest
from .filesystem import (
    DIR_PERMISSIONS, DIR_SIZE, DirNode, Node,
    remove_node, set_node, write_file,
)
from .paths import HOME_DIR, lookup, resolve, split_path
from .state import CommandResult, OutputLine, ShellError, StatePatch


_parser = CommandParser()

# mode -> (executable, permissions)
CHMOD_MODES = {
    '+x': (True, 'rwxr-xr-x'),
    '755': (True, 'rwxr-xr-x'),
    '777': (True, 'rwxr-xr-x'),
    '-x': (False, 'rw-r--r--'),
    '644': (False, 'rw-r--r--'),
}


def _tree_result(output: List[OutputLine], req: CommandRequest, new_root) -> CommandResult:
    """Attach the new tree to the result only when it actually changed."""
    if new_root is req.root:
        return CommandResult(output)
    return CommandResult(output, StatePatch(file_system=new_root))


def _join(base: str, name: str) -> str:
    return base + name if base.endswith('/') else base + '/' + name


def _long_line(node: Node, name: str) -> str:
    if node.is_dir():
        return f"d{DIR_PERMISSIONS} 1 {node.owner} {node.owner} {DIR_SIZE} {name}"
    return f"-{node.permissions} 1 {node.owner} {node.owner} {node.size} {name}"


def ls(req: CommandRequest) -> CommandResult:
    flags, operands = parse_short_flags(req.args)
    show_all = 'a' in flags
    show_long = 'l' in flags
    target = operands[0] if operands else req.cwd

    node = lookup(req.root, resolve(target, req.cwd))
    if node is None:
        return CommandResult.error(f"ls: cannot access '{target}': No such file or directory")

    if node.is_file():
        return CommandResult.lines_of([_long_line(node, node.name) if show_long else node.name])

    names = sorted(name for name in node.children if show_all or not name.startswith('.'))
    if show_all:
        names = ['.', '..'] + names
    if not names:
        return CommandResult()

    if not show_long:
        return CommandResult.lines_of(['  '.join(names)])

    lines = []
    for name in names:
        if name in ('.', '..'):
            lines.append(f"d{DIR_PERMISSIONS} 2 user user {DIR_SIZE} {name}")
        else:
            lines.append(_long_line(node.children[name], name))
    return CommandResult.lines_of(lines)


def cd(req: CommandRequest) -> CommandResult:
    target = req.args[0] if req.args else HOME_DIR
    resolved = resolve(target, req.cwd)
    node = lookup(req.root, resolved)

    if node is None:
        return CommandResult.error(f"cd: {target}: No such file or directory")
    if not node.is_dir():
        return CommandResult.error(f"cd: {target}: Not a directory")

    return CommandResult(patch=StatePatch(current_directory=resolved))


def _read_file(req: CommandRequest, command: str, target: str) -> str:
    """Return a file's content or raise ShellError in `command`'s wording."""
    node = lookup(req.root, resolve(target, req.cwd))
    if node is None:
        raise ShellError(f"{command}: {target}: No such file or directory")
    if node.is_dir():
        raise ShellError(f"{command}: {target}: Is a directory")
    return node.content


def _content_lines(content: str) -> List[str]:
    """Split file content on line feeds only; one trailing line feed ends the last line."""
    if content.endswith('\n'):
        content = content[:-1]
    return content.split('\n') if content else []


def cat(req: CommandRequest) -> CommandResult:
    if not req.args:
        return CommandResult.error('cat: missing operand')

    output = []
    for target in req.args:
        try:
            content = _read_file(req, 'cat', target)
        except ShellError as e:
            output.append(OutputLine.error(str(e)))
            continue
        output.extend(OutputLine.output(line) for line in _content_lines(content))
    return CommandResult(output)


def echo(req: CommandRequest) -> CommandResult:
    words, redirect = _parser.extract_redirect(req.args)
    text = strip_quotes(' '.join(words))

    if redirect is None:
        return CommandResult.lines_of([text])
    if redirect.target is None:
        return CommandResult.error("syntax error near unexpected token `newline'")

    resolved = resolve(redirect.target, req.cwd)
    existing = lookup(req.root, resolved)
    if existing is not None and existing.is_dir():
        return CommandResult.error(f"cannot overwrite directory '{redirect.target}'")

    prior = ''
    if redirect.type is RedirectType.APPEND and existing is not None:
        prior = existing.content

    try:
        new_root = write_file(req.root, resolved, prior + text + '\n')
    except FileNotFoundError:
        return CommandResult.error(f"cannot create '{redirect.target}': No such file or directory")
    except IsADirectoryError:
        return CommandResult.error(f"cannot overwrite directory '{redirect.target}'")
    return _tree_result([], req, new_root)


def _parent_dir(root, path: str) -> Tuple[DirNode, str]:
    """Return the parent directory node of `path` and the final name."""
    parent_path, name = split_path(path)
    parent = lookup(root, parent_path)
    if parent is None or not parent.is_dir():
        raise FileNotFoundError(path)
    return parent, name


def mkdir(req: CommandRequest) -> CommandResult:
    targets = [a for a in req.args if not a.startswith('-')]
    if not targets:
        return CommandResult.error('mkdir: missing operand')

    root = req.root
    output = []
    for target in targets:
        resolved = resolve(target, req.cwd)
        try:
            parent, name = _parent_dir(root, resolved)
        except FileNotFoundError:
            output.append(OutputLine.error(
                f"mkdir: cannot create directory '{target}': No such file or directory"))
            continue

        if not name or name in parent.children:
            output.append(OutputLine.error(f"mkdir: cannot create directory '{target}': File exists"))
            continue

        root = set_node(root, resolved, DirNode(name=name))
    return _tree_result(output, req, root)


def touch(req: CommandRequest) -> CommandResult:
    if not req.args:
        return CommandResult.error('touch: missing file operand')

    root = req.root
    output = []
    for target in req.args:
        resolved = resolve(target, req.cwd)
        if lookup(root, resolved) is not None:
            # Existing files and directories are left untouched
            continue
        try:
            root = write_file(root, resolved, '')
        except (FileNotFoundError, IsADirectoryError):
            output.append(OutputLine.error(f"touch: cannot touch '{target}': No such file or directory"))
    return _tree_result(output, req, root)


def _surviving_directory(root, path: str) -> str:
    """Walk up from `path` to the nearest directory that still exists."""
    while lookup(root, path) is None:
        path = split_path(path)[0]
    return path


def rm(req: CommandRequest) -> CommandResult:
    flags, targets = parse_short_flags(req.args)
    if not targets:
        return CommandResult.error('rm: missing operand')

    recursive = 'r' in flags or 'R' in flags
    force = 'f' in flags

    root = req.root
    output = []
    for target in targets:
        if target.rstrip('/').split('/')[-1] in ('.', '..'):
            output.append(OutputLine.error(
                f"rm: refusing to remove '.' or '..' directory: skipping '{target}'"))
            continue

        resolved = resolve(target, req.cwd)
        node = lookup(root, resolved)

        if node is None:
            if not force:
                output.append(OutputLine.error(f"rm: cannot remove '{target}': No such file or directory"))
            continue
        if resolved == '/':
            output.append(OutputLine.error(f"rm: cannot remove '{target}': Permission denied"))
            continue
        if node.is_dir() and not recursive:
            output.append(OutputLine.error(f"rm: cannot remove '{target}': Is a directory"))
            continue

        root = remove_node(root, resolved)

    result = _tree_result(output, req, root)
    cwd = _surviving_directory(root, req.cwd)
    if cwd != req.cwd:
        # An ancestor of the working directory was removed
        result.patch = replace(result.patch, current_directory=cwd)
    return result


def chmod(req: CommandRequest) -> CommandResult:
    if len(req.args) < 2:
        return CommandResult.error('chmod: missing operand')

    mode = req.args[0]
    if mode not in CHMOD_MODES:
        return CommandResult.error(f"chmod: invalid mode: '{mode}'")
    executable, permissions = CHMOD_MODES[mode]

    root = req.root
    output = []
    for target in req.args[1:]:
        resolved = resolve(target, req.cwd)
        node = lookup(root, resolved)
        if node is None:
            output.append(OutputLine.error(f"chmod: cannot access '{target}': No such file or directory"))
            continue
        if node.is_dir():
            # Directories carry no mode in this model
            continue
        root = set_node(root, resolved, replace(node, executable=executable, permissions=permissions))
    return _tree_result(output, req, root)


def grep(req: CommandRequest) -> CommandResult:
    if len(req.args) < 2:
        return CommandResult.error('grep: missing operand')

    pattern = strip_quotes(req.args[0]).lower()
    files = req.args[1:]
    output = []

    for target in files:
        try:
            content = _read_file(req, 'grep', target)
        except ShellError as e:
            output.append(OutputLine.error(str(e)))
            continue

        for line in _content_lines(content):
            if pattern in line.lower():
                output.append(OutputLine.output(f"{target}:{line}" if len(files) > 1 else line))
    return CommandResult(output)


def _walk(node: Node, path: str) -> Iterator[Tuple[str, Node]]:
    """Yield (path, node) pairs in pre-order, children sorted by name."""
    yield path, node
    if node.is_dir():
        for name in sorted(node.children):
            yield from _walk(node.children[name], _join(path, name))


def find(req: CommandRequest) -> CommandResult:
    usage = 'find: usage: find <path> -name <pattern>'
    if '-name' not in req.args:
        return CommandResult.error(usage)

    index = req.args.index('-name')
    if index + 1 >= len(req.args):
        return CommandResult.error(usage)

    # Wildcards are dropped: matching is a plain substring test
    pattern = strip_quotes(req.args[index + 1]).replace('*', '')
    start = req.args[0] if index > 0 else '.'
    resolved = resolve(start, req.cwd)

    node = lookup(req.root, resolved)
    if node is None:
        return CommandResult.error(f"find: '{start}': No such file or directory")

    matches = [path for path, child in _walk(node, resolved) if pattern in child.name]
    return CommandResult.lines_of(matches)


def disk_usage(node: Node) -> int:
    """Synthetic size: file content length, or 4096 plus everything below a directory."""
    if node.is_file():
        return node.size
    return DIR_SIZE + sum(disk_usage(child) for child in node.children.values())


def format_size(size: int) -> str:
    """Format size in human-readable form."""
    if size < 1024:
        return f"{size}B"
    value = float(size)
    for unit in ('K', 'M', 'G'):
        value /= 1024
        if value < 1024 or unit == 'G':
            return f"{value:.1f}{unit}"


def du(req: CommandRequest) -> CommandResult:
    flags, targets = parse_short_flags(req.args)
    human = 'h' in flags
    summarize = 's' in flags

    def render(size: int, path: str) -> OutputLine:
        shown = format_size(size) if human else str(math.ceil(size / 1024))
        return OutputLine.output(f"{shown}\t{path}")

    output = []
    for target in targets or ['.']:
        node = lookup(req.root, resolve(target, req.cwd))
        if node is None:
            output.append(OutputLine.error(f"du: cannot access '{target}': No such file or directory"))
            continue

        if node.is_dir() and not summarize:
            for name in sorted(node.children):
                output.append(render(disk_usage(node.children[name]), _join(target, name)))
        output.append(render(disk_usage(node), target))
    return CommandResult(output)


def tar(req: CommandRequest) -> CommandResult:
    usage = 'tar: usage: tar -cf <archive> <source>'
    if not req.args:
        return CommandResult.error(usage)

    options = req.args[0].lstrip('-')
    if 'c' not in options or 'f' not in options or len(req.args) < 3:
        return CommandResult.error(usage)

    archive = req.args[1]
    sources = req.args[2:]

    output = []
    archived = []
    for source in sources:
        resolved = resolve(source, req.cwd)
        if lookup(req.root, resolved) is None:
            output.append(OutputLine.error(f"tar: {source}: Cannot stat: No such file or directory"))
        else:
            archived.append(resolved)
    if output:
        return CommandResult(output)

    content = ''.join(f"tar archive of {path}\n" for path in archived)
    try:
        new_root = write_file(req.root, resolve(archive, req.cwd), content)
    except (FileNotFoundError, IsADirectoryError):
        return CommandResult.error(f"tar: {archive}: Cannot create archive: No such file or directory")
    return _tree_result([], req, new_root)


def run_script(req: CommandRequest) -> CommandResult:
    """Run `./path`: echo lines print, comments and blank lines are skipped."""
    script = req.name[2:]
    node = lookup(req.root, resolve(script, req.cwd))

    if node is None:
        return CommandResult.error(f"./{script}: No such file or directory")
    if node.is_dir():
        return CommandResult.error(f"./{script}: Is a directory")
    if not node.executable:
        return CommandResult.error(f"./{script}: Permission denied")

    output = []
    for line in node.content.split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('echo '):
            output.append(OutputLine.output(strip_quotes(line[5:])))
    return CommandResult(output)
