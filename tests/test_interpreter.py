#!/usr/bin/env python3
"""
Tests for command dispatch and the interpreter's error boundary.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from unittest.mock import patch

import pytest

from termquest.command_parser import CommandKind
from termquest.interpreter import HANDLERS, CommandInterpreter, execute_command
from termquest.state import LineKind, ShellError, TerminalState


@pytest.fixture
def interpreter():
    return CommandInterpreter()


@pytest.fixture
def state():
    return TerminalState()


class TestDispatch:

    def test_every_kind_has_a_handler(self):
        assert set(HANDLERS) == set(CommandKind)

    def test_blank_line(self, interpreter, state):
        result = interpreter.execute('   ', state)
        assert result.output == []
        assert result.patch.is_empty()

    def test_unknown_command(self, interpreter, state):
        result = interpreter.execute('frobnicate --now', state)
        assert [(l.text, l.kind) for l in result.output] == [
            ("frobnicate: command not found. Type 'help' for available commands.", LineKind.ERROR)]

    def test_state_is_never_modified(self, interpreter, state):
        interpreter.execute('mkdir /tmp/x', state)
        assert 'x' not in state.file_system.children['tmp'].children

    def test_execute_command_function(self, state):
        result = execute_command('pwd', state)
        assert result.lines() == ['/home/user']

    def test_script_prefix_goes_to_script_runner(self, interpreter, state):
        assert interpreter.execute('./missing.sh', state).lines() == ['./missing.sh: No such file or directory']


class TestErrorBoundary:

    def test_shell_error_becomes_error_line(self, interpreter, state):
        def failing(req):
            raise ShellError('ls: something went wrong')

        with patch.dict(HANDLERS, {CommandKind.LS: failing}):
            result = interpreter.execute('ls', state)
        assert result.lines() == ['ls: something went wrong']
        assert result.has_errors

    def test_unexpected_exception_is_logged(self, interpreter, state, caplog):
        def broken(req):
            raise KeyError('boom')

        with patch.dict(HANDLERS, {CommandKind.PWD: broken}):
            with caplog.at_level(logging.ERROR, logger='termquest.interpreter'):
                result = interpreter.execute('pwd', state)

        assert result.lines() == ['pwd: internal error']
        assert result.patch.is_empty()
        assert any('pwd' in record.getMessage() for record in caplog.records)
