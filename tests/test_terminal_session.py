#!/usr/bin/env python3
"""
Tests for TerminalSession driving whole missions.

The missions here are small stand-ins for real mission content: a disk that
needs cleaning and a log directory that needs archiving.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest

from termquest.config import TerminalConfig
from termquest.filesystem import from_dict
from termquest.mission import Mission
from termquest.paths import lookup
from termquest.state import LineKind
from termquest.terminal import TerminalSession


def disk_space_tree():
    return from_dict({'type': 'directory', 'name': '/', 'children': {
        'home': {'type': 'directory', 'children': {
            'user': {'type': 'directory', 'children': {}},
        }},
        'tmp': {'type': 'directory', 'children': {}},
        'var': {'type': 'directory', 'children': {
            'log': {'type': 'directory', 'children': {
                'huge.log': {'type': 'file', 'content': 'x' * 50000},
                'app.log': {'type': 'file', 'content': 'started\n'},
            }},
        }},
    }})


@pytest.fixture
def disk_mission():
    return Mission(
        id='disk-space',
        title='Disk Full',
        objective='Free up space by removing the largest log file.',
        build_filesystem=disk_space_tree,
        check_win_condition=lambda state: (
            lookup(state.file_system, '/var/log/huge.log') is None
            and lookup(state.file_system, '/var/log/app.log') is not None
        ),
        hints=('Use du -h /var/log to find big files.', 'rm removes files.'),
        base_score=100,
    )


@pytest.fixture
def archive_mission():
    return Mission(
        id='archive-logs',
        title='Backup',
        objective='Archive /var/log into /tmp/logs.tar.gz and install git.',
        build_filesystem=disk_space_tree,
        check_win_condition=lambda state: (
            lookup(state.file_system, '/tmp/logs.tar.gz') is not None
            and 'git' in state.installed_packages
        ),
        initial_directory='/var/log',
        packages=('git', 'tar'),
    )


@pytest.fixture
def session(disk_mission):
    return TerminalSession(disk_mission)


class TestExecute:

    def test_input_is_echoed_with_prompt(self, session):
        session.execute('pwd')
        history = session.state.output_history
        assert history[0].text == 'user@terminal-quest:/home/user$ pwd'
        assert history[0].kind is LineKind.INPUT
        assert history[1].text == '/home/user'

    def test_command_history_records_trimmed_input(self, session):
        session.execute('  ls  ')
        session.execute('')
        assert session.state.command_history == ('ls',)

    def test_prompt_follows_cwd(self, session):
        session.execute('cd /var/log')
        assert session.get_prompt() == 'user@terminal-quest:/var/log$ '

    def test_custom_prompt(self, disk_mission):
        session = TerminalSession(disk_mission, TerminalConfig(user='root', hostname='box'))
        assert session.get_prompt() == 'root@box:/home/user$ '

    def test_clear_drops_everything(self, session):
        session.execute('ls')
        session.execute('pwd')
        session.execute('clear')
        assert session.state.output_history == ()
        assert session.state.command_history[-1] == 'clear'

    def test_history_command_sees_earlier_commands(self, session):
        session.execute('pwd')
        result = session.execute('history')
        assert result.lines() == ['  1  pwd']

    def test_result_is_returned(self, session):
        result = session.execute('cat /nope')
        assert result.has_errors


class TestHints:

    def test_hints_in_order(self, session):
        first = session.execute('hint')
        second = session.execute('hint')
        assert first.lines() == ['Hint 1/2: Use du -h /var/log to find big files.']
        assert second.lines() == ['Hint 2/2: rm removes files.']
        assert session.hints_used == 2

    def test_exhausted(self, session):
        for _ in range(2):
            session.execute('hint')
        assert session.execute('hint').lines() == ['No more hints available.']
        assert session.hints_used == 2

    def test_max_hints_caps_reveals(self):
        mission = Mission(
            id='capped',
            title='Capped',
            objective='Nothing to do.',
            description='A mission that only gives one hint away.',
            build_filesystem=disk_space_tree,
            check_win_condition=lambda state: False,
            hints=('first', 'second', 'third'),
            max_hints=1,
        )
        session = TerminalSession(mission)
        assert session.execute('hint').lines() == ['Hint 1/1: first']
        assert session.execute('hint').lines() == ['No more hints available.']
        assert session.execute('hint').lines() == ['No more hints available.']
        assert session.hints_used == 1

    def test_no_cap_by_default(self, disk_mission):
        assert disk_mission.max_hints is None
        assert disk_mission.hint_limit == 2

    def test_hint_is_recorded(self, session):
        session.execute('hint')
        assert session.state.command_history == ('hint',)
        assert session.state.output_history[-1].kind is LineKind.INFO


class TestMissions:

    def test_disk_space_mission(self, session, caplog):
        session.execute('du -h /var/log')
        assert not session.completed

        with caplog.at_level(logging.INFO, logger='termquest.terminal'):
            session.execute('rm /var/log/huge.log')

        assert session.completed
        assert any('disk-space' in record.getMessage() for record in caplog.records)

    def test_completed_stays_true(self, session):
        session.execute('rm /var/log/huge.log')
        session.execute('rm /var/log/app.log')
        assert session.completed

    def test_archive_mission(self, archive_mission):
        session = TerminalSession(archive_mission)
        assert session.state.current_directory == '/var/log'

        session.execute('tar -czf /tmp/logs.tar.gz .')
        assert not session.completed
        assert session.execute('apt install nginx').lines() == ['E: Unable to locate package nginx']
        session.execute('apt install git')
        assert session.completed

    def test_each_attempt_gets_a_fresh_tree(self, disk_mission):
        first = TerminalSession(disk_mission)
        second = TerminalSession(disk_mission)
        first.execute('rm /var/log/huge.log')
        assert lookup(second.state.file_system, '/var/log/huge.log') is not None

    def test_restart(self, session):
        session.execute('hint')
        session.execute('rm /var/log/huge.log')
        session.restart()
        assert not session.completed
        assert session.hints_used == 0
        assert session.state.command_history == ()
        assert lookup(session.state.file_system, '/var/log/huge.log') is not None


class TestEditorAndCompletion:

    def test_edit_and_save(self, session):
        session.execute('nano todo.txt')
        assert session.state.editing_file == '/home/user/todo.txt'

        result = session.save_editor('buy milk\n')
        assert result.lines() == ['File saved: /home/user/todo.txt']
        assert lookup(session.state.file_system, '/home/user/todo.txt').content == 'buy milk\n'
        assert session.state.output_history[-1].kind is LineKind.SUCCESS

        session.close_editor()
        assert session.state.editing_file is None

    def test_saving_can_win(self):
        mission = Mission(
            id='config',
            title='Config',
            objective='Set debug to false.',
            build_filesystem=disk_space_tree,
            check_win_condition=lambda state: 'debug: false' in getattr(
                lookup(state.file_system, '/home/user/app.yml'), 'content', ''),
        )
        session = TerminalSession(mission)
        session.execute('vim app.yml')
        session.save_editor('debug: false\n')
        assert session.completed

    def test_complete(self, session):
        assert session.complete('cd /var/l') == 'cd /var/log/'


class TestWithoutMission:

    def test_plain_session(self):
        session = TerminalSession()
        session.execute('mkdir projects')
        assert lookup(session.state.file_system, '/home/user/projects') is not None
        assert not session.completed
        assert session.execute('hint').lines() == ['No more hints available.']
