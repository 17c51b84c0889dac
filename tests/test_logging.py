"""Tests for logging configuration."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest
from klaw_adt import Result
from klaw_adt import _logging
from klaw_adt._logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_loggers() -> None:
    """Restore handlers, levels and propagation of the touched loggers."""
    root = logging.getLogger()
    package = logging.getLogger('klaw_adt')
    saved = [(lg, lg.handlers[:], lg.level, lg.propagate) for lg in (root, package)]
    yield
    for lg, handlers, level, propagate in saved:
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate
    _logging._handler = None


def _json_events(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.startswith('{')]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_emits_json_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG', json_output=True)

        get_logger('klaw_adt.test').info('Test message', extra_field='extra_value')

        events = _json_events(capsys.readouterr().err)
        assert len(events) == 1
        assert events[0]['event'] == 'Test message'
        assert events[0]['extra_field'] == 'extra_value'
        assert events[0]['level'] == 'info'
        assert events[0]['logger'] == 'klaw_adt.test'

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG', json_output=False)

        get_logger('klaw_adt.test').warning('Still logged')

        assert 'Still logged' in capsys.readouterr().err

    def test_host_handlers_are_kept(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)

        configure_logging(level='DEBUG')

        assert host_handler in root.handlers

    def test_reconfigure_replaces_own_handler(self) -> None:
        package = logging.getLogger('klaw_adt')
        before = len(package.handlers)

        configure_logging(level='DEBUG')
        configure_logging(level='INFO', json_output=False)

        assert len(package.handlers) == before + 1
        assert package.level == logging.INFO

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging(level='chatty')
        assert logging.getLogger('klaw_adt').level == logging.INFO


class TestLevelFiltering:
    """Tests for the stdlib level gate in front of library loggers."""

    def test_below_level_is_dropped(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='WARNING')

        get_logger('klaw_adt.test').debug('Hidden')

        assert _json_events(capsys.readouterr().err) == []

    def test_silent_until_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger('klaw_adt.test').debug('Hidden')

        assert 'Hidden' not in capsys.readouterr().err


class TestLibraryEvents:
    """Tests for events emitted by the library itself."""

    @pytest.mark.asyncio
    async def test_duplicate_settle_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG')

        def action(resolve, reject):
            resolve(1)
            resolve(2)

        result = await Result.from_callback(action)
        await asyncio.sleep(0)

        assert result.unwrap() == 1
        events = [e for e in _json_events(capsys.readouterr().err) if e['event'] == 'callback_already_settled']
        assert len(events) == 1
        assert events[0]['logger'] == 'klaw_adt.types.result'
        assert events[0]['ignored'] == 'Ok(value=2)'
