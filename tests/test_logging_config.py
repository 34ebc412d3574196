import io
import json
import logging

import pytest

from networth.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_records_go_to_stream_as_json_lines(capsys, restore_root_logger):
    stream = io.StringIO()
    setup_logging('INFO', stream=stream)

    logging.getLogger('networth.test').info('Wrote net worth snapshot to %s', '/tmp/x.json')

    record = json.loads(stream.getvalue().strip())
    assert record['event'] == 'Wrote net worth snapshot to /tmp/x.json'
    assert record['level'] == 'info'
    assert record['logger'] == 'networth.test'
    assert capsys.readouterr().out == ''


def test_level_filters_and_third_party_loggers_are_quieted(restore_root_logger):
    stream = io.StringIO()
    setup_logging('warning', stream=stream)

    logging.getLogger('networth.test').info('hidden')
    assert stream.getvalue() == ''
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
