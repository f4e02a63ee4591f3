import logging
import pytest

from maxvalues.logtools.infrastructure import (create_logfile_name,
                                               create_logging_infrastructure,
                                               finalize_logging_infrastructure,
                                               teardown_logging_infrastructure)


@pytest.fixture
def infrastructure():
    logger, streamhandler, memoryhandler = create_logging_infrastructure(
        level=logging.DEBUG
    )
    yield (logger, streamhandler, memoryhandler)
    teardown_logging_infrastructure(logger)


def test_create_logfile_name():
    assert create_logfile_name('2024-01-01') == '2024-01-01.log'
    assert create_logfile_name('2024-01-01', 'reduction') == 'reduction_2024-01-01.log'
    assert create_logfile_name().endswith('.log')


def test_infrastructure_attaches_handlers(infrastructure):
    logger, streamhandler, memoryhandler = infrastructure
    assert logger.name == 'main'
    assert streamhandler in logger.handlers
    assert memoryhandler in logger.handlers
    assert streamhandler.level == logging.ERROR


def test_buffered_records_reach_logfile(infrastructure, tmp_path):
    logger, _, memoryhandler = infrastructure
    child = logging.getLogger('main.test.infrastructure')
    child.debug('buffered before logfile is known')

    logfile = tmp_path / create_logfile_name(phase_prefix='test')
    filehandler = finalize_logging_infrastructure(logger, memoryhandler, logfile)
    child.info('written after finalization')
    filehandler.flush()

    assert memoryhandler not in logger.handlers
    content = logfile.read_text()
    assert 'buffered before logfile is known' in content
    assert 'written after finalization' in content


def test_finalize_without_logfile(infrastructure):
    logger, _, memoryhandler = infrastructure
    assert finalize_logging_infrastructure(logger, memoryhandler, None) is None
    assert memoryhandler not in logger.handlers


def test_teardown_removes_all_handlers():
    logger, *_ = create_logging_infrastructure(level=logging.INFO)
    teardown_logging_infrastructure(logger)
    assert logger.handlers == []
