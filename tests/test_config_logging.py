# -*- coding: utf-8 -*-
"""
Unit tests for configuration and logging.
"""

import logging

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestConfig:
    """Test configuration module."""

    def test_default_config_creation(self):
        from outranking_mcda import get_default_config

        config = get_default_config()
        assert config.tolerance.binary_tolerance == 1e-3
        assert config.tolerance.cut_tolerance == 1e-5
        assert config.tolerance.weight_bounds_tolerance == 1e-6
        assert config.sorting.sharp_vetoes is True
        assert config.sorting.default_mode == 'pessimistic'

    def test_save_and_load(self, tmp_path):
        from outranking_mcda import get_default_config, Config

        config = get_default_config()
        config.tolerance.cut_tolerance = 1e-4
        config.sorting.default_mode = 'both'
        config.logging.log_file = tmp_path / 'logs' / 'run.log'

        path = tmp_path / 'config.json'
        config.save(path)
        loaded = Config.load(path)

        assert loaded.tolerance.cut_tolerance == 1e-4
        assert loaded.sorting.default_mode == 'both'
        assert loaded.logging.log_file == tmp_path / 'logs' / 'run.log'
        assert loaded.to_dict() == config.to_dict()

    def test_partial_dict(self):
        from outranking_mcda import Config

        config = Config.from_dict({'sorting': {'sharp_vetoes': False}})
        assert config.sorting.sharp_vetoes is False
        assert config.tolerance.binary_tolerance == 1e-3

    def test_sorting_mode_parsed(self):
        from outranking_mcda import Config, SortingMode
        from outranking_mcda.config import SortingConfig

        assert Config.from_dict({'sorting': {'default_mode': 'BOTH'}}).sorting.default_mode == 'both'
        assert SortingConfig(default_mode=SortingMode.OPTIMISTIC).default_mode == 'optimistic'
        with pytest.raises(ValueError):
            SortingConfig(default_mode='median')

    def test_global_config(self):
        from outranking_mcda import get_config, set_config, reset_config, Config
        from outranking_mcda.config import ToleranceConfig

        set_config(Config(tolerance=ToleranceConfig(binary_tolerance=0.1)))
        assert get_config().tolerance.binary_tolerance == 0.1
        reset_config()
        assert get_config().tolerance.binary_tolerance == 1e-3

    def test_tolerance_reaches_calculators(self):
        from outranking_mcda import (
            set_config, Config, SortingAssigner, RelationMatrix, CatsAndProfs, Category)
        from outranking_mcda.config import ToleranceConfig

        relation = RelationMatrix.from_dict({'x': {'p': 0.95}, 'p': {'x': 0.0}})
        cats = CatsAndProfs(['bad', 'good'], ['p'])

        set_config(Config(tolerance=ToleranceConfig(binary_tolerance=0.1)))
        assert SortingAssigner().pessimistic(['x'], relation, cats).get('x') == Category('good')

    def test_sharp_vetoes_from_config(self):
        from outranking_mcda import set_config, Config, SortingFull
        from outranking_mcda.config import SortingConfig

        assert SortingFull().sharp_vetoes is True
        set_config(Config(sorting=SortingConfig(sharp_vetoes=False)))
        assert SortingFull().sharp_vetoes is False

    def test_summary(self):
        from outranking_mcda import get_default_config

        assert 'CONFIGURATION SUMMARY' in get_default_config().summary()


class TestLogging:
    """Test logging setup and helpers."""

    def test_module_logger_names(self):
        from outranking_mcda import get_module_logger

        logger = get_module_logger('sorting.full')
        assert logger.name == 'outranking_mcda.sorting.full'

    def test_library_is_silent_by_default(self):
        from outranking_mcda import get_logger

        assert get_logger().handlers == []

    def test_setup_with_file(self, tmp_path):
        from outranking_mcda import setup_logger, get_module_logger

        log_file = tmp_path / 'logs' / 'run.log'
        logger = setup_logger(level='WARNING', log_file=log_file, console=False)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)
        # File logging forces DEBUG on the package logger
        assert logger.level == logging.DEBUG

        get_module_logger('tests').debug('debug line')
        for handler in logger.handlers:
            handler.flush()
        assert 'debug line' in log_file.read_text(encoding='utf-8')

    def test_factory_with_colors(self):
        from outranking_mcda import LoggerFactory
        from outranking_mcda.logger import ColoredFormatter

        logger = LoggerFactory.setup(level='DEBUG', use_colors=True)
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)
        assert LoggerFactory.get_logger() is logger

    def test_setup_from_config(self):
        from outranking_mcda import setup_from_config, get_default_config

        config = get_default_config()
        config.logging.level = 'ERROR'
        logger = setup_from_config(config)
        assert logger.level == logging.ERROR
        assert len(logger.handlers) == 1

    def test_reset(self):
        from outranking_mcda import setup_logger, LoggerFactory

        logger = setup_logger(console=True)
        assert logger.handlers
        assert not logger.propagate

        LoggerFactory.reset()
        assert logger.handlers == []
        assert logger.propagate

    def test_timed_operation(self, caplog):
        from outranking_mcda import get_module_logger, timed_operation

        logger = get_module_logger('tests')
        with caplog.at_level(logging.INFO, logger='outranking_mcda'):
            with timed_operation(logger, 'distillation'):
                pass
        assert 'Starting: distillation' in caplog.text
        assert 'Finished: distillation' in caplog.text

    def test_log_execution(self, caplog):
        from outranking_mcda import get_module_logger, log_execution

        logger = get_module_logger('tests')

        @log_execution(logger, level=logging.INFO)
        def double(x):
            return 2 * x

        @log_execution(logger)
        def fail():
            raise ValueError("boom")

        with caplog.at_level(logging.DEBUG, logger='outranking_mcda'):
            assert double(4) == 8
            with pytest.raises(ValueError):
                fail()
        assert 'double completed' in caplog.text
        assert 'failed after' in caplog.text

    def test_colors_stripped(self):
        from outranking_mcda.logger import strip_ansi, ColoredFormatter

        red = ColoredFormatter.LEVEL_COLORS[logging.ERROR]
        assert strip_ansi(f"{red}alert\033[0m") == 'alert'

    def test_clean_formatter_drops_colors(self):
        from outranking_mcda.logger import CleanFormatter

        record = logging.LogRecord('outranking_mcda', logging.INFO, __file__, 1,
                                   "\033[32mdone\033[0m", None, None)
        assert CleanFormatter('%(message)s').format(record) == 'done'
        # The record itself keeps its codes for other handlers
        assert record.msg == "\033[32mdone\033[0m"

    def test_calculations_log_at_info(self, sorting_problem, caplog):
        from outranking_mcda import SortingFull

        with caplog.at_level(logging.INFO, logger='outranking_mcda'):
            SortingFull().pessimistic(sorting_problem)
        assert 'Sorted 4 alternatives into 3 categories (pessimistic)' in caplog.text
