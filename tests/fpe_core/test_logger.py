"""
tests/fpe_core/test_logger.py
Tests de la configuración de Logging.
"""
import logging
import os
import unittest
from unittest import mock

from fpe_core import config
from fpe_core.ds.list import ConsList
from fpe_core.logger import get_logger, logger, resolve_level, setup_logger


def own_handlers(target):
    """Handlers propios: el runner de tests puede añadir subclases suyas."""
    return [h for h in target.handlers if type(h) is logging.StreamHandler]


class TestLogger(unittest.TestCase):

    def test_package_logger_is_configured_once(self):
        """El runner puede añadir sus propios handlers: solo contamos los nuestros."""
        before = len(logger.handlers)
        again = setup_logger()
        self.assertIs(again, logger)
        self.assertEqual(len(logger.handlers), before)
        self.assertFalse(logger.propagate)

    def test_single_stdout_handler(self):
        custom = setup_logger("fpe_core_test_single")
        setup_logger("fpe_core_test_single")
        self.assertEqual(len(own_handlers(custom)), 1)

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {config.LOG_LEVEL_ENV: "warning"}):
            custom = setup_logger("fpe_core_test_env")
        self.assertEqual(custom.level, logging.WARNING)

    def test_explicit_level_wins(self):
        with mock.patch.dict(os.environ, {config.LOG_LEVEL_ENV: "ERROR"}):
            custom = setup_logger("fpe_core_test_explicit", level="DEBUG")
        self.assertEqual(custom.level, logging.DEBUG)

    def test_unknown_level_falls_back_to_default(self):
        default = logging.getLevelName(config.DEFAULT_LOG_LEVEL)
        for bogus in ("TRACE", "10", "verbose"):
            self.assertEqual(resolve_level(bogus), default)
        self.assertEqual(resolve_level(None), default)
        self.assertEqual(resolve_level("debug"), logging.DEBUG)

    def test_unknown_env_level_uses_default(self):
        """LOG_LEVEL=TRACE: misma ruta que la configuración al importar el paquete."""
        with mock.patch.dict(os.environ, {config.LOG_LEVEL_ENV: "TRACE"}):
            custom = setup_logger("fpe_core_test_trace")
        self.assertEqual(custom.level, logging.getLevelName(config.DEFAULT_LOG_LEVEL))
        self.assertEqual(len(own_handlers(custom)), 1)

    def test_child_logger_names(self):
        self.assertEqual(get_logger("fpe_core.ds.list").name, "fpe_core.ds.list")
        self.assertEqual(get_logger("ds.combinators").name, "fpe_core.ds.combinators")
        self.assertIs(get_logger("fpe_core"), logger)

    def test_clamping_is_logged(self):
        with self.assertLogs("fpe_core.ds.combinators", level="DEBUG") as captured:
            ConsList.of(1, 2).take(-1)
        self.assertIn("clamped", captured.output[0])

    def test_empty_head_is_logged(self):
        with self.assertLogs("fpe_core.ds.list", level="DEBUG") as captured:
            with self.assertRaises(IndexError):
                _ = ConsList.nil().head
        self.assertIn("head()", captured.output[0])


if __name__ == '__main__':
    unittest.main()
