"""
tests/fpe_core/test_errors.py
Tests de la jerarquía de excepciones.
"""
import unittest

from fpe_core.errors import ConsListError, EmptyListError


class TestErrors(unittest.TestCase):

    def test_hierarchy(self):
        err = EmptyListError("head")
        self.assertIsInstance(err, ConsListError)
        self.assertIsInstance(err, IndexError)

    def test_default_message_names_operation(self):
        err = EmptyListError("reduce")
        self.assertEqual(err.operation, "reduce")
        self.assertEqual(str(err), "reduce() of empty list")

    def test_custom_message(self):
        err = EmptyListError("head", "nothing here")
        self.assertEqual(str(err), "nothing here")
        self.assertEqual(err.operation, "head")


if __name__ == '__main__':
    unittest.main()
