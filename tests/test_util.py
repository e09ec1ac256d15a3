# -*- coding: utf-8 -*-
"""Unit tests for the utility functions."""
import logging
import unittest

from ecmodels.util import as_lookup, ensure_non_negative_value
from ecmodels.util.util import ColorFormatter, _make_logger


class TestUtil(unittest.TestCase):
    def test_ensure_non_negative_value(self):
        self.assertIsNone(ensure_non_negative_value(None))
        self.assertEqual(ensure_non_negative_value(0), 0)
        self.assertEqual(ensure_non_negative_value(2.5, exclude_zero=True), 2.5)
        with self.assertRaises(ValueError):
            ensure_non_negative_value(0.0, exclude_zero=True)
        with self.assertRaises(ValueError):
            ensure_non_negative_value(-1)
        with self.assertRaises(ValueError):
            ensure_non_negative_value(float("nan"))
        self.assertEqual(ensure_non_negative_value(float("inf")), float("inf"))
        with self.assertRaises(TypeError):
            ensure_non_negative_value(True)
        with self.assertRaises(TypeError):
            ensure_non_negative_value("1")

    def test_as_lookup(self):
        self.assertIsNone(as_lookup(None)("g1"))
        lookup = as_lookup({"g1": 1.0})
        self.assertEqual(lookup("g1"), 1.0)
        self.assertIsNone(lookup("g2"))
        self.assertEqual(as_lookup(str.upper)("g1"), "G1")
        with self.assertRaises(TypeError):
            as_lookup(["g1"], "gene_product_molar_mass")

    def test_logger(self):
        logger = _make_logger("ecmodels.test")
        self.assertTrue(
            any(isinstance(h.formatter, ColorFormatter) for h in logger.handlers)
        )
        record = logging.LogRecord(
            "ecmodels.test", logging.WARNING, __file__, 1, "message", None, None
        )
        self.assertIn("message", ColorFormatter("%(message)s").format(record))
