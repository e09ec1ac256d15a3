# -*- coding: utf-8 -*-
"""Unit tests for Isozyme and the isozyme selection heuristic.

Purpose:
    To test that isozymes validate their data, cannot be changed through
    their accessors, and that the single isozyme heuristic picks the isozyme
    with the best ratio of turnover number to mass.
"""
import unittest

from ecmodels import Isozyme
from ecmodels.enzymes import isozyme_score, select_isozyme
from ecmodels.exceptions import MissingMolarMass


class TestIsozyme(unittest.TestCase):
    def setUp(self):
        self.isozyme = Isozyme({"g1": 2, "g2": 1}, kcat_forward=10.0)

    def test_properties(self):
        self.assertEqual(self.isozyme.gene_product_count, {"g1": 2, "g2": 1})
        self.assertEqual(self.isozyme.kcat_forward, 10.0)
        self.assertIsNone(self.isozyme.kcat_reverse)
        self.assertEqual(self.isozyme.kcat(1), 10.0)
        self.assertIsNone(self.isozyme.kcat(-1))
        with self.assertRaises(ValueError):
            self.isozyme.kcat(0)

    def test_gene_product_count_is_copy(self):
        counts = self.isozyme.gene_product_count
        counts["g3"] = 1
        self.assertNotIn("g3", self.isozyme.gene_product_count)

    def test_invalid_values(self):
        with self.assertRaises(TypeError):
            Isozyme([("g1", 1)])
        with self.assertRaises(ValueError):
            Isozyme({"g1": 0})
        with self.assertRaises(ValueError):
            Isozyme({"g1": -1})
        with self.assertRaises(TypeError):
            Isozyme({"g1": "one"})
        with self.assertRaises(ValueError):
            Isozyme({"g1": 1}, kcat_forward=-1.0)
        with self.assertRaises(TypeError):
            Isozyme({"g1": 1}, kcat_reverse="fast")
        with self.assertRaises(ValueError):
            Isozyme({"g1": 1}, kcat_forward=float("nan"))

    def test_equality(self):
        same = Isozyme({"g2": 1, "g1": 2}, kcat_forward=10.0)
        self.assertEqual(same, self.isozyme)
        self.assertEqual(hash(same), hash(self.isozyme))
        self.assertNotEqual(Isozyme({"g1": 2, "g2": 1}), self.isozyme)
        self.assertIn("kcat_forward=10.0", repr(self.isozyme))


class TestSelection(unittest.TestCase):
    def setUp(self):
        self.molar_mass = {"a": 10.0, "b": 10.0, "c": 5.0}.get

    def test_isozyme_score(self):
        self.assertAlmostEqual(
            isozyme_score(Isozyme({"a": 1}, kcat_forward=20.0), self.molar_mass), 2.0
        )
        # The faster direction is scored
        isozyme = Isozyme({"a": 1, "c": 2}, kcat_forward=4.0, kcat_reverse=40.0)
        self.assertAlmostEqual(isozyme_score(isozyme, self.molar_mass), 2.0)

    def test_isozyme_score_without_mass(self):
        self.assertEqual(
            isozyme_score(Isozyme({}, kcat_forward=1.0), self.molar_mass),
            float("inf"),
        )
        self.assertEqual(isozyme_score(Isozyme({}), self.molar_mass), 0.0)

    def test_missing_molar_mass(self):
        with self.assertRaises(MissingMolarMass):
            isozyme_score(Isozyme({"x": 1}, kcat_forward=1.0), self.molar_mass)

    def test_select_best(self):
        isozymes = [
            Isozyme({"a": 1}, kcat_forward=20.0),
            Isozyme({"b": 1}, kcat_forward=35.0),
        ]
        index, isozyme = select_isozyme(isozymes, self.molar_mass)
        self.assertEqual(index, 1)
        self.assertIs(isozyme, isozymes[1])

    def test_select_first_on_tie(self):
        isozymes = [
            Isozyme({"a": 1}, kcat_forward=20.0),
            Isozyme({"b": 1}, kcat_reverse=20.0),
        ]
        index, isozyme = select_isozyme(isozymes, self.molar_mass)
        self.assertEqual(index, 0)
        self.assertIs(isozyme, isozymes[0])

    def test_select_from_empty(self):
        self.assertIsNone(select_isozyme([], self.molar_mass))
