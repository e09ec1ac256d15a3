# -*- coding: utf-8 -*-
"""Unit tests for the analysis of enzyme-constrained flux vectors.

Purpose:
    To test that flux vectors over split reactions are translated into
    original fluxes, gene product amounts and mass group usage, and that the
    enzyme constraints limit the optimal solutions of a linear program as
    intended.
"""
import unittest

import numpy as np
import pandas as pd

from ecmodels import (
    CoreModel,
    Isozyme,
    gene_product_amounts,
    make_gecko_model,
    make_smoment_model,
    mass_group_usage,
    original_fluxes,
)
from tests import (
    GENE_PRODUCT_MASS_GROUP,
    GENE_PRODUCT_MOLAR_MASS,
    create_test_catalogue,
    create_test_model,
    solve_lp,
)


def _make_linear_gecko(budget, **kwargs):
    return make_gecko_model(
        create_test_model("linear"),
        create_test_catalogue("linear"),
        GENE_PRODUCT_MOLAR_MASS,
        gene_product_mass_group={"g1": "total"},
        gene_product_mass_group_bound={"total": budget},
        **kwargs
    )


class TestFluxAnalysis(unittest.TestCase):
    def setUp(self):
        self.model = make_gecko_model(
            create_test_model("branched"),
            create_test_catalogue("branched"),
            GENE_PRODUCT_MOLAR_MASS,
            gene_product_mass_group=GENE_PRODUCT_MASS_GROUP,
            gene_product_mass_group_bound={"cytosol": 100.0, "membrane": 50.0},
        )
        self.x = [5.0, 3.0, 1.0, 2.0, 1.0, 5.0]

    def test_original_fluxes(self):
        fluxes = original_fluxes(self.model, self.x)
        self.assertIsInstance(fluxes, pd.Series)
        self.assertEqual(list(fluxes.index), ["EX_A", "R1", "R2", "EX_B"])
        np.testing.assert_allclose(fluxes.values, [5.0, 2.0, 3.0, 5.0])

    def test_gene_product_amounts(self):
        amounts = gene_product_amounts(self.model, self.x)
        self.assertEqual(list(amounts.index), ["g1", "g2", "g3"])
        np.testing.assert_allclose(amounts.values, [0.3, 0.2, 0.05])

    def test_mass_group_usage(self):
        usage = mass_group_usage(self.model, self.x)
        self.assertEqual(list(usage.index), ["cytosol", "membrane"])
        np.testing.assert_allclose(usage.values, [11.0, 2.5])

    def test_invalid_flux_vector(self):
        with self.assertRaises(ValueError):
            original_fluxes(self.model, [1.0, 2.0])

    def test_plain_model(self):
        model = create_test_model("linear")
        fluxes = original_fluxes(model, [1.0, 1.0, 1.0])
        self.assertEqual(list(fluxes.index), ["EX_A", "R1", "EX_B"])


class TestOptimization(unittest.TestCase):
    def test_unconstrained(self):
        objective, _ = solve_lp(create_test_model("linear"))
        self.assertAlmostEqual(objective, 10.0, places=6)

    def test_mass_budget_limits_flux(self):
        model = _make_linear_gecko(3.0)
        objective, x = solve_lp(model)
        self.assertAlmostEqual(objective, 5.0, places=6)
        self.assertAlmostEqual(original_fluxes(model, x)["R1"], 5.0, places=6)
        self.assertLessEqual(mass_group_usage(model, x)["total"], 3.0 + 1e-6)

    def test_zero_mass_budget(self):
        model = _make_linear_gecko(0.0)
        objective, x = solve_lp(model)
        self.assertAlmostEqual(objective, 0.0, places=6)
        for j, column in enumerate(model.columns):
            if column.direction != 0:
                self.assertAlmostEqual(x[j], 0.0, places=6)

    def test_gene_product_bounds_limit_flux(self):
        model = _make_linear_gecko(100.0, gene_product_bounds={"g1": (0.0, 0.04)})
        objective, x = solve_lp(model)
        self.assertAlmostEqual(objective, 2.0, places=6)
        self.assertAlmostEqual(gene_product_amounts(model, x)["g1"], 0.04, places=6)

    def test_smoment_capacity(self):
        model = make_smoment_model(
            create_test_model("linear"),
            create_test_catalogue("linear"),
            GENE_PRODUCT_MOLAR_MASS,
            total_enzyme_capacity=3.0,
        )
        objective, _ = solve_lp(model)
        self.assertAlmostEqual(objective, 5.0, places=6)

    def test_branched_model(self):
        # R1 needs 0.6 cytosol mass per unit against 4.0 for the R2 heteromer
        # and 2.5 membrane mass for the R2 monomer
        model = make_gecko_model(
            create_test_model("branched"),
            create_test_catalogue("branched"),
            GENE_PRODUCT_MOLAR_MASS,
            gene_product_mass_group=GENE_PRODUCT_MASS_GROUP,
            gene_product_mass_group_bound={"cytosol": 3.0, "membrane": 2.5},
        )
        objective, x = solve_lp(model)
        self.assertAlmostEqual(objective, 6.0, places=6)
        fluxes = original_fluxes(model, x)
        self.assertAlmostEqual(fluxes["R1"], 5.0, places=6)
        self.assertAlmostEqual(fluxes["R2"], 1.0, places=6)

    def test_positive_lower_bound(self):
        # Export is minimized, so R1 runs at its lower bound
        inner = create_test_model("linear")
        model = make_gecko_model(
            CoreModel(
                inner.stoichiometry(),
                inner.balance(),
                -inner.objective(),
                [0.0, 2.0, 0.0],
                [10.0, 10.0, 1000.0],
                inner.reactions(),
                inner.metabolites(),
            ),
            {"R1": [Isozyme({"g1": 2}, kcat_forward=100.0)]},
            GENE_PRODUCT_MOLAR_MASS,
        )
        self.assertEqual(model.reactions(), ["EX_A", "R1#forward#1", "EX_B"])
        lb, ub = model.bounds()
        self.assertEqual((lb[1], ub[1]), (0.0, 10.0))
        cl, cu = model.coupling_bounds()
        self.assertEqual((cl[0], cu[0]), (2.0, 10.0))

        objective, x = solve_lp(model)
        self.assertAlmostEqual(objective, -2.0, places=6)
        self.assertAlmostEqual(original_fluxes(model, x)["R1"], 2.0, places=6)
        self.assertAlmostEqual(gene_product_amounts(model, x)["g1"], 0.04, places=6)
