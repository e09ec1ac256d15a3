# -*- coding: utf-8 -*-
"""
Module containing functions for testing various :mod:`ecmodels` methods.

There are functions for creating the small pre-defined models used throughout
the test suite, either as :class:`~.CoreModel` or as :class:`cobra.Model`
objects, together with a matching isozyme catalogue and gene product data.

The :func:`solve_lp` function optimizes any :class:`~.MetabolicModel` with
:func:`scipy.optimize.linprog`, and is used to check that the constraints of
transformed models behave as expected.
"""
import numpy as np
from cobra import Metabolite, Model, Reaction
from scipy.optimize import linprog

from ecmodels import CoreModel, Isozyme


TEST_MODELS = {
    "linear": (
        ["EX_A", "R1", "EX_B"],
        ["A", "B"],
        [[1.0, -1.0, 0.0], [0.0, 1.0, -1.0]],
        [0.0, -10.0, 0.0],
        [10.0, 10.0, 1000.0],
    ),
    "branched": (
        ["EX_A", "R1", "R2", "EX_B"],
        ["A", "B"],
        [[1.0, -1.0, -1.0, 0.0], [0.0, 1.0, 1.0, -1.0]],
        [0.0, -10.0, 0.0, 0.0],
        [10.0, 10.0, 10.0, 1000.0],
    ),
}
"""dict: The reactions, metabolites, stoichiometry and bounds of test models.

Both models take up ``A`` through ``EX_A`` and maximize the export of ``B``
through ``EX_B``.
"""

GENE_PRODUCT_MOLAR_MASS = {"g1": 30.0, "g2": 10.0, "g3": 50.0}
"""dict: Molar masses of the gene products of the test catalogue."""

GENE_PRODUCT_MASS_GROUP = {"g1": "cytosol", "g2": "cytosol", "g3": "membrane"}
"""dict: Mass groups of the gene products of the test catalogue."""


def create_test_model(model_name):
    """Return a :class:`~.CoreModel` for testing.

    Parameters
    ----------
    model_name: str
        The name of the test model to create. Valid model names can be
        printed and viewed using the :func:`view_test_models` function.

    Returns
    -------
    CoreModel
        The created :class:`~.CoreModel`

    """
    try:
        reactions, metabolites, S, lb, ub = TEST_MODELS[model_name]
    except KeyError as e:
        raise ValueError(
            "Unrecognized value {0} for model_name. Value must be a str of one "
            "of the following {1}".format(e, str(set(TEST_MODELS)))
        )

    objective = np.zeros(len(reactions))
    objective[reactions.index("EX_B")] = 1.0
    return CoreModel(
        np.array(S),
        np.zeros(len(metabolites)),
        objective,
        lb,
        ub,
        reactions,
        metabolites,
        genes=sorted(GENE_PRODUCT_MOLAR_MASS),
    )


def create_test_catalogue(model_name):
    """Return the isozyme catalogue of a test model.

    Reaction ``R1`` has a single homodimeric isozyme catalyzing both
    directions. Reaction ``R2`` of the branched model has a heterodimer only
    catalyzing the forward direction and a monomer catalyzing both.
    """
    catalogue = {"R1": [Isozyme({"g1": 2}, kcat_forward=100.0, kcat_reverse=50.0)]}
    if model_name == "branched":
        catalogue["R2"] = [
            Isozyme({"g1": 1, "g2": 1}, kcat_forward=10.0),
            Isozyme({"g3": 1}, kcat_forward=20.0, kcat_reverse=5.0),
        ]
    return catalogue


def create_cobra_test_model():
    """Return the linear test model as a :class:`cobra.Model`."""
    model = Model("linear")
    met_a = Metabolite("A", compartment="c")
    met_b = Metabolite("B", compartment="c")

    ex_a = Reaction("EX_A", lower_bound=0.0, upper_bound=10.0)
    ex_a.add_metabolites({met_a: 1})
    r1 = Reaction("R1", lower_bound=-10.0, upper_bound=10.0)
    r1.add_metabolites({met_a: -1, met_b: 1})
    r1.gene_reaction_rule = "g1"
    ex_b = Reaction("EX_B", lower_bound=0.0, upper_bound=1000.0)
    ex_b.add_metabolites({met_b: -1})

    model.add_reactions([ex_a, r1, ex_b])
    model.objective = "EX_B"
    return model


def view_test_models():
    """Return the names of the test models that can be created."""
    return sorted(TEST_MODELS)


def solve_lp(model):
    """Maximize the objective of a model with :func:`scipy.optimize.linprog`.

    Parameters
    ----------
    model : MetabolicModel
        The model to optimize. Its coupling constraints are included.

    Returns
    -------
    tuple
        The optimal objective value and the optimal reaction flux vector.

    """
    S = model.stoichiometry().toarray()
    C = model.coupling().toarray()
    cl, cu = model.coupling_bounds()
    lb, ub = model.bounds()

    A_ub, b_ub = [], []
    for row, lower, upper in zip(C, cl, cu):
        if np.isfinite(upper):
            A_ub.append(row)
            b_ub.append(upper)
        if np.isfinite(lower):
            A_ub.append(-row)
            b_ub.append(-lower)

    result = linprog(
        -model.objective(),
        A_ub=np.array(A_ub) if A_ub else None,
        b_ub=np.array(b_ub) if b_ub else None,
        A_eq=S,
        b_eq=model.balance(),
        bounds=[_finite_or_none(bounds) for bounds in zip(lb, ub)],
        method="highs",
    )
    if result.status != 0:
        raise AssertionError("linprog failed: {0}".format(result.message))

    return -result.fun, result.x


def _finite_or_none(bounds):
    """Replace infinite bounds by ``None`` for :func:`scipy.optimize.linprog`."""
    return tuple(float(b) if np.isfinite(b) else None for b in bounds)


__all__ = (
    "TEST_MODELS",
    "GENE_PRODUCT_MOLAR_MASS",
    "GENE_PRODUCT_MASS_GROUP",
    "create_test_model",
    "create_test_catalogue",
    "create_cobra_test_model",
    "view_test_models",
    "solve_lp",
)
