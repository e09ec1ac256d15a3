# -*- coding: utf-8 -*-
"""
CobraModel exposes a :class:`cobra.Model <cobra.core.model.Model>`.

The :class:`CobraModel` is a thin read-only adapter: every query is computed
from the current state of the wrapped :mod:`cobra` model, which is never
modified. It allows models loaded or built with :mod:`cobra` (e.g. through
:func:`cobra.io.read_sbml_model`) to be transformed by :mod:`ecmodels`.
"""
import numpy as np
from cobra.core.model import Model
from cobra.util.array import create_stoichiometric_matrix
from cobra.util.solver import linear_reaction_coefficients

from ecmodels.core.metabolic_model import MetabolicModel
from ecmodels.util.matrix import as_sparse


class CobraModel(MetabolicModel):
    """Read-only model query surface over a :mod:`cobra` model.

    Parameters
    ----------
    cobra_model : cobra.Model
        The model to expose.

    """

    def __init__(self, cobra_model):
        """Initialize the CobraModel."""
        if not isinstance(cobra_model, Model):
            raise TypeError("cobra_model must be a cobra.Model")
        self._model = cobra_model

    @property
    def model(self):
        """Return the wrapped :class:`cobra.Model`."""
        return self._model

    def reactions(self):
        """Return a ``list`` of reaction identifiers."""
        return [r.id for r in self._model.reactions]

    def n_reactions(self):
        """Return the number of reactions."""
        return len(self._model.reactions)

    def metabolites(self):
        """Return a ``list`` of metabolite identifiers."""
        return [m.id for m in self._model.metabolites]

    def n_metabolites(self):
        """Return the number of metabolites."""
        return len(self._model.metabolites)

    def genes(self):
        """Return a ``list`` of gene identifiers."""
        return [g.id for g in self._model.genes]

    def n_genes(self):
        """Return the number of genes."""
        return len(self._model.genes)

    def stoichiometry(self):
        """Return the stoichiometric matrix of the :mod:`cobra` model."""
        if not self._model.reactions:
            return as_sparse(np.zeros((self.n_metabolites(), 0)))
        return as_sparse(create_stoichiometric_matrix(self._model, array_type="lil"))

    def bounds(self):
        """Return the ``(lower, upper)`` reaction bounds."""
        lb = np.array([r.lower_bound for r in self._model.reactions], dtype=float)
        ub = np.array([r.upper_bound for r in self._model.reactions], dtype=float)
        return (lb, ub)

    def objective(self):
        """Return the linear objective coefficients of the reactions.

        Non-linear parts of the :mod:`cobra` objective are ignored.
        """
        c = np.zeros(self.n_reactions())
        index = self._model.reactions.index
        for reaction, coefficient in linear_reaction_coefficients(self._model).items():
            c[index(reaction)] = coefficient
        return c


__all__ = ("CobraModel",)
