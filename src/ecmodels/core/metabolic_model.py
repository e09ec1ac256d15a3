# -*- coding: utf-8 -*-
r"""
MetabolicModel defines the query surface shared by all :mod:`ecmodels` models.

A :class:`MetabolicModel` describes a flux balance problem

.. math::

    \max_{v} c^T v \quad \text{s.t.} \quad S v = b,\ lb \le v \le ub,\
    c_l \le C v \le c_u

through a fixed set of query methods. Analysis code (solvers, samplers,
variability analysis) is expected to use only these methods, so that any
model, including a transformed one, can be passed to it.

The :class:`ModelWrapper` holds another model and forwards every query to it.
Subclasses override only the queries they change, which allows layering
transformations on top of a model without modifying it; see
:class:`~.EnzymeConstrainedModel` for an example.

Notes
-----
* All vectors are returned as :class:`numpy.ndarray` and all matrices as
  :class:`scipy.sparse.csr_matrix`.
* Reactions are the variables (columns) of the problem and metabolites the
  mass balance rows. Coupling rows are additional linear constraints.

"""
import numpy as np
from scipy.sparse import identity

from ecmodels.util.matrix import empty_matrix


class MetabolicModel:
    """Base class of all models exposing the model query surface.

    Subclasses must implement :meth:`reactions`, :meth:`metabolites`,
    :meth:`stoichiometry`, :meth:`bounds` and :meth:`objective`; all other
    queries have defaults describing a model without genes and without
    coupling constraints.

    """

    def reactions(self):
        """Return a ``list`` of reaction identifiers."""
        raise NotImplementedError(
            "{0} does not implement reactions".format(type(self).__name__)
        )

    def n_reactions(self):
        """Return the number of reactions."""
        return len(self.reactions())

    def metabolites(self):
        """Return a ``list`` of metabolite identifiers."""
        raise NotImplementedError(
            "{0} does not implement metabolites".format(type(self).__name__)
        )

    def n_metabolites(self):
        """Return the number of metabolites."""
        return len(self.metabolites())

    def genes(self):
        """Return a ``list`` of gene identifiers."""
        return []

    def n_genes(self):
        """Return the number of genes."""
        return len(self.genes())

    def stoichiometry(self):
        """Return the stoichiometric matrix.

        Returns
        -------
        scipy.sparse.csr_matrix
            Matrix of shape ``(n_metabolites, n_reactions)``.

        """
        raise NotImplementedError(
            "{0} does not implement stoichiometry".format(type(self).__name__)
        )

    def bounds(self):
        """Return the reaction flux bounds.

        Returns
        -------
        tuple of numpy.ndarray
            The ``(lower, upper)`` bound vectors, one entry per reaction.

        """
        raise NotImplementedError(
            "{0} does not implement bounds".format(type(self).__name__)
        )

    def balance(self):
        """Return the right-hand side of the mass balance ``S v = b``."""
        return np.zeros(self.n_metabolites())

    def objective(self):
        """Return the linear objective coefficients, one per reaction."""
        raise NotImplementedError(
            "{0} does not implement objective".format(type(self).__name__)
        )

    def coupling(self):
        """Return the coupling matrix.

        Returns
        -------
        scipy.sparse.csr_matrix
            Matrix of shape ``(n_coupling_constraints, n_reactions)``.

        """
        return empty_matrix(0, self.n_reactions())

    def n_coupling_constraints(self):
        """Return the number of coupling constraints."""
        return 0

    def coupling_bounds(self):
        """Return the ``(lower, upper)`` bound vectors of the coupling rows."""
        return (np.zeros(0), np.zeros(0))

    def fluxes(self):
        """Return a ``list`` of identifiers of the fluxes of the model.

        Fluxes are the quantities of biological interest, which may differ
        from the reactions (the variables) in transformed models.
        """
        return self.reactions()

    def n_fluxes(self):
        """Return the number of fluxes."""
        return len(self.fluxes())

    def reaction_flux(self):
        """Return the mapping of reactions to fluxes.

        Fluxes are computed from a reaction solution ``x`` as
        ``reaction_flux().T @ x``.

        Returns
        -------
        scipy.sparse.csr_matrix
            Matrix of shape ``(n_reactions, n_fluxes)``.

        """
        return identity(self.n_reactions(), dtype=np.float64, format="csr")

    def __repr__(self):
        """Override default :func:`repr` for the MetabolicModel.

        Warnings
        --------
        This method is intended for internal use only.

        """
        return "<{0} with {1} reactions, {2} metabolites at 0x0{3:x}>".format(
            type(self).__name__, self.n_reactions(), self.n_metabolites(), id(self)
        )


class ModelWrapper(MetabolicModel):
    """Model that forwards all queries to a wrapped inner model.

    Parameters
    ----------
    inner : MetabolicModel
        The wrapped model. It is referenced, never copied nor modified.

    """

    def __init__(self, inner):
        """Initialize the ModelWrapper."""
        if not isinstance(inner, MetabolicModel):
            raise TypeError("inner must be a MetabolicModel")
        self._inner = inner

    @property
    def inner(self):
        """Return the wrapped model."""
        return self._inner

    def reactions(self):
        """Return the reactions of the inner model."""
        return self._inner.reactions()

    def n_reactions(self):
        """Return the number of reactions of the inner model."""
        return self._inner.n_reactions()

    def metabolites(self):
        """Return the metabolites of the inner model."""
        return self._inner.metabolites()

    def n_metabolites(self):
        """Return the number of metabolites of the inner model."""
        return self._inner.n_metabolites()

    def genes(self):
        """Return the genes of the inner model."""
        return self._inner.genes()

    def n_genes(self):
        """Return the number of genes of the inner model."""
        return self._inner.n_genes()

    def stoichiometry(self):
        """Return the stoichiometric matrix of the inner model."""
        return self._inner.stoichiometry()

    def bounds(self):
        """Return the reaction bounds of the inner model."""
        return self._inner.bounds()

    def balance(self):
        """Return the mass balance right-hand side of the inner model."""
        return self._inner.balance()

    def objective(self):
        """Return the objective of the inner model."""
        return self._inner.objective()

    def coupling(self):
        """Return the coupling matrix of the inner model."""
        return self._inner.coupling()

    def n_coupling_constraints(self):
        """Return the number of coupling constraints of the inner model."""
        return self._inner.n_coupling_constraints()

    def coupling_bounds(self):
        """Return the coupling bounds of the inner model."""
        return self._inner.coupling_bounds()

    def fluxes(self):
        """Return the fluxes of the inner model."""
        return self._inner.fluxes()

    def n_fluxes(self):
        """Return the number of fluxes of the inner model."""
        return self._inner.n_fluxes()

    def reaction_flux(self):
        """Return the reaction to flux mapping of the inner model."""
        return self._inner.reaction_flux()


def unwrap_model(model):
    """Return the innermost model below any number of :class:`ModelWrapper`.

    Parameters
    ----------
    model : MetabolicModel
        The (possibly wrapped) model.

    """
    while isinstance(model, ModelWrapper):
        model = model.inner

    return model


__all__ = (
    "MetabolicModel",
    "ModelWrapper",
    "unwrap_model",
)
