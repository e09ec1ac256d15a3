# -*- coding: utf-8 -*-
"""
CoreModel is a matrix-backed implementation of the model query surface.

The :class:`CoreModel` stores the stoichiometric matrix, the mass balance
right-hand side, the objective and the reaction bounds directly, together with
the identifiers of the reactions, metabolites and genes. It is the natural
container for models loaded from matrix files, and any
:class:`~.MetabolicModel` can be converted to it with
:meth:`CoreModel.from_model`.

The :class:`CoreModelCoupled` wraps a model and adds coupling constraints
``cl <= C v <= cu`` to it.

All data is copied on construction and every accessor returns a copy, so
neither class can be modified after construction.
"""
import numpy as np

from ecmodels.core.metabolic_model import MetabolicModel, ModelWrapper
from ecmodels.util.matrix import as_sparse


class CoreModel(MetabolicModel):
    """Class representation of a model given by its matrices.

    Parameters
    ----------
    S : array-like
        The stoichiometric matrix of shape ``(n_metabolites, n_reactions)``.
    b : array-like
        The mass balance right-hand side, one entry per metabolite.
    c : array-like
        The objective coefficients, one entry per reaction.
    lb : array-like
        The reaction lower bounds.
    ub : array-like
        The reaction upper bounds.
    reactions : iterable of str
        The reaction identifiers.
    metabolites : iterable of str
        The metabolite identifiers.
    genes : iterable of str
        The gene identifiers. Default is no genes.

    Raises
    ------
    ValueError
        Occurs if the dimensions of the inputs do not agree, or if the
        identifiers are not unique.

    """

    def __init__(self, S, b, c, lb, ub, reactions, metabolites, genes=None):
        """Initialize the CoreModel."""
        self._S = as_sparse(S)
        self._b = _as_vector(b, "b")
        self._c = _as_vector(c, "c")
        self._lb = _as_vector(lb, "lb")
        self._ub = _as_vector(ub, "ub")
        self._reactions = _as_ids(reactions, "reactions")
        self._metabolites = _as_ids(metabolites, "metabolites")
        self._genes = _as_ids(genes or [], "genes")

        n_mets, n_rxns = self._S.shape
        if len(self._reactions) != n_rxns:
            raise ValueError(
                "S has {0} columns for {1} reactions".format(
                    n_rxns, len(self._reactions)
                )
            )
        if len(self._metabolites) != n_mets:
            raise ValueError(
                "S has {0} rows for {1} metabolites".format(
                    n_mets, len(self._metabolites)
                )
            )
        if len(self._b) != n_mets:
            raise ValueError("b must have one entry per metabolite")
        for name, vector in (("c", self._c), ("lb", self._lb), ("ub", self._ub)):
            if len(vector) != n_rxns:
                raise ValueError("{0} must have one entry per reaction".format(name))

    @classmethod
    def from_model(cls, model):
        """Create a :class:`CoreModel` holding the data of any model.

        Coupling constraints of ``model`` are not transferred; use
        :class:`CoreModelCoupled` to keep them.

        Parameters
        ----------
        model : MetabolicModel
            The model to convert.

        """
        if not isinstance(model, MetabolicModel):
            raise TypeError("model must be a MetabolicModel")
        lb, ub = model.bounds()
        return cls(
            model.stoichiometry(),
            model.balance(),
            model.objective(),
            lb,
            ub,
            model.reactions(),
            model.metabolites(),
            model.genes(),
        )

    def reactions(self):
        """Return a ``list`` of reaction identifiers."""
        return list(self._reactions)

    def n_reactions(self):
        """Return the number of reactions."""
        return len(self._reactions)

    def metabolites(self):
        """Return a ``list`` of metabolite identifiers."""
        return list(self._metabolites)

    def n_metabolites(self):
        """Return the number of metabolites."""
        return len(self._metabolites)

    def genes(self):
        """Return a ``list`` of gene identifiers."""
        return list(self._genes)

    def stoichiometry(self):
        """Return a copy of the stoichiometric matrix."""
        return self._S.copy()

    def bounds(self):
        """Return copies of the ``(lower, upper)`` reaction bounds."""
        return (self._lb.copy(), self._ub.copy())

    def balance(self):
        """Return a copy of the mass balance right-hand side."""
        return self._b.copy()

    def objective(self):
        """Return a copy of the objective coefficients."""
        return self._c.copy()


class CoreModelCoupled(ModelWrapper):
    """Model wrapper adding coupling constraints ``cl <= C v <= cu``.

    Coupling constraints of the inner model are replaced by the given ones.

    Parameters
    ----------
    inner : MetabolicModel
        The model to add the coupling to.
    C : array-like
        The coupling matrix of shape ``(n_couplings, n_reactions)``.
    cl : array-like
        The lower bounds of the coupling rows.
    cu : array-like
        The upper bounds of the coupling rows.

    """

    def __init__(self, inner, C, cl, cu):
        """Initialize the CoreModelCoupled."""
        super(CoreModelCoupled, self).__init__(inner)
        self._C = as_sparse(C)
        self._cl = _as_vector(cl, "cl")
        self._cu = _as_vector(cu, "cu")

        n_rows, n_cols = self._C.shape
        if n_cols != inner.n_reactions():
            raise ValueError("C must have one column per reaction")
        if len(self._cl) != n_rows or len(self._cu) != n_rows:
            raise ValueError("cl and cu must have one entry per coupling row")
        if np.any(self._cl > self._cu):
            raise ValueError("cl must not exceed cu")

    def coupling(self):
        """Return a copy of the coupling matrix."""
        return self._C.copy()

    def n_coupling_constraints(self):
        """Return the number of coupling constraints."""
        return self._C.shape[0]

    def coupling_bounds(self):
        """Return copies of the ``(lower, upper)`` coupling bounds."""
        return (self._cl.copy(), self._cu.copy())


def _as_vector(values, name):
    """Return ``values`` as a one-dimensional float array copy.

    Warnings
    --------
    This method is intended for internal use only.

    """
    vector = np.array(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError("{0} must be one-dimensional".format(name))
    return vector


def _as_ids(ids, name):
    """Return ``ids`` as a tuple of unique strings.

    Warnings
    --------
    This method is intended for internal use only.

    """
    ids = tuple(str(i) for i in ids)
    if len(set(ids)) != len(ids):
        raise ValueError("{0} identifiers must be unique".format(name))
    return ids


__all__ = (
    "CoreModel",
    "CoreModelCoupled",
)
