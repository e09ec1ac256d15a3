# -*- coding: utf-8 -*-
"""
Contains the assembly of the coupling blocks of a split model.

The enzyme constraints of a split model are expressed purely as coupling
rows; the gene products act as "virtual metabolites" which never appear in
the stoichiometric matrix. Three blocks are built from the split columns:

    * The reaction arm block, with one row per split reaction holding the
      column directions, bounded by the bounds of the original reaction.
    * The gene product block, with one row per referenced gene holding the
      gene product use of each column, bounded by the gene product
      concentration bounds.
    * The mass group block, with one row per mass group holding the protein
      mass use of each column, bounded by ``(0, budget)``.

The coupling of a split model stacks the coupling of the inner model
(expressed over the columns), the arm block, the gene product block and the
mass group block, always in this order.
"""
import numpy as np
from scipy.sparse import vstack

from ecmodels.core.configuration import EcConfiguration
from ecmodels.exceptions import InvalidBounds, MissingGeneProductBounds
from ecmodels.enzymes.splitting import REVERSE
from ecmodels.util.matrix import sparse_from_triplets


ECCONFIGURATION = EcConfiguration()


def column_reactions(columns, n_reactions):
    """Return the signed incidence of original reactions and columns.

    The entry of a reaction and one of its columns is ``-1`` for reverse
    columns and ``1`` otherwise, so that the original fluxes are
    ``column_reactions(...) @ x`` for a column flux vector ``x``.

    Parameters
    ----------
    columns : list
        The :class:`~.EnzymeColumn`\\ s.
    n_reactions : int
        The number of reactions of the inner model.

    Returns
    -------
    scipy.sparse.csr_matrix
        Matrix of shape ``(n_reactions, len(columns))``.

    """
    return sparse_from_triplets(
        [col.reaction_index for col in columns],
        range(len(columns)),
        [-1.0 if col.direction == REVERSE else 1.0 for col in columns],
        (n_reactions, len(columns)),
    )


def reaction_coupling(columns, n_rows):
    """Return the reaction arm coupling block.

    Parameters
    ----------
    columns : list
        The :class:`~.EnzymeColumn`\\ s.
    n_rows : int
        The number of arm coupling rows.

    Returns
    -------
    scipy.sparse.csr_matrix
        Matrix of shape ``(n_rows, len(columns))``.

    """
    split = [(j, col) for j, col in enumerate(columns) if col.direction != 0]
    return sparse_from_triplets(
        [col.reaction_coupling_row for _, col in split],
        [j for j, _ in split],
        [col.direction for _, col in split],
        (n_rows, len(columns)),
    )


def gene_product_coupling(columns, n_rows):
    """Return the gene product coupling block.

    Parameters
    ----------
    columns : list
        The :class:`~.EnzymeColumn`\\ s.
    n_rows : int
        The number of gene product rows.

    Returns
    -------
    scipy.sparse.csr_matrix
        Matrix of shape ``(n_rows, len(columns))``.

    """
    return _block(columns, "gene_product_coupling", n_rows)


def mass_group_coupling(columns, n_rows):
    """Return the mass group coupling block.

    Parameters
    ----------
    columns : list
        The :class:`~.EnzymeColumn`\\ s.
    n_rows : int
        The number of mass group rows.

    Returns
    -------
    scipy.sparse.csr_matrix
        Matrix of shape ``(n_rows, len(columns))``.

    """
    return _block(columns, "mass_group_coupling", n_rows)


def gene_product_rows(gene_products, gene_product_bounds, policy=None):
    """Attach concentration bounds to the gene product rows.

    Parameters
    ----------
    gene_products : iterable of str
        The gene identifiers of the gene product rows, in row order.
    gene_product_bounds : callable
        A function returning the ``(lower, upper)`` concentration bounds of
        a gene, or ``None``.
    policy : str
        What to do with genes without bounds: ``"unbounded"`` gives them
        the bounds ``(0, inf)``, ``"error"`` raises. If ``None``, the value
        of :attr:`.EcConfiguration.missing_gene_product_bounds` is used.

    Returns
    -------
    tuple
        The ``(gene, (lower, upper))`` pairs, in row order.

    Raises
    ------
    MissingGeneProductBounds
        Occurs with the ``"error"`` policy if a gene has no bounds.
    InvalidBounds
        Occurs if the lower bound of a gene exceeds its upper bound.

    """
    if policy is None:
        policy = ECCONFIGURATION.missing_gene_product_bounds

    rows = []
    for gene in gene_products:
        bounds = gene_product_bounds(gene)
        if bounds is None:
            if policy == "error":
                raise MissingGeneProductBounds(
                    "No concentration bounds for gene product '{0}'".format(gene)
                )
            if policy != "unbounded":
                raise ValueError("Unrecognized policy '{0}'".format(policy))
            bounds = (0.0, float("inf"))

        lb, ub = (float(b) for b in bounds)
        if not lb <= ub:
            raise InvalidBounds(
                "Gene product '{0}' has bounds ({1}, {2})".format(gene, lb, ub)
            )
        rows.append((gene, (lb, ub)))

    return tuple(rows)


def stack_coupling(inner_coupling, column_incidence, blocks):
    """Stack the inner coupling and the enzyme coupling blocks.

    Parameters
    ----------
    inner_coupling : scipy.sparse.spmatrix
        The coupling of the inner model over the original reactions.
    column_incidence : scipy.sparse.spmatrix
        The matrix returned by :func:`column_reactions`.
    blocks : list
        The arm, gene product and mass group blocks, in this order.

    Returns
    -------
    scipy.sparse.csr_matrix
        The stacked coupling over the columns.

    """
    parts = [inner_coupling @ column_incidence] + list(blocks)
    return vstack(parts, format="csr", dtype=np.float64)


def stack_coupling_bounds(
    inner_bounds, reaction_bounds, gene_product_rows, mass_group_rows
):
    """Stack the coupling bounds in the order of :func:`stack_coupling`.

    Parameters
    ----------
    inner_bounds : tuple
        The ``(lower, upper)`` coupling bounds of the inner model.
    reaction_bounds : tuple
        The ``(lower, upper)`` bounds of the original reactions of the arm
        coupling rows.
    gene_product_rows : list
        The ``(gene, (lower, upper))`` pairs of the gene product rows.
    mass_group_rows : list
        The ``(group, budget)`` pairs of the mass group rows.

    Returns
    -------
    tuple of numpy.ndarray
        The stacked ``(lower, upper)`` bounds.

    """
    lower = np.concatenate(
        [
            np.asarray(inner_bounds[0], dtype=np.float64),
            np.asarray(reaction_bounds[0], dtype=np.float64),
            np.array([lb for _, (lb, _) in gene_product_rows], dtype=np.float64),
            np.zeros(len(mass_group_rows)),
        ]
    )
    upper = np.concatenate(
        [
            np.asarray(inner_bounds[1], dtype=np.float64),
            np.asarray(reaction_bounds[1], dtype=np.float64),
            np.array([ub for _, (_, ub) in gene_product_rows], dtype=np.float64),
            np.array([budget for _, budget in mass_group_rows], dtype=np.float64),
        ]
    )
    return (lower, upper)


def _block(columns, attribute, n_rows):
    """Build a coupling block from the ``(row, coefficient)`` pairs of columns.

    Warnings
    --------
    This method is intended for internal use only.

    """
    rows, cols, values = [], [], []
    for j, col in enumerate(columns):
        for row, coefficient in getattr(col, attribute):
            rows.append(row)
            cols.append(j)
            values.append(coefficient)

    return sparse_from_triplets(rows, cols, values, (n_rows, len(columns)))


__all__ = (
    "column_reactions",
    "reaction_coupling",
    "gene_product_coupling",
    "mass_group_coupling",
    "gene_product_rows",
    "stack_coupling",
    "stack_coupling_bounds",
)
