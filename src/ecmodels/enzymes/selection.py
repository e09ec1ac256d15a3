# -*- coding: utf-8 -*-
r"""
Contains the heuristic choosing one isozyme per reaction.

The single-isozyme (sMOMENT) strategy cannot represent several isozymes of
the same reaction. The heuristic keeps the isozyme that yields the most flux
per unit of enzyme mass, i.e. the one maximizing

.. math::

    \text{score} = \frac{\max(k_{cat}^{+}, k_{cat}^{-})}
    {\sum_{g} n_g \cdot M_g}

where :math:`n_g` is the count and :math:`M_g` the molar mass of each gene
product of the isozyme.
"""
from ecmodels.exceptions import MissingMolarMass


def isozyme_score(isozyme, gene_product_molar_mass):
    """Compute the selection score of an isozyme.

    Missing turnover numbers count as zero. An isozyme without gene products
    has no mass; its score is ``inf`` if it has a positive turnover number and
    ``0`` otherwise.

    Parameters
    ----------
    isozyme : Isozyme
        The isozyme to score.
    gene_product_molar_mass : callable
        A function returning the molar mass of a gene, or ``None``.

    Returns
    -------
    float
        The score.

    Raises
    ------
    MissingMolarMass
        Occurs if a gene product of the isozyme has no molar mass.

    """
    kcat = max(isozyme.kcat_forward or 0.0, isozyme.kcat_reverse or 0.0)
    mass = 0.0
    for gene, count in isozyme.gene_product_count.items():
        molar_mass = gene_product_molar_mass(gene)
        if molar_mass is None:
            raise MissingMolarMass("No molar mass for gene '{0}'".format(gene))
        mass += count * molar_mass

    if mass > 0:
        return kcat / mass
    return float("inf") if kcat > 0 else 0.0


def select_isozyme(isozymes, gene_product_molar_mass):
    """Return the isozyme with the highest :func:`isozyme_score`.

    If several isozymes share the highest score, the first one in the list
    is returned.

    Parameters
    ----------
    isozymes : list
        The isozymes of a reaction.
    gene_product_molar_mass : callable
        A function returning the molar mass of a gene, or ``None``.

    Returns
    -------
    tuple
        The ``(index, isozyme)`` pair of the chosen isozyme, where ``index``
        is its position in ``isozymes``, or ``None`` for an empty list.

    """
    best = None
    best_score = None
    for i, isozyme in enumerate(isozymes):
        score = isozyme_score(isozyme, gene_product_molar_mass)
        # strict comparison keeps the first isozyme on ties
        if best_score is None or score > best_score:
            best, best_score = (i, isozyme), score

    return best


__all__ = (
    "isozyme_score",
    "select_isozyme",
)
