# -*- coding: utf-8 -*-
"""
Isozyme holds the kinetic and compositional data of one catalyzing enzyme.

An isozyme is one alternative enzyme (a set of gene products) catalyzing a
reaction. Its turnover numbers (kcats) give the maximal flux per unit of enzyme
in the forward and in the reverse direction, and the gene product counts give
the stoichiometry of the enzyme complex. Missing turnover numbers mean that the
isozyme cannot catalyze the reaction in that direction.

Isozymes are collected into a catalogue, which is a ``dict`` mapping reaction
identifiers to lists of :class:`Isozyme` objects.
"""
from ecmodels.util.util import ensure_non_negative_value


class Isozyme:
    """Class representation of an isozyme.

    Parameters
    ----------
    gene_product_count : dict
        A ``dict`` mapping gene identifiers to the number of copies of the
        gene product in the enzyme complex. Counts must be positive.
    kcat_forward : float or None
        The turnover number in the forward direction, or ``None`` if the
        isozyme does not catalyze the forward direction.
    kcat_reverse : float or None
        The turnover number in the reverse direction, or ``None`` if the
        isozyme does not catalyze the reverse direction.

    """

    def __init__(self, gene_product_count, kcat_forward=None, kcat_reverse=None):
        """Initialize the Isozyme."""
        if not isinstance(gene_product_count, dict):
            raise TypeError("gene_product_count must be a dict")
        for gene, count in gene_product_count.items():
            try:
                ensure_non_negative_value(count, exclude_zero=True)
            except (TypeError, ValueError) as e:
                raise e.__class__(
                    "Invalid count for gene product '{0}': {1}".format(gene, str(e))
                )
        self._gene_product_count = dict(gene_product_count)
        self._kcat_forward = ensure_non_negative_value(kcat_forward)
        self._kcat_reverse = ensure_non_negative_value(kcat_reverse)

    @property
    def gene_product_count(self):
        """Return a copy of the gene product counts."""
        return self._gene_product_count.copy()

    @property
    def kcat_forward(self):
        """Return the forward turnover number, or ``None``."""
        return self._kcat_forward

    @property
    def kcat_reverse(self):
        """Return the reverse turnover number, or ``None``."""
        return self._kcat_reverse

    def kcat(self, direction):
        """Return the turnover number for a direction.

        Parameters
        ----------
        direction : int
            ``1`` for the forward and ``-1`` for the reverse direction.

        """
        if direction == 1:
            return self._kcat_forward
        if direction == -1:
            return self._kcat_reverse
        raise ValueError("direction must be 1 or -1")

    def __eq__(self, other):
        """Compare isozymes by their data."""
        if not isinstance(other, Isozyme):
            return NotImplemented
        return (
            self._gene_product_count == other._gene_product_count
            and self._kcat_forward == other._kcat_forward
            and self._kcat_reverse == other._kcat_reverse
        )

    def __hash__(self):
        """Hash isozymes by their data."""
        return hash(
            (
                frozenset(self._gene_product_count.items()),
                self._kcat_forward,
                self._kcat_reverse,
            )
        )

    def __repr__(self):
        """Override default :func:`repr` for the Isozyme."""
        return "Isozyme({0!r}, kcat_forward={1!r}, kcat_reverse={2!r})".format(
            self._gene_product_count, self._kcat_forward, self._kcat_reverse
        )


__all__ = ("Isozyme",)
