# -*- coding: utf-8 -*-
"""This module contains Exceptions specific to :mod:`ecmodels` module."""


class EnzymeConstraintError(Exception):
    """Base error class for enzyme-constrained model construction."""


class MissingMolarMass(EnzymeConstraintError):
    """Raised when a gene used by an isozyme has no molar mass."""


class UnknownReaction(EnzymeConstraintError):
    """Raised when isozyme data refers to a reaction absent from the model."""


class InvalidBounds(EnzymeConstraintError):
    """Raised when bounds cannot be satisfied.

    This covers a reaction, gene product or split column with a lower bound
    above its upper bound, a negative mass budget, and a reaction that must
    carry flux in a direction none of its isozymes catalyzes.
    """


class MissingGeneProductBounds(EnzymeConstraintError):
    """Raised when a gene product has no concentration bounds and bounds are
    required."""


class UnknownMassGroup(EnzymeConstraintError):
    """Raised when a gene product belongs to a mass group without a budget."""


__all__ = (
    "EnzymeConstraintError",
    "MissingMolarMass",
    "UnknownReaction",
    "InvalidBounds",
    "MissingGeneProductBounds",
    "UnknownMassGroup",
)
