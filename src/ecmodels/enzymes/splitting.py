# -*- coding: utf-8 -*-
"""
Contains the splitting of reactions into directional, isozyme-specific columns.

Every reaction of a model with isozyme data is replaced by a set of columns,
one for each catalyzing isozyme and each direction the reaction can run in.
All columns carry non-negative flux; the flux of the original reaction is the
sum of the forward columns minus the sum of the reverse columns. Reactions
without isozyme data are kept as a single pass-through column.

Each split column records how much of each gene product it consumes per unit
of flux (``count / kcat``) and how much protein mass of each mass group this
amounts to (``count / kcat * molar_mass``). The columns are later turned into
coupling constraints by the :mod:`~ecmodels.enzymes.coupling` module.

Two strategies are available:

    * The multi-isozyme (GECKO) strategy emits columns for every isozyme.
    * The single-isozyme (sMOMENT) strategy first picks one isozyme per
      reaction with :func:`~.select_isozyme` and emits columns for it only.

"""
from collections import OrderedDict, namedtuple

import numpy as np

from ecmodels.core.configuration import EcConfiguration
from ecmodels.enzymes.selection import select_isozyme
from ecmodels.exceptions import (
    InvalidBounds,
    MissingMolarMass,
    UnknownMassGroup,
    UnknownReaction,
)
from ecmodels.util.util import _make_logger


LOGGER = _make_logger(__name__)
"""logging.Logger: Logger for :mod:`~ecmodels.enzymes.splitting` submodule."""

ECCONFIGURATION = EcConfiguration()

FORWARD = 1
"""int: Direction of forward split columns."""

REVERSE = -1
"""int: Direction of reverse split columns."""

PASS_THROUGH = 0
"""int: Direction of columns of reactions that are not split."""

EnzymeColumn = namedtuple(
    "EnzymeColumn",
    [
        "reaction_index",
        "isozyme_index",
        "direction",
        "reaction_coupling_row",
        "lb",
        "ub",
        "gene_product_coupling",
        "mass_group_coupling",
    ],
)
EnzymeColumn.__doc__ = """One column (variable) of a split model.

Attributes
----------
reaction_index : int
    Index of the original reaction in the inner model.
isozyme_index : int
    One-based position of the isozyme in the reaction's isozyme list, ``0``
    for pass-through columns.
direction : int
    ``1`` (forward), ``-1`` (reverse) or ``0`` (pass-through).
reaction_coupling_row : int or None
    Row of the arm coupling block grouping the columns of the reaction,
    ``None`` for pass-through columns.
lb : float
    Lower flux bound of the column.
ub : float
    Upper flux bound of the column.
gene_product_coupling : tuple
    ``(gene_row, coefficient)`` pairs of gene product use per unit of flux.
mass_group_coupling : tuple
    ``(group_row, coefficient)`` pairs of protein mass use per unit of flux.

"""

SplitResult = namedtuple(
    "SplitResult", ["columns", "coupling_row_reaction", "gene_products", "mass_groups"]
)
SplitResult.__doc__ = """The result of :func:`split_reactions`.

Attributes
----------
columns : tuple
    The :class:`EnzymeColumn`\\ s, ordered by reaction.
coupling_row_reaction : tuple
    For each arm coupling row, the index of its original reaction.
gene_products : tuple
    The gene identifiers of the gene product rows, in row order.
mass_groups : tuple
    The ``(group, budget)`` pairs of the mass group rows, in row order.

"""


def split_reactions(
    model,
    reaction_isozymes,
    gene_product_molar_mass,
    gene_product_mass_group,
    mass_group_bound,
    mass_groups=None,
    single_isozyme=False,
):
    """Split the reactions of a model into enzyme-specific columns.

    Parameters
    ----------
    model : MetabolicModel
        The model whose reactions are split. It is not modified.
    reaction_isozymes : dict
        A ``dict`` mapping reaction identifiers to lists of
        :class:`~.Isozyme`\\ s. Reactions not in the ``dict``, or mapped to an
        empty list, are not split.
    gene_product_molar_mass : callable
        A function returning the molar mass of a gene, or ``None``.
    gene_product_mass_group : callable
        A function returning the mass group of a gene, or ``None`` if the
        gene belongs to no group.
    mass_group_bound : callable
        A function returning the mass budget of a group, or ``None``.
    mass_groups : iterable of str
        Groups that get a row even when no column refers to them, in row
        order. Other groups get rows in the order they are first used.
    single_isozyme : bool
        If ``True``, use only the isozyme chosen by :func:`~.select_isozyme`
        for each reaction. Otherwise use all isozymes.

    Returns
    -------
    SplitResult
        The columns and the row lists of the coupling blocks.

    Raises
    ------
    UnknownReaction
        Occurs if ``reaction_isozymes`` refers to a reaction of no model.
    MissingMolarMass
        Occurs if a gene of any isozyme has no molar mass.
    InvalidBounds
        Occurs if a reaction has a lower bound above its upper bound, if the
        bounds of a reaction exclude zero flux but no isozyme catalyzes the
        direction they require, or if a mass budget is negative.
    UnknownMassGroup
        Occurs if a gene belongs to a mass group without a budget.

    """
    reaction_ids = model.reactions()
    lbs, ubs = model.bounds()
    _check_catalogue(reaction_ids, reaction_isozymes, gene_product_molar_mass)
    _check_reaction_bounds(reaction_ids, lbs, ubs)

    tolerance = ECCONFIGURATION.tolerance
    group_rows = OrderedDict()
    for group in mass_groups or []:
        _add_mass_group(group, group_rows, mass_group_bound)
    gene_rows = OrderedDict()

    columns = []
    coupling_row_reaction = []
    for i, rid in enumerate(reaction_ids):
        lb, ub = float(lbs[i]), float(ubs[i])
        isozymes = reaction_isozymes.get(rid)
        if not isozymes:
            columns.append(EnzymeColumn(i, 0, PASS_THROUGH, None, lb, ub, (), ()))
            continue

        if single_isozyme:
            index, isozyme = select_isozyme(isozymes, gene_product_molar_mass)
            candidates = [(index + 1, isozyme)]
        else:
            candidates = [(k + 1, isozyme) for k, isozyme in enumerate(isozymes)]

        split = []
        for direction, feasible, col_ub in [
            (FORWARD, ub > 0, ub),
            (REVERSE, lb < 0, -lb),
        ]:
            if not feasible:
                continue
            for k, isozyme in candidates:
                kcat = isozyme.kcat(direction)
                if kcat is None or kcat <= tolerance:
                    continue
                gene_coupling, mass_coupling = _column_coupling(
                    isozyme,
                    kcat,
                    gene_rows,
                    group_rows,
                    gene_product_molar_mass,
                    gene_product_mass_group,
                    mass_group_bound,
                )
                split.append((k, direction, col_ub, gene_coupling, mass_coupling))

        if not split:
            if lb > 0 or ub < 0:
                raise InvalidBounds(
                    "No isozyme of reaction '{0}' can catalyze a direction its "
                    "bounds {1!r} require".format(rid, (lb, ub))
                )
            LOGGER.warning(
                "No isozyme of reaction '%s' can catalyze a feasible direction, "
                "its flux is fixed to zero",
                rid,
            )
            continue

        arm_row = len(coupling_row_reaction)
        coupling_row_reaction.append(i)
        columns.extend(
            EnzymeColumn(i, k, direction, arm_row, 0.0, col_ub, genes, groups)
            for k, direction, col_ub, genes, groups in split
        )

    return SplitResult(
        tuple(columns),
        tuple(coupling_row_reaction),
        tuple(gene_rows),
        tuple((group, budget) for group, (_, budget) in group_rows.items()),
    )


def _column_coupling(
    isozyme,
    kcat,
    gene_rows,
    group_rows,
    gene_product_molar_mass,
    gene_product_mass_group,
    mass_group_bound,
):
    """Return the gene product and mass group coupling of a split column.

    New gene and group rows are registered in ``gene_rows`` and
    ``group_rows``.

    Warnings
    --------
    This method is intended for internal use only.

    """
    gene_coupling = []
    mass_coupling = OrderedDict()
    for gene, count in isozyme.gene_product_count.items():
        if gene not in gene_rows:
            gene_rows[gene] = len(gene_rows)
        coefficient = count / kcat
        gene_coupling.append((gene_rows[gene], coefficient))

        group = gene_product_mass_group(gene)
        if group is None:
            continue
        row = _add_mass_group(group, group_rows, mass_group_bound)
        mass_coupling[row] = (
            mass_coupling.get(row, 0.0) + coefficient * gene_product_molar_mass(gene)
        )

    return tuple(gene_coupling), tuple(mass_coupling.items())


def _add_mass_group(group, group_rows, mass_group_bound):
    """Return the row of a mass group, registering the group if new.

    Warnings
    --------
    This method is intended for internal use only.

    """
    if group in group_rows:
        return group_rows[group][0]

    budget = mass_group_bound(group)
    if budget is None:
        raise UnknownMassGroup("No mass budget for group '{0}'".format(group))
    budget = float(budget)
    if budget < 0 or np.isnan(budget):
        raise InvalidBounds(
            "Mass budget of group '{0}' must be non-negative, got {1}".format(
                group, budget
            )
        )
    group_rows[group] = (len(group_rows), budget)
    return group_rows[group][0]


def _check_catalogue(reaction_ids, reaction_isozymes, gene_product_molar_mass):
    """Ensure every catalogue entry refers to a reaction and has molar masses.

    Warnings
    --------
    This method is intended for internal use only.

    """
    known = set(reaction_ids)
    unknown = [rid for rid in reaction_isozymes if rid not in known]
    if unknown:
        raise UnknownReaction(
            "Isozymes given for reactions not in the model: {0!r}".format(unknown)
        )

    for rid, isozymes in reaction_isozymes.items():
        for isozyme in isozymes or []:
            for gene in isozyme.gene_product_count:
                molar_mass = gene_product_molar_mass(gene)
                if molar_mass is None:
                    raise MissingMolarMass(
                        "No molar mass for gene '{0}' of reaction '{1}'".format(
                            gene, rid
                        )
                    )
                if not molar_mass >= 0:
                    raise ValueError(
                        "Molar mass of gene '{0}' must be non-negative".format(gene)
                    )


def _check_reaction_bounds(reaction_ids, lbs, ubs):
    """Ensure no reaction has a lower bound above its upper bound.

    Warnings
    --------
    This method is intended for internal use only.

    """
    invalid = [rid for rid, lb, ub in zip(reaction_ids, lbs, ubs) if not lb <= ub]
    if invalid:
        raise InvalidBounds(
            "Reactions with lower bound above upper bound: {0!r}".format(invalid)
        )


__all__ = (
    "EnzymeColumn",
    "SplitResult",
    "split_reactions",
    "FORWARD",
    "REVERSE",
    "PASS_THROUGH",
)
