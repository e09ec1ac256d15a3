# -*- coding: utf-8 -*-
r"""
EnzymeConstrainedModel adds enzyme capacity constraints to a model.

The :class:`EnzymeConstrainedModel` wraps an "inner" model and modifies it as
described in *Sánchez, Benjamín J., et al. "Improving the phenotype
predictions of a yeast genome-scale metabolic model by incorporating enzymatic
constraints." Molecular systems biology 13.8 (2017): 935.* and, for the single
isozyme variant, in *Bekiaris, Pavlos Stephanos, and Steffen Klamt.
"Automatic construction of metabolic models with enzyme constraints." BMC
bioinformatics 21.1 (2020): 1-13.*:

    * Reactions with known isozymes are split into forward and reverse
      variants for each isozyme (see :mod:`~ecmodels.enzymes.splitting`).
    * Arm coupling rows keep the sum of the variants of each reaction within
      the bounds of the original reaction.
    * Gene product coupling rows treat each gene product as a "virtual
      metabolite" consumed by the variants in proportion to their flux, and
      bound its total use by the given concentration bounds.
    * Mass group coupling rows bound the total protein mass of groups of gene
      products (e.g. membrane-bound and cytosolic proteins) by a budget. This
      generalizes the single enzyme pool of the original methods.

The split columns are exposed as the reactions of the model, while the
original reactions remain available through :meth:`~.MetabolicModel.fluxes`
and :meth:`~.MetabolicModel.reaction_flux`. All enzyme constraints are
coupling constraints; no metabolites are added.

The model is built with :func:`make_gecko_model` (all isozymes) or
:func:`make_smoment_model` (one isozyme per reaction) and cannot be changed
afterwards. If the inputs change, a new model has to be built.

"""
import numpy as np
from scipy.sparse import csr_matrix

from ecmodels.core.configuration import EcConfiguration
from ecmodels.core.metabolic_model import ModelWrapper
from ecmodels.enzymes.coupling import (
    column_reactions,
    gene_product_coupling,
    gene_product_rows,
    mass_group_coupling,
    reaction_coupling,
    stack_coupling,
    stack_coupling_bounds,
)
from ecmodels.enzymes.splitting import FORWARD, PASS_THROUGH, split_reactions
from ecmodels.exceptions import InvalidBounds
from ecmodels.util.util import _make_logger, as_lookup


LOGGER = _make_logger(__name__)
"""logging.Logger: Logger for :mod:`~ecmodels.enzymes.enzyme_model` submodule."""

ECCONFIGURATION = EcConfiguration()


class EnzymeConstrainedModel(ModelWrapper):
    r"""Class representation of an enzyme-constrained model.

    Use :func:`make_gecko_model` or :func:`make_smoment_model` to create an
    :class:`EnzymeConstrainedModel` instead of instantiating it directly.

    Parameters
    ----------
    columns : iterable
        The :class:`~.EnzymeColumn`\ s describing the split reactions.
    coupling_row_reaction : iterable of int
        For each arm coupling row, the index of its original reaction.
    coupling_row_gene_product : iterable
        The ``(gene, (lower, upper))`` pairs of the gene product rows.
    coupling_row_mass_group : iterable
        The ``(group, budget)`` pairs of the mass group rows.
    inner : MetabolicModel
        The wrapped model.
    single_isozyme : bool
        Whether the columns were made with one isozyme per reaction. Only
        affects the naming of the split reactions.

    Raises
    ------
    ValueError
        Occurs if a column refers to a reaction or row that does not exist.
    InvalidBounds
        Occurs if a column has a lower bound above its upper bound.

    """

    def __init__(
        self,
        columns,
        coupling_row_reaction,
        coupling_row_gene_product,
        coupling_row_mass_group,
        inner,
        single_isozyme=False,
    ):
        """Initialize the EnzymeConstrainedModel."""
        super(EnzymeConstrainedModel, self).__init__(inner)
        self._columns = tuple(columns)
        self._coupling_row_reaction = tuple(coupling_row_reaction)
        self._coupling_row_gene_product = tuple(coupling_row_gene_product)
        self._coupling_row_mass_group = tuple(coupling_row_mass_group)
        self._single_isozyme = bool(single_isozyme)
        self._check_consistency()

    @property
    def columns(self):
        r"""Return the ``tuple`` of :class:`~.EnzymeColumn`\ s."""
        return self._columns

    @property
    def coupling_row_reaction(self):
        """Return the original reaction index of each arm coupling row."""
        return self._coupling_row_reaction

    @property
    def coupling_row_gene_product(self):
        """Return the ``(gene, (lower, upper))`` pairs of gene product rows."""
        return self._coupling_row_gene_product

    @property
    def coupling_row_mass_group(self):
        """Return the ``(group, budget)`` pairs of the mass group rows."""
        return self._coupling_row_mass_group

    @property
    def single_isozyme(self):
        """Return whether the model uses one isozyme per reaction."""
        return self._single_isozyme

    def gene_products(self):
        """Return the gene identifiers of the gene product rows."""
        return [gene for gene, _ in self._coupling_row_gene_product]

    def mass_groups(self):
        """Return the names of the mass groups."""
        return [group for group, _ in self._coupling_row_mass_group]

    def column_reactions(self):
        """Return the signed incidence of inner reactions and split columns.

        Returns
        -------
        scipy.sparse.csr_matrix
            Matrix of shape ``(inner.n_reactions(), n_reactions())``.

        """
        return column_reactions(self._columns, self.inner.n_reactions())

    def reactions(self):
        """Return the identifiers of the split reactions.

        Forward and reverse variants get the suffixes ``#forward`` and
        ``#reverse``; with several isozymes the suffix is followed by the
        isozyme position (e.g. ``PGI#reverse#2``). Reactions that are not
        split keep their identifier.
        """
        inner_reactions = self.inner.reactions()
        return [
            _split_reaction_name(
                inner_reactions[col.reaction_index],
                col.direction,
                None if self._single_isozyme else col.isozyme_index,
            )
            for col in self._columns
        ]

    def n_reactions(self):
        """Return the number of split reactions."""
        return len(self._columns)

    def stoichiometry(self):
        """Return the stoichiometry of the split reactions.

        Each split reaction carries the stoichiometry of its original
        reaction, negated for the reverse variants.
        """
        return csr_matrix(self.inner.stoichiometry() @ self.column_reactions())

    def objective(self):
        """Return the objective over the split reactions.

        Every variant of a reaction gets the signed objective coefficient of
        the original reaction.
        """
        return np.asarray(self.column_reactions().T @ self.inner.objective()).ravel()

    def bounds(self):
        """Return the ``(lower, upper)`` bounds of the split reactions."""
        return (
            np.array([col.lb for col in self._columns], dtype=np.float64),
            np.array([col.ub for col in self._columns], dtype=np.float64),
        )

    def reaction_flux(self):
        """Return the mapping of split reactions to the inner fluxes."""
        return csr_matrix(self.column_reactions().T @ self.inner.reaction_flux())

    def coupling(self):
        """Return the coupling of the split model.

        The rows are, in order: the coupling of the inner model, the arm
        coupling of split reactions, the gene product coupling and the mass
        group coupling.
        """
        columns = self._columns
        return stack_coupling(
            self.inner.coupling(),
            self.column_reactions(),
            [
                reaction_coupling(columns, len(self._coupling_row_reaction)),
                gene_product_coupling(columns, len(self._coupling_row_gene_product)),
                mass_group_coupling(columns, len(self._coupling_row_mass_group)),
            ],
        )

    def n_coupling_constraints(self):
        """Return the number of coupling constraints."""
        return (
            self.inner.n_coupling_constraints()
            + len(self._coupling_row_reaction)
            + len(self._coupling_row_gene_product)
            + len(self._coupling_row_mass_group)
        )

    def coupling_bounds(self):
        """Return the ``(lower, upper)`` bounds of the coupling rows.

        The order of the rows is the same as in :meth:`coupling`. Arm
        coupling rows take the bounds of their original reaction, and mass
        group rows are bounded by ``(0, budget)``.
        """
        lbs, ubs = self.inner.bounds()
        rows = list(self._coupling_row_reaction)
        return stack_coupling_bounds(
            self.inner.coupling_bounds(),
            (np.asarray(lbs)[rows], np.asarray(ubs)[rows]),
            self._coupling_row_gene_product,
            self._coupling_row_mass_group,
        )

    def _check_consistency(self):
        """Ensure all columns refer to existing reactions and rows.

        Warnings
        --------
        This method is intended for internal use only.

        """
        n_inner = self.inner.n_reactions()
        n_arms = len(self._coupling_row_reaction)
        n_genes = len(self._coupling_row_gene_product)
        n_groups = len(self._coupling_row_mass_group)

        if any(not 0 <= i < n_inner for i in self._coupling_row_reaction):
            raise ValueError("Arm coupling row refers to an unknown reaction")
        for j, col in enumerate(self._columns):
            if not 0 <= col.reaction_index < n_inner:
                raise ValueError("Column {0} refers to an unknown reaction".format(j))
            if col.direction == PASS_THROUGH:
                if col.reaction_coupling_row is not None:
                    raise ValueError("Pass-through column {0} has an arm row".format(j))
            elif (
                col.reaction_coupling_row is None
                or not 0 <= col.reaction_coupling_row < n_arms
                or self._coupling_row_reaction[col.reaction_coupling_row]
                != col.reaction_index
            ):
                raise ValueError("Column {0} has an invalid arm row".format(j))
            if any(not 0 <= row < n_genes for row, _ in col.gene_product_coupling):
                raise ValueError("Column {0} has an invalid gene row".format(j))
            if any(not 0 <= row < n_groups for row, _ in col.mass_group_coupling):
                raise ValueError("Column {0} has an invalid mass group row".format(j))
            if not col.lb <= col.ub:
                raise InvalidBounds(
                    "Column {0} has a lower bound above its upper bound".format(j)
                )


def make_gecko_model(
    model,
    reaction_isozymes,
    gene_product_molar_mass,
    gene_product_bounds=None,
    gene_product_mass_group=None,
    gene_product_mass_group_bound=None,
    missing_gene_product_bounds=None,
):
    r"""Create an :class:`EnzymeConstrainedModel` using all isozymes.

    Every reaction with isozymes is split into a forward and a reverse
    variant for each isozyme, as far as the reaction bounds and the turnover
    numbers of the isozyme allow.

    Parameters
    ----------
    model : MetabolicModel
        The model to add enzyme constraints to. It is not modified.
    reaction_isozymes : dict
        A ``dict`` mapping reaction identifiers to lists of
        :class:`~.Isozyme`\ s.
    gene_product_molar_mass : dict or callable
        The molar mass of each gene product.
    gene_product_bounds : dict or callable
        The ``(lower, upper)`` concentration bounds of each gene product.
    gene_product_mass_group : dict or callable
        The mass group of each gene product. Gene products without a group do
        not count toward any mass budget. Default is no groups.
    gene_product_mass_group_bound : dict or callable
        The mass budget of each mass group. When given as a ``dict``, every
        group in it gets a coupling row.
    missing_gene_product_bounds : str
        Either ``"unbounded"`` or ``"error"``, see
        :attr:`.EcConfiguration.missing_gene_product_bounds`, which is used
        if ``None``.

    Returns
    -------
    EnzymeConstrainedModel
        The enzyme-constrained model.

    Raises
    ------
    UnknownReaction
        Occurs if an isozyme is given for a reaction not in the model.
    MissingMolarMass
        Occurs if a gene product of an isozyme has no molar mass.
    MissingGeneProductBounds
        Occurs if a gene product has no bounds under the ``"error"`` policy.
    UnknownMassGroup
        Occurs if a gene product belongs to a group without a budget.
    InvalidBounds
        Occurs for reaction, gene product or mass group bounds that cannot
        be satisfied.

    """
    return _make_enzyme_model(
        model,
        reaction_isozymes,
        gene_product_molar_mass,
        gene_product_bounds,
        gene_product_mass_group,
        gene_product_mass_group_bound,
        missing_gene_product_bounds,
        single_isozyme=False,
    )


def make_smoment_model(
    model,
    reaction_isozymes,
    gene_product_molar_mass,
    total_enzyme_capacity=None,
    gene_product_bounds=None,
    gene_product_mass_group=None,
    gene_product_mass_group_bound=None,
    missing_gene_product_bounds=None,
):
    r"""Create an :class:`EnzymeConstrainedModel` using one isozyme per reaction.

    For every reaction with isozymes the isozyme with the best ratio of
    turnover number to mass is chosen with :func:`~.select_isozyme`, and the
    reaction is split into a forward and a reverse variant for it.

    Parameters
    ----------
    model : MetabolicModel
        The model to add enzyme constraints to. It is not modified.
    reaction_isozymes : dict
        A ``dict`` mapping reaction identifiers to lists of
        :class:`~.Isozyme`\ s.
    gene_product_molar_mass : dict or callable
        The molar mass of each gene product.
    total_enzyme_capacity : float
        A budget for the total mass of all gene products. All gene products
        are put into a single group named after
        :attr:`.EcConfiguration.default_mass_group`. Cannot be combined with
        ``gene_product_mass_group`` or ``gene_product_mass_group_bound``.
    gene_product_bounds : dict or callable
        The ``(lower, upper)`` concentration bounds of each gene product.
    gene_product_mass_group : dict or callable
        The mass group of each gene product.
    gene_product_mass_group_bound : dict or callable
        The mass budget of each mass group.
    missing_gene_product_bounds : str
        Either ``"unbounded"`` or ``"error"``, see
        :attr:`.EcConfiguration.missing_gene_product_bounds`, which is used
        if ``None``.

    Returns
    -------
    EnzymeConstrainedModel
        The enzyme-constrained model.

    Raises
    ------
    ValueError
        Occurs if ``total_enzyme_capacity`` is combined with a grouping.

    See Also
    --------
    :func:`make_gecko_model` for the other errors raised.

    """
    if total_enzyme_capacity is not None:
        if (
            gene_product_mass_group is not None
            or gene_product_mass_group_bound is not None
        ):
            raise ValueError(
                "total_enzyme_capacity cannot be combined with mass groups"
            )
        group = ECCONFIGURATION.default_mass_group

        def gene_product_mass_group(gene):
            return group

        gene_product_mass_group_bound = {group: total_enzyme_capacity}

    return _make_enzyme_model(
        model,
        reaction_isozymes,
        gene_product_molar_mass,
        gene_product_bounds,
        gene_product_mass_group,
        gene_product_mass_group_bound,
        missing_gene_product_bounds,
        single_isozyme=True,
    )


def _make_enzyme_model(
    model,
    reaction_isozymes,
    gene_product_molar_mass,
    gene_product_bounds,
    gene_product_mass_group,
    gene_product_mass_group_bound,
    missing_gene_product_bounds,
    single_isozyme,
):
    """Create the :class:`EnzymeConstrainedModel` for either strategy.

    Warnings
    --------
    This method is intended for internal use only.

    """
    if not isinstance(reaction_isozymes, dict):
        raise TypeError("reaction_isozymes must be a dict")

    mass_groups = []
    if isinstance(gene_product_mass_group_bound, dict):
        mass_groups = list(gene_product_mass_group_bound)

    split = split_reactions(
        model,
        reaction_isozymes,
        as_lookup(gene_product_molar_mass, "gene_product_molar_mass"),
        as_lookup(gene_product_mass_group, "gene_product_mass_group"),
        as_lookup(gene_product_mass_group_bound, "gene_product_mass_group_bound"),
        mass_groups=mass_groups,
        single_isozyme=single_isozyme,
    )
    gene_rows = gene_product_rows(
        split.gene_products,
        as_lookup(gene_product_bounds, "gene_product_bounds"),
        policy=missing_gene_product_bounds,
    )

    LOGGER.info(
        "Split %d reactions into %d columns with %d arm, %d gene product "
        "and %d mass group coupling rows",
        model.n_reactions(),
        len(split.columns),
        len(split.coupling_row_reaction),
        len(gene_rows),
        len(split.mass_groups),
    )
    return EnzymeConstrainedModel(
        split.columns,
        split.coupling_row_reaction,
        gene_rows,
        split.mass_groups,
        model,
        single_isozyme=single_isozyme,
    )


def _split_reaction_name(reaction_id, direction, isozyme_index=None):
    """Return the identifier of a split reaction.

    Warnings
    --------
    This method is intended for internal use only.

    """
    if direction == PASS_THROUGH:
        return reaction_id
    suffix = "forward" if direction == FORWARD else "reverse"
    name = "{0}#{1}".format(reaction_id, suffix)
    if isozyme_index is not None:
        name = "{0}#{1}".format(name, isozyme_index)
    return name


__all__ = (
    "EnzymeConstrainedModel",
    "make_gecko_model",
    "make_smoment_model",
)
