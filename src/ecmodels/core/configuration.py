# -*- coding: utf-8 -*-
"""
Define the global configuration values through the :class:`EcConfiguration`.

Involved in enzyme-constrained model construction:
    * :meth:`~EcBaseConfiguration.tolerance`
    * :meth:`~EcBaseConfiguration.missing_gene_product_bounds`
    * :meth:`~EcBaseConfiguration.default_mass_group`

Involved in flux balance analysis (FBA):
    * :meth:`~EcBaseConfiguration.tolerance`
    * :meth:`~EcBaseConfiguration.lower_bound`
    * :meth:`~EcBaseConfiguration.upper_bound`
    * :meth:`~EcBaseConfiguration.bounds`

Notes
-----
The :class:`EcConfiguration` shares the tolerance and the default bounds with
the :class:`~cobra.core.configuration.Configuration` class from :mod:`cobra`,
so that a turnover number considered zero here is also considered zero by the
solver used on the resulting model.

"""
from cobra.core.configuration import Configuration
from cobra.core.singleton import Singleton

from ecmodels.util.util import ensure_non_negative_value


COBRA_CONFIGURATION = Configuration()

GENE_PRODUCT_BOUND_POLICIES = ("unbounded", "error")
"""tuple: Valid policies for gene products without concentration bounds."""


class EcBaseConfiguration:
    """Define global configuration values honored by :mod:`ecmodels` functions.

    Notes
    -----
    The :class:`EcConfiguration` should be always be used over the
    :class:`EcBaseConfiguration` in order for global configuration to work
    as intended.

    """

    def __init__(self):
        """Initialize EcBaseConfiguration."""
        self._missing_gene_product_bounds = "unbounded"
        self._default_mass_group = "uncategorized"

    @property
    def tolerance(self):
        """Get or set the tolerance value for treating numbers as zero.

        Turnover numbers (kcats) at or below the tolerance are treated as
        missing, i.e. the corresponding reaction direction cannot be catalyzed
        by the isozyme. The value is shared with :mod:`cobra`.

        Parameters
        ----------
        tol : float
            The non-negative tolerance value to set.

        """
        return COBRA_CONFIGURATION.tolerance

    @tolerance.setter
    def tolerance(self, tol):
        """Set the tolerance value."""
        COBRA_CONFIGURATION.tolerance = ensure_non_negative_value(tol)

    @property
    def missing_gene_product_bounds(self):
        """Get or set the policy for gene products without bounds.

        Applies to gene products referenced by a split reaction for which no
        concentration bounds were provided.

        Parameters
        ----------
        policy : str
            Either ``"unbounded"`` to use the bounds ``(0, inf)``, or
            ``"error"`` to raise a :class:`~.MissingGeneProductBounds`.

        Raises
        ------
        ValueError
            Occurs when trying to set an unrecognized policy.

        """
        return getattr(self, "_missing_gene_product_bounds")

    @missing_gene_product_bounds.setter
    def missing_gene_product_bounds(self, policy):
        """Set the policy for gene products without bounds."""
        if policy not in GENE_PRODUCT_BOUND_POLICIES:
            raise ValueError(
                "Unrecognized policy '{0}', must be one of {1}.".format(
                    policy, GENE_PRODUCT_BOUND_POLICIES
                )
            )
        setattr(self, "_missing_gene_product_bounds", policy)

    @property
    def default_mass_group(self):
        """Get or set the name of the mass group used for total capacity.

        Used by :func:`~.make_smoment_model` when a total enzyme capacity is
        given without an explicit grouping of the gene products.

        Parameters
        ----------
        name : str
            The group name.

        """
        return getattr(self, "_default_mass_group")

    @default_mass_group.setter
    def default_mass_group(self, name):
        """Set the name of the mass group used for total capacity."""
        if not isinstance(name, str) or not name:
            raise TypeError("Must be a non-empty str.")
        setattr(self, "_default_mass_group", name)

    @property
    def lower_bound(self):
        """Get or set the default value of the lower bound for reactions.

        Parameters
        ----------
        bound : float
            The default bound value to set.

        """
        return COBRA_CONFIGURATION.lower_bound

    @lower_bound.setter
    def lower_bound(self, bound):
        """Set the default value of the lower bound for reactions."""
        COBRA_CONFIGURATION.lower_bound = bound

    @property
    def upper_bound(self):
        """Get or set the default value of the upper bound for reactions.

        Parameters
        ----------
        bound : float
            The default bound value to set.

        """
        return COBRA_CONFIGURATION.upper_bound

    @upper_bound.setter
    def upper_bound(self, bound):
        """Set the default value of the upper bound for reactions."""
        COBRA_CONFIGURATION.upper_bound = bound

    @property
    def bounds(self):
        """Get or set the default lower and upper bounds for reactions.

        Parameters
        ----------
        bounds : tuple of floats
            A tuple of floats to set as the new default bounds in the form
            of ``(lower_bound, upper_bound)``.

        Raises
        ------
        AssertionError
            Occurs when lower bound is greater than the upper bound.

        """
        return COBRA_CONFIGURATION.bounds

    @bounds.setter
    def bounds(self, bounds):
        """Set the default lower and upper bounds for reactions."""
        COBRA_CONFIGURATION.bounds = bounds

    def __repr__(self):
        """Override default :func:`repr` for the EcConfiguration.

        Warnings
        --------
        This method is intended for internal use only.

        """
        return """EcConfiguration:
        tolerance: {tolerance}
        missing gene product bounds: {missing_gene_product_bounds}
        default mass group: {default_mass_group}
        lower_bound: {lower_bound}
        upper_bound: {upper_bound}""".format(
            tolerance=self.tolerance,
            missing_gene_product_bounds=self.missing_gene_product_bounds,
            default_mass_group=self.default_mass_group,
            lower_bound=self.lower_bound,
            upper_bound=self.upper_bound,
        )


class EcConfiguration(EcBaseConfiguration, metaclass=Singleton):
    """Define the configuration to be :class:`.Singleton` based."""


__all__ = (
    "EcConfiguration",
    "EcBaseConfiguration",
    "GENE_PRODUCT_BOUND_POLICIES",
)
