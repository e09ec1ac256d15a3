# -*- coding: utf-8 -*-
"""
Contains functions interpreting flux vectors of enzyme-constrained models.

The functions take a flux vector over the split reactions of an
:class:`~.EnzymeConstrainedModel` (e.g. obtained from a solver) and translate
it into the quantities of biological interest. No optimization is performed.
"""
import numpy as np
import pandas as pd

from ecmodels.enzymes.coupling import gene_product_coupling, mass_group_coupling


def original_fluxes(model, x):
    """Return the fluxes of the original reactions.

    Parameters
    ----------
    model : MetabolicModel
        The model the flux vector belongs to.
    x : array-like
        The flux of each reaction of ``model``.

    Returns
    -------
    pandas.Series
        The fluxes indexed by :meth:`~.MetabolicModel.fluxes`.

    """
    x = _check_flux_vector(model, x)
    return pd.Series(model.reaction_flux().T @ x, index=model.fluxes(), dtype=float)


def gene_product_amounts(model, x):
    """Return the amount of each gene product needed to carry the fluxes.

    Parameters
    ----------
    model : EnzymeConstrainedModel
        The model the flux vector belongs to.
    x : array-like
        The flux of each split reaction of ``model``.

    Returns
    -------
    pandas.Series
        The gene product amounts indexed by gene identifier.

    """
    x = _check_flux_vector(model, x)
    block = gene_product_coupling(model.columns, len(model.coupling_row_gene_product))
    return pd.Series(block @ x, index=model.gene_products(), dtype=float)


def mass_group_usage(model, x):
    """Return the protein mass used by each mass group to carry the fluxes.

    Parameters
    ----------
    model : EnzymeConstrainedModel
        The model the flux vector belongs to.
    x : array-like
        The flux of each split reaction of ``model``.

    Returns
    -------
    pandas.Series
        The used mass indexed by mass group.

    """
    x = _check_flux_vector(model, x)
    block = mass_group_coupling(model.columns, len(model.coupling_row_mass_group))
    return pd.Series(block @ x, index=model.mass_groups(), dtype=float)


def _check_flux_vector(model, x):
    """Return ``x`` as a float vector with one entry per model reaction.

    Warnings
    --------
    This method is intended for internal use only.

    """
    x = np.asarray(x, dtype=np.float64).reshape(-1)
    if len(x) != model.n_reactions():
        raise ValueError(
            "Flux vector has {0} entries for {1} reactions".format(
                len(x), model.n_reactions()
            )
        )
    return x


__all__ = (
    "original_fluxes",
    "gene_product_amounts",
    "mass_group_usage",
)
