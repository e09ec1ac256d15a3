# -*- coding: utf-8 -*-
from ecmodels.enzymes.analysis import (
    gene_product_amounts,
    mass_group_usage,
    original_fluxes,
)
from ecmodels.enzymes.enzyme_model import (
    EnzymeConstrainedModel,
    make_gecko_model,
    make_smoment_model,
)
from ecmodels.enzymes.selection import isozyme_score, select_isozyme
from ecmodels.enzymes.splitting import EnzymeColumn, split_reactions


__all__ = ()
