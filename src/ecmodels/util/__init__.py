# -*- coding: utf-8 -*-
from ecmodels.util.matrix import as_sparse, sparse_from_triplets
from ecmodels.util.util import as_lookup, ensure_non_negative_value, show_versions


__all__ = ()
