# -*- coding: utf-8 -*-
import warnings as _warnings
from os import name as _name
from os.path import abspath as _abspath
from os.path import dirname as _dirname

from ecmodels import enzymes, exceptions
from ecmodels.core import (
    CobraModel,
    CoreModel,
    CoreModelCoupled,
    EcConfiguration,
    Isozyme,
    MetabolicModel,
    ModelWrapper,
    unwrap_model,
)
from ecmodels.enzymes import (
    EnzymeConstrainedModel,
    gene_product_amounts,
    make_gecko_model,
    make_smoment_model,
    mass_group_usage,
    original_fluxes,
)
from ecmodels.util import show_versions


__version__ = "0.1.0"

# set the warning format to be prettier and fit on one line
_ECMODELS_PATH = _dirname(_abspath(__file__))
if _name == "posix":
    _WARNING_BASE = "%s:%s \x1b[1;31m%s\x1b[0m: %s\n"  # colors
else:
    _WARNING_BASE = "%s:%s %s: %s\n"


def _warn_format(message, category, filename, lineno, file=None, line=None):
    """Set the warning format to be prettier and fit on one line."""
    shortname = filename.replace(_ECMODELS_PATH, "ecmodels", 1)
    return _WARNING_BASE % (shortname, lineno, category.__name__, message)


_warnings.formatwarning = _warn_format

__all__ = "_warn_format"
