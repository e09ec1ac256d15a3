# -*- coding: utf-8 -*-
from ecmodels.core.cobra_model import CobraModel
from ecmodels.core.configuration import EcConfiguration
from ecmodels.core.core_model import CoreModel, CoreModelCoupled
from ecmodels.core.isozyme import Isozyme
from ecmodels.core.metabolic_model import MetabolicModel, ModelWrapper, unwrap_model


__all__ = ()
