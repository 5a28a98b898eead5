#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
密度估计模块
包含KD树半径查询和CDbw簇间/簇内密度计算
"""

from .spatial_index import SpatialIndex
from .density_estimation import DensityEstimator

__all__ = [
    'SpatialIndex',
    'DensityEstimator',
]
