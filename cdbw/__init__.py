#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 聚类有效性评估
基于密度的二维聚类质量指标：分离度、紧致度、凝聚度及其综合得分
"""

from .core import ClusterAggregate, Partition, Point, NOISE, ClusterId, PointIndex
from .density import SpatialIndex, DensityEstimator
from .matching import RCRMatcher
from .evaluation import CDbwEngine, compute_cdbw_score
from .errors import CDbwError, InvalidConfigurationError, DegenerateClusterError
from .information import CDbwLogger, get_logger, init_logger, reset_logger

__all__ = [
    # 基础类型
    'Point',
    'Partition',
    'NOISE',
    'ClusterId',
    'PointIndex',
    'ClusterAggregate',

    # 密度与匹配
    'SpatialIndex',
    'DensityEstimator',
    'RCRMatcher',

    # 评估
    'CDbwEngine',
    'compute_cdbw_score',

    # 异常
    'CDbwError',
    'InvalidConfigurationError',
    'DegenerateClusterError',

    # 日志记录
    'CDbwLogger',
    'get_logger',
    'init_logger',
    'reset_logger',
]
