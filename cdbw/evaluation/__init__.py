#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
评估模块
包含CDbw计算引擎和一次性评估接口
"""

from .cdbw import CDbwEngine
from .cdbw_score import compute_cdbw_score

__all__ = [
    'CDbwEngine',
    'compute_cdbw_score',
]
