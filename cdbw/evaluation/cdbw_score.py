#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 一次性评估接口
直接接收坐标矩阵和聚类标签，返回 (score, metrics)
"""

import math

from ..config import default_representatives
from ..core.partition import Partition
from .cdbw import CDbwEngine


def compute_cdbw_score(X, labels, r=None, noise_label=None, silent=True, logger=None):
    """
    计算聚类结果的 CDbw 分数

    Args:
        X: 二维坐标矩阵 (n_samples, 2)
        labels: 聚类标签 (n_samples,)，簇ID需为 0..k-1
        r: 每个簇的代表点数量，默认取配置 CDBW_REPRESENTATIVES
        noise_label: 噪声标签，默认取配置 CDBW_NOISE_LABEL
        silent: 是否静默模式
        logger: CDbwLogger（可选）

    Returns:
        cdbw_score: CDbw 分数（越大越好），簇数量少于2时为 NaN
        metrics: 详细指标字典
    """
    if r is None:
        r = default_representatives

    partition = Partition.from_labels(labels, noise_label=noise_label)

    with CDbwEngine(partition, X, r, silent=silent, logger=logger) as engine:
        cdbw_score = engine.compute(r)
        metrics = engine.summary()

    if partition.cluster_count() < 2:
        for key in ('separation', 'compactness', 'cohesion',
                    'inter_cluster_density', 'intra_cluster_density_change'):
            metrics[key] = math.nan
        metrics['r'] = r

    metrics['n_objects'] = partition.object_count()
    metrics['n_noise'] = partition.noise_count()

    return cdbw_score, metrics
