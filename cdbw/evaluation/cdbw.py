#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw（基于密度的聚类有效性指标）计算引擎

流程：
1. 校验: 簇数量为1时指标无定义，直接返回 NaN
2. 聚合: 构造时已按划分计算每个簇的质心和标准差
3. 选择代表点: 每个簇用 farthest-first 选出 r 个代表点
4. RCR 匹配: 对每个有序簇对计算互为最近的代表点对
5. 评分: 分离度 → 紧致度 → 凝聚度，CDbw = 凝聚度 × 分离度 × 紧致度
"""

from __future__ import annotations

import math
from typing import Any, Dict

import numpy as np

from ..config import SHRINK_FACTORS
from ..core.cluster import build_cluster_aggregates
from ..core.partition import Partition
from ..core.point import points_to_array
from ..density.density_estimation import DensityEstimator
from ..density.spatial_index import SpatialIndex
from ..errors import DegenerateClusterError, InvalidConfigurationError
from ..information.cdbw_logger import get_logger
from ..matching.rcr import RCRMatcher


def _validate_r(r):
    if isinstance(r, bool) or not isinstance(r, (int, np.integer)):
        raise InvalidConfigurationError(f"代表点数量 r 必须为正整数，当前值: {r!r}")
    if r <= 0:
        raise InvalidConfigurationError(f"代表点数量 r 必须为正整数，当前值: {r}")
    return int(r)


class CDbwEngine:
    """
    CDbw 计算引擎

    引擎只读持有划分和点集，独占空间索引；close() 或退出 with 块后释放索引。

    Args:
        partition: Partition 对象，或聚类标签数组（噪声为 -1）
        points: Point 序列或形状为 (n, 2) 的坐标数组
        r: 默认代表点数量（正整数）
        silent: 是否静默模式
        logger: CDbwLogger（可选，默认使用全局日志实例）
    """

    def __init__(self, partition, points, r, silent=True, logger=None):
        self.r = _validate_r(r)

        if not isinstance(partition, Partition):
            partition = Partition.from_labels(partition)
        X = points_to_array(points)
        if X.ndim != 2 or X.shape[1] != 2:
            raise InvalidConfigurationError(f"期望形状为 (n, 2) 的坐标矩阵，收到形状: {X.shape}")
        if X.shape[0] != partition.object_count():
            raise InvalidConfigurationError(
                f"点数量({X.shape[0]})与划分对象数量({partition.object_count()})不一致")
        if X.shape[0] == 0:
            raise InvalidConfigurationError("点集为空")

        self.partition = partition
        self.silent = silent
        self.logger = logger if logger is not None else get_logger()

        self._index = SpatialIndex(X, silent=silent)
        self.X = self._index.points
        self.clusters = build_cluster_aggregates(partition, self.X)

        self._rcrs = {}
        self._cdbw = 0.0
        self._separation = 0.0
        self._compactness = 0.0
        self._cohesion = 0.0
        self._inter_cluster_density = 0.0
        self._intra_cluster_density_change = 0.0
        self._intra_cluster_densities = []
        self._last_r = None

    # ------------------------------------------------------------------
    # 计算
    # ------------------------------------------------------------------

    def _check_clusters(self):
        for cluster in self.clusters:
            if cluster.size() < 2:
                raise DegenerateClusterError(cluster.id, cluster.size())

    def compute(self, r=None) -> float:
        """
        计算 CDbw 指标

        Args:
            r: 每个簇的代表点数量，默认使用构造时的 r

        Returns:
            cdbw: CDbw 得分；簇数量少于2时返回 NaN
        """
        r = self.r if r is None else _validate_r(r)
        if self._index.closed:
            raise RuntimeError("CDbw 引擎已关闭")

        num_clusters = self.partition.cluster_count()

        # 簇数量为1时指标无定义
        if num_clusters < 2:
            if not self.silent:
                print(f"[CDBW] 簇数量={num_clusters}，指标无定义，返回 NaN")
            self._cdbw = math.nan
            return self._cdbw

        self._check_clusters()

        if not self.silent:
            print(f"[CDBW] 开始计算: {self.partition.object_count()} 个点, {num_clusters} 个簇, "
                  f"噪声点 {self.partition.noise_count()} 个, r={r}")

        self.logger.clear()
        self.logger.set_metadata('partition', self.partition.object_count(), num_clusters,
                                 self.partition.noise_count(), r)

        for cluster in self.clusters:
            cluster.choose_representatives(r)
            self.logger.log_cluster(cluster)

        self._rcrs = RCRMatcher(self.clusters).compute_rcrs(silent=self.silent)

        estimator = DensityEstimator(self.clusters, self._rcrs, self._index,
                                     self.partition.cluster_ids, r, SHRINK_FACTORS)

        self._inter_cluster_density = estimator.inter_cluster_density()
        self._separation = estimator.separation(self._inter_cluster_density)
        (self._compactness,
         self._intra_cluster_density_change,
         self._intra_cluster_densities) = estimator.compactness_and_intra_density_changes()
        self._cohesion = estimator.cohesion(self._compactness, self._intra_cluster_density_change)
        self._cdbw = self._cohesion * self._separation * self._compactness
        self._last_r = r

        if self.logger.enabled:
            for (c_i, c_j), pairs in self._rcrs.items():
                self.logger.log_pair(c_i, c_j, pairs,
                                     estimator.pair_distances[(c_i, c_j)],
                                     estimator.pair_densities[(c_i, c_j)])
            self.logger.log_scores(SHRINK_FACTORS, self._intra_cluster_densities, self._separation,
                                   self._compactness, self._intra_cluster_density_change,
                                   self._cohesion, self._cdbw)

        if not self.silent:
            print(f"   簇间密度: {self._inter_cluster_density:.4f}")
            print(f"   分离度: {self._separation:.4f}")
            print(f"   紧致度: {self._compactness:.4f}")
            print(f"   簇内密度变化: {self._intra_cluster_density_change:.4f}")
            print(f"   凝聚度: {self._cohesion:.4f}")
            print(f"[CDBW] CDbw = {self._cdbw:.4f}")

        return self._cdbw

    # ------------------------------------------------------------------
    # 访问器（compute() 之前为零值）
    # ------------------------------------------------------------------

    def cdbw(self) -> float:
        return self._cdbw

    def separation(self) -> float:
        return self._separation

    def compactness(self) -> float:
        return self._compactness

    def cohesion(self) -> float:
        return self._cohesion

    def inter_cluster_density(self) -> float:
        return self._inter_cluster_density

    def intra_cluster_density_change(self) -> float:
        return self._intra_cluster_density_change

    @property
    def rcrs(self):
        """最近一次 compute() 的 RCR 表 {(i, j): [(a, b), ...]}"""
        return self._rcrs

    def summary(self) -> Dict[str, Any]:
        """最近一次 compute() 的详细指标字典"""
        return {
            'cdbw': self._cdbw,
            'separation': self._separation,
            'compactness': self._compactness,
            'cohesion': self._cohesion,
            'inter_cluster_density': self._inter_cluster_density,
            'intra_cluster_density_change': self._intra_cluster_density_change,
            'intra_cluster_densities': list(self._intra_cluster_densities),
            'n_clusters': self.partition.cluster_count(),
            'r': self._last_r,
            'rcr_counts': {pair: len(rcr) for pair, rcr in self._rcrs.items()},
        }

    # ------------------------------------------------------------------
    # 资源管理
    # ------------------------------------------------------------------

    def close(self):
        """释放空间索引"""
        self._index.close()

    @property
    def closed(self) -> bool:
        return self._index.closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
