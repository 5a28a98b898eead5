#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 密度估计模块
基于 RCR 对、收缩代表点和半径范围查询计算簇间/簇内密度

主要公式：
- 簇间距离 Dist(Ci,Cj) = mean_{(u,v)∈RCR(i,j)} ||u - v||
- 簇间密度 Dens(Ci,Cj) = mean_{(u,v)} [ ||u - v|| / (2·σ_ij) × card(mid(u,v), σ_ij, Ci ∪ Cj) ]
  其中 σ_ij = sqrt((σi² + σj²) / 2)
- 分离度 Sep = mean_i min_{j≠i} Dist(Ci,Cj) / (1 + mean_i max_{j≠i} Dens(Ci,Cj))
- 簇内密度 Intra_dens(s) = Σ_i Σ_{v∈shrunk(Ci,s)} card(v, σi, Ci) / r / (k · σ̄)
- 紧致度 Compactness = mean_s Intra_dens(s)，s ∈ {0.1, ..., 0.8}
- 凝聚度 Cohesion = Compactness / (1 + mean |Intra_dens(s_n) - Intra_dens(s_{n-1})|)
"""

from __future__ import annotations

import math
import warnings
from typing import List, Tuple

import numpy as np

from ..config import SHRINK_FACTORS
from ..core.point import Point
from ..errors import DegenerateClusterError


class DensityEstimator:
    """
    CDbw 各项密度指标

    Args:
        clusters: ClusterAggregate 列表（已选择代表点）
        rcrs: RCR 表 {(i, j): [(a, b), ...]}
        spatial_index: SpatialIndex（覆盖全部点，包括噪声点）
        cluster_ids: 每个点的簇ID数组，噪声为 -1
        r: 配置的代表点数量
    """

    def __init__(self, clusters, rcrs, spatial_index, cluster_ids, r, shrink_factors=SHRINK_FACTORS):
        self.clusters = clusters
        self.rcrs = rcrs
        self.spatial_index = spatial_index
        self.cluster_ids = np.asarray(cluster_ids)
        self.r = r
        self.shrink_factors = tuple(shrink_factors)
        self.X = clusters[0].X if clusters else None
        # 评分过程中算出的簇对距离与密度 {(i, j): value}
        self.pair_distances = {}
        self.pair_densities = {}

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)

    def _pair_stdev(self, c_i, c_j) -> float:
        stdev_i = self.clusters[c_i].stdev
        stdev_j = self.clusters[c_j].stdev
        return math.sqrt((stdev_i * stdev_i + stdev_j * stdev_j) / 2)

    def _warn_empty_rcr(self, c_i, c_j):
        warnings.warn(
            f"簇对 ({c_i}, {c_j}) 没有互为最近的代表点对，视为无限远离（距离=inf，密度=0）",
            RuntimeWarning,
            stacklevel=3,
        )

    # ------------------------------------------------------------------
    # 范围计数
    # ------------------------------------------------------------------

    def cardinality(self, u, radius, c_i, c_j=None) -> float:
        """
        以 u 为中心、radius 为半径的邻域中属于目标簇的点所占比例

        单簇形式（c_j 为 None）: count(cid == c_i) / |C_i|
        簇对形式: count(cid ∈ {c_i, c_j}) / (|C_i| + |C_j|)
        """
        neighbourhood = self.spatial_index.radius_query(u, radius)
        neighbour_ids = self.cluster_ids[neighbourhood]

        if c_j is None:
            number_of_points = int(np.count_nonzero(neighbour_ids == c_i))
            return number_of_points / self.clusters[c_i].size()

        number_of_points = int(np.count_nonzero((neighbour_ids == c_i) | (neighbour_ids == c_j)))
        return number_of_points / (self.clusters[c_i].size() + self.clusters[c_j].size())

    # ------------------------------------------------------------------
    # 分离度
    # ------------------------------------------------------------------

    def distance_between_clusters(self, c_i, c_j) -> float:
        """RCR 对的平均欧氏距离，无 RCR 对时返回 inf"""
        rcr_i_j = self.rcrs[(c_i, c_j)]
        if not rcr_i_j:
            self._warn_empty_rcr(c_i, c_j)
            self.pair_distances[(c_i, c_j)] = math.inf
            return math.inf

        sum_distances = 0.0
        for a, b in rcr_i_j:
            sum_distances += Point.from_array(self.X[a]).distance(Point.from_array(self.X[b]))
        distance = sum_distances / len(rcr_i_j)
        self.pair_distances[(c_i, c_j)] = distance
        return distance

    def density_between_clusters(self, c_i, c_j) -> float:
        """簇对 (c_i, c_j) 的簇间密度，无 RCR 对时返回 0"""
        rcr_i_j = self.rcrs[(c_i, c_j)]
        if not rcr_i_j:
            self._warn_empty_rcr(c_i, c_j)
            self.pair_densities[(c_i, c_j)] = 0.0
            return 0.0

        avg_stdev = self._pair_stdev(c_i, c_j)
        if avg_stdev == 0:
            raise DegenerateClusterError(
                c_i, self.clusters[c_i].size(), f"与簇 {c_j} 的成员都各自坐标重合，簇对标准差为0")

        sum_densities = 0.0
        for a, b in rcr_i_j:
            v_i = Point.from_array(self.X[a])
            v_j = Point.from_array(self.X[b])
            distance_vi_vj = v_i.distance(v_j)

            u = Point(v_i.x, v_i.y)
            u += v_j
            u /= 2.0

            cardinality_u = self.cardinality(u, avg_stdev, c_i, c_j)
            sum_densities += (distance_vi_vj / (2 * avg_stdev)) * cardinality_u

        density = sum_densities / len(rcr_i_j)
        self.pair_densities[(c_i, c_j)] = density
        return density

    def inter_cluster_density(self) -> float:
        """mean_i max_{j≠i} Dens(Ci, Cj)"""
        sum_max_density = 0.0
        for i in range(self.n_clusters):
            sum_max_density += max(
                self.density_between_clusters(i, j) for j in range(self.n_clusters) if j != i
            )
        return sum_max_density / self.n_clusters

    def separation(self, inter_cluster_density=None) -> float:
        """簇间分离度"""
        if inter_cluster_density is None:
            inter_cluster_density = self.inter_cluster_density()

        sum_min_distance = 0.0
        for i in range(self.n_clusters):
            sum_min_distance += min(
                self.distance_between_clusters(i, j) for j in range(self.n_clusters) if j != i
            )
        return (sum_min_distance / self.n_clusters) / (1 + inter_cluster_density)

    # ------------------------------------------------------------------
    # 紧致度与凝聚度
    # ------------------------------------------------------------------

    def density(self, s) -> float:
        """
        收缩因子 s 下的簇内密度总和

        注意：分母是配置的 r，而不是实际收缩点数量（小簇代表点不足 r 个时二者不同）
        """
        sum_cardinalities = 0.0
        for i, cluster in enumerate(self.clusters):
            for shrunk_point in cluster.shrunk_representatives(s):
                sum_cardinalities += self.cardinality(shrunk_point, cluster.stdev, i)
        return sum_cardinalities / self.r

    def average_stdev(self) -> float:
        """sqrt(mean_i σi²)"""
        return math.sqrt(sum(c.stdev * c.stdev for c in self.clusters) / self.n_clusters)

    def intra_cluster_density(self, s) -> float:
        avg_stdev = self.average_stdev()
        if avg_stdev == 0:
            raise DegenerateClusterError(0, self.clusters[0].size(), "所有簇的成员都各自坐标重合，平均标准差为0")
        return self.density(s) / (self.n_clusters * avg_stdev)

    def intra_cluster_densities(self) -> List[float]:
        """所有收缩因子下的簇内密度"""
        return [self.intra_cluster_density(s) for s in self.shrink_factors]

    def compactness_and_intra_density_changes(self) -> Tuple[float, float, List[float]]:
        """
        一次性计算紧致度和簇内密度变化，避免重复的簇内密度计算

        Returns:
            compactness: 各收缩因子下簇内密度的平均值
            intra_density_change: 相邻收缩因子簇内密度差的绝对值平均
            intra_densities: 各收缩因子下的簇内密度
        """
        intra_densities = self.intra_cluster_densities()
        compactness = sum(intra_densities) / len(intra_densities)

        changes = [abs(intra_densities[n] - intra_densities[n - 1]) for n in range(1, len(intra_densities))]
        intra_density_change = sum(changes) / len(changes) if changes else 0.0

        return compactness, intra_density_change, intra_densities

    def compactness(self) -> float:
        return self.compactness_and_intra_density_changes()[0]

    def intra_cluster_density_change(self) -> float:
        return self.compactness_and_intra_density_changes()[1]

    def cohesion(self, compactness=None, intra_density_change=None) -> float:
        """凝聚度 = 紧致度 / (1 + 簇内密度变化)"""
        if compactness is None or intra_density_change is None:
            compactness, intra_density_change, _ = self.compactness_and_intra_density_changes()
        return compactness / (1 + intra_density_change)
