#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
簇聚合数据模块
维护每个簇的成员、质心、标准差和代表点

代表点选择采用 farthest-first 贪心策略：
1. 以质心作为初始参考点
2. 每轮在未选中的成员中选出距离“上一个参考点”最远的点
3. 被选中的点成为下一轮的参考点，重复 r 轮
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from .point import Point


class ClusterAggregate:
    """
    单个簇的派生数据

    Attributes:
        id: 簇ID
        members: 成员点索引（按划分中的出现顺序）
        centroid: 质心
        stdev: 成员到质心距离的样本标准差（单点簇为 NaN）
        representatives: 代表点索引（数量 <= r）
    """

    def __init__(self, cluster_id, X):
        self.id = cluster_id
        self.X = X
        self.members: List[int] = []
        self.centroid = Point(math.nan, math.nan)
        self.stdev = math.nan
        self.representatives: List[int] = []

    def add_point(self, point_id):
        self.members.append(int(point_id))

    def size(self) -> int:
        return len(self.members)

    def compute_data(self):
        """计算质心和标准差"""
        if not self.members:
            return

        member_coords = self.X[self.members]
        self.centroid = Point.from_array(member_coords.mean(axis=0))

        if len(self.members) == 1:
            # 分母 m-1 为 0
            self.stdev = math.nan
            return

        distances = np.linalg.norm(member_coords - self.centroid.to_array(), axis=1)
        sum_squares = float(np.sum(distances * distances))
        self.stdev = math.sqrt(sum_squares / (len(self.members) - 1))

    def choose_representatives(self, r):
        """
        farthest-first 选择代表点

        Args:
            r: 目标代表点数量，r >= 簇大小时全部成员都是代表点

        Returns:
            representatives: 代表点索引列表
        """
        if r >= len(self.members):
            self.representatives = list(self.members)
            return self.representatives

        member_coords = self.X[self.members]
        used = np.zeros(len(self.members), dtype=bool)
        reference = self.centroid.to_array()

        representatives = []
        for _ in range(r):
            distances = np.linalg.norm(member_coords - reference, axis=1)
            distances[used] = -np.inf
            # argmax 返回第一个最大值，平局时按成员顺序先到先得
            position = int(np.argmax(distances))
            used[position] = True
            representatives.append(self.members[position])
            reference = member_coords[position]

        self.representatives = representatives
        return self.representatives

    def closest_representative(self, p):
        """
        返回距离点 p 最近的代表点索引（平局时取第一个）

        Args:
            p: Point 或长度为2的坐标数组
        """
        if not self.representatives:
            raise ValueError(f"簇 {self.id} 尚未选择代表点")
        if isinstance(p, Point):
            p = p.to_array()
        distances = np.linalg.norm(self.X[self.representatives] - p, axis=1)
        return self.representatives[int(np.argmin(distances))]

    def shrunk_representatives(self, s) -> List[Point]:
        """
        将代表点按因子 s 向质心收缩: p' = p + s * (centroid - p)

        Args:
            s: 收缩因子，0 表示不收缩
        """
        result = []
        for rep in self.representatives:
            x, y = (float(v) for v in self.X[rep])
            result.append(Point(x + s * (self.centroid.x - x),
                                y + s * (self.centroid.y - y)))
        return result

    def __repr__(self):
        return (f"ClusterAggregate(id={self.id}, size={self.size()}, "
                f"centroid=({self.centroid.x:.4f}, {self.centroid.y:.4f}), stdev={self.stdev:.4f}, "
                f"n_representatives={len(self.representatives)})")


def build_cluster_aggregates(partition, X) -> List[ClusterAggregate]:
    """
    根据划分构建所有簇的聚合数据（跳过噪声点）

    Args:
        partition: Partition 对象
        X: 坐标矩阵 (n_samples, 2)

    Returns:
        clusters: 按簇ID排列的 ClusterAggregate 列表
    """
    clusters = [ClusterAggregate(i, X) for i in range(partition.cluster_count())]
    for idx, cid in enumerate(partition.cluster_ids):
        if cid >= 0:
            clusters[cid].add_point(idx)

    for cluster in clusters:
        cluster.compute_data()

    return clusters
