#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
二维空间索引
基于 sklearn 的 KD 树，对全部点（包括噪声点）执行半径范围查询
"""

from __future__ import annotations

import math

import numpy as np
from sklearn.neighbors import NearestNeighbors


class SpatialIndex:
    """
    全部点坐标的不可变快照 + KD 树半径查询

    索引由创建者独占，close() 或退出 with 块后释放。
    """

    def __init__(self, X, silent=True):
        X = np.array(X, dtype=np.float64, copy=True)
        if X.ndim != 2 or X.shape[1] != 2 or X.shape[0] == 0:
            raise ValueError(f"期望形状为 (n, 2) 的非空坐标矩阵，收到形状: {X.shape}")
        X.setflags(write=False)
        self._X = X
        self._nbrs = NearestNeighbors(algorithm='kd_tree', metric='euclidean').fit(X)

        if not silent:
            print(f"[SPATIAL] KD树构建完成: {X.shape[0]} 个点")

    @property
    def points(self) -> np.ndarray:
        """只读坐标快照 (n, 2)"""
        return self._X

    @property
    def n_points(self) -> int:
        return int(self._X.shape[0])

    @property
    def closed(self) -> bool:
        return self._nbrs is None

    def radius_query(self, center, radius) -> np.ndarray:
        """
        返回与 center 欧氏距离 <= radius 的全部点索引（升序）

        Args:
            center: Point 或长度为2的坐标数组
            radius: 查询半径

        Returns:
            indices: 点索引数组
        """
        if self._nbrs is None:
            raise RuntimeError("空间索引已释放，无法继续查询")
        radius = float(radius)
        if math.isnan(radius) or radius < 0:
            raise ValueError(f"查询半径必须为非负数，当前值: {radius}")

        if hasattr(center, 'to_array'):
            center = center.to_array()
        query = np.asarray(center, dtype=np.float64).reshape(1, 2)
        indices = self._nbrs.radius_neighbors(query, radius=radius, return_distance=False)[0]
        return np.sort(indices)

    def close(self):
        """释放 KD 树"""
        self._nbrs = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
