#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
划分（Partition）输入契约
每个对象映射到一个簇ID或噪声标签，簇ID为稠密索引 0..k-1
"""

from __future__ import annotations

from typing import NewType, Optional, Sequence

import numpy as np

from ..config import noise_label as _default_noise_label
from ..errors import InvalidConfigurationError

ClusterId = NewType('ClusterId', int)
PointIndex = NewType('PointIndex', int)

# 与 sklearn DBSCAN/HDBSCAN 的噪声标签一致
NOISE = -1


class Partition:
    """
    只读划分

    Attributes:
        cluster_ids: 每个对象的簇ID (n_objects,)，噪声为 NOISE
        medoid_ids: 每个簇的代表对象ID（可选），长度为簇数量
    """

    def __init__(self, cluster_ids, num_clusters: Optional[int] = None,
                 medoid_ids: Optional[Sequence[int]] = None):
        cluster_ids = np.asarray(cluster_ids)
        if cluster_ids.ndim != 1:
            raise InvalidConfigurationError(f"期望一维簇ID数组，收到形状: {cluster_ids.shape}")
        if cluster_ids.size and not np.issubdtype(cluster_ids.dtype, np.integer):
            raise InvalidConfigurationError(f"簇ID必须为整数，收到类型: {cluster_ids.dtype}")
        cluster_ids = cluster_ids.astype(np.int64)

        classified = cluster_ids[cluster_ids != NOISE]
        if np.any(classified < 0):
            raise InvalidConfigurationError(f"非法簇ID: {sorted(set(classified[classified < 0].tolist()))}")

        if num_clusters is None:
            if medoid_ids is not None:
                num_clusters = len(medoid_ids)
            else:
                num_clusters = int(classified.max()) + 1 if classified.size else 0
        if classified.size and int(classified.max()) >= num_clusters:
            raise InvalidConfigurationError(
                f"簇ID {int(classified.max())} 超出范围 0..{num_clusters - 1}")
        if medoid_ids is not None and len(medoid_ids) != num_clusters:
            raise InvalidConfigurationError(
                f"medoid_ids 数量({len(medoid_ids)})与簇数量({num_clusters})不一致")

        self.cluster_ids = cluster_ids
        self.cluster_ids.setflags(write=False)
        self.medoid_ids = list(medoid_ids) if medoid_ids is not None else None
        self._num_clusters = int(num_clusters)

    @classmethod
    def from_labels(cls, labels, noise_label: Optional[int] = None) -> Partition:
        """
        从聚类标签数组构建划分

        噪声标签统一映射为 NOISE，其余标签必须已经是稠密的 0..k-1；
        使用自定义噪声标签时，标签中出现 -1 视为配置错误

        Args:
            labels: 聚类标签 (n_samples,)
            noise_label: 噪声标签，默认取配置 CDBW_NOISE_LABEL
        """
        if noise_label is None:
            noise_label = _default_noise_label
        labels = np.asarray(labels)
        if labels.size and not np.issubdtype(labels.dtype, np.integer):
            raise InvalidConfigurationError(f"聚类标签必须为整数，收到类型: {labels.dtype}")
        # 自定义噪声标签时 -1 不再是噪声，也不是合法的簇ID
        if noise_label != NOISE and np.any(labels == NOISE):
            raise InvalidConfigurationError(
                f"噪声标签为 {noise_label} 时标签中不能出现 {NOISE}")
        cluster_ids = np.where(labels == noise_label, NOISE, labels)
        return cls(cluster_ids)

    def object_count(self) -> int:
        return int(self.cluster_ids.shape[0])

    def cluster_count(self) -> int:
        return self._num_clusters

    def cluster_id_of(self, object_index: int) -> int:
        return int(self.cluster_ids[object_index])

    def size(self, cluster_id: int) -> int:
        """簇成员数量"""
        return int(np.count_nonzero(self.cluster_ids == cluster_id))

    def noise_count(self) -> int:
        return int(np.count_nonzero(self.cluster_ids == NOISE))

    def __len__(self):
        return self.object_count()
