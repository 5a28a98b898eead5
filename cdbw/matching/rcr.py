#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RCR（互为最近代表点）匹配模块

对每个有序簇对 (i, j)：
- 簇 i 的每个代表点 a 在簇 j 中找最近代表点 b，得到候选 (a, b)
- 簇 j 的每个代表点 b' 在簇 i 中找最近代表点 a'，得到候选 (b', a')
- 当 (a, b) 存在反向候选 (b, a) 时确认为 RCR 对
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from tqdm import tqdm

RCRPair = Tuple[int, int]
RCRTable = Dict[Tuple[int, int], List[RCRPair]]


class RCRMatcher:
    """
    计算所有有序簇对之间的 RCR 对

    Args:
        clusters: 已选择代表点的 ClusterAggregate 列表
    """

    def __init__(self, clusters):
        self.clusters = clusters

    def compute_rcrs_i_j(self, c_i, c_j) -> List[RCRPair]:
        """计算单个有序簇对 (c_i, c_j) 的 RCR 对，保留全部匹配"""
        cluster_i = self.clusters[c_i]
        cluster_j = self.clusters[c_j]
        reps_i = cluster_i.representatives
        reps_j = cluster_j.representatives
        X = cluster_i.X

        rcs_i_j = [(a, cluster_j.closest_representative(X[a])) for a in reps_i]
        rcs_j_i = [(b, cluster_i.closest_representative(X[b])) for b in reps_j]

        result = []
        for a, b in rcs_i_j:
            for b_rev, a_rev in rcs_j_i:
                if a == a_rev and b == b_rev:
                    result.append((a, b))
        return result

    def compute_rcrs(self, silent=True) -> RCRTable:
        """
        计算所有有序簇对的 RCR 表

        Returns:
            rcrs: {(i, j): [(a, b), ...]}，i != j
        """
        n_clusters = len(self.clusters)
        pairs = [(i, j) for i in range(n_clusters) for j in range(n_clusters) if i != j]

        rcrs: RCRTable = {}
        for i, j in tqdm(pairs, desc="RCR匹配", disable=silent):
            rcrs[(i, j)] = self.compute_rcrs_i_j(i, j)

        if not silent:
            counts = [len(v) for v in rcrs.values()]
            empty = sum(1 for c in counts if c == 0)
            print(f"[RCR] 有序簇对数量: {len(pairs)}")
            if counts:
                print(f"   RCR对数量: min={min(counts)}, max={max(counts)}, 总计={sum(counts)}")
            print(f"   无RCR对的簇对: {empty}")

        return rcrs
