#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
基础数据模块
包含二维点、划分和簇聚合数据
"""

from .point import Point, points_to_array, array_to_points
from .partition import Partition, NOISE, ClusterId, PointIndex
from .cluster import ClusterAggregate, build_cluster_aggregates

__all__ = [
    'Point',
    'points_to_array',
    'array_to_points',
    'Partition',
    'NOISE',
    'ClusterId',
    'PointIndex',
    'ClusterAggregate',
    'build_cluster_aggregates',
]
