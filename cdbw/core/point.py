#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
二维点类型
支持向量加法、标量除法和欧氏距离
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np


@dataclass
class Point:
    """二维坐标点 (x, y)"""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Point) -> Point:
        self.x += other.x
        self.y += other.y
        return self

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def __itruediv__(self, scalar: float) -> Point:
        self.x /= scalar
        self.y /= scalar
        return self

    def distance(self, other: Point) -> float:
        """欧氏距离"""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr) -> Point:
        return cls(float(arr[0]), float(arr[1]))


def points_to_array(points) -> np.ndarray:
    """
    将点集统一转换为 (n, 2) 的 float64 数组

    Args:
        points: Point 序列，或形状为 (n, 2) 的数组

    Returns:
        X: 坐标矩阵 (n, 2)
    """
    if isinstance(points, np.ndarray):
        return np.asarray(points, dtype=np.float64)
    points = list(points)
    if points and isinstance(points[0], Point):
        return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)
    return np.asarray(points, dtype=np.float64)


def array_to_points(X: Iterable) -> List[Point]:
    return [Point.from_array(row) for row in X]
