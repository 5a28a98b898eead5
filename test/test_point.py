#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
二维点类型测试
"""

import numpy as np
import pytest

from cdbw.core.point import Point, points_to_array, array_to_points


def test_point_addition_and_division():
    p = Point(1.0, 2.0) + Point(3.0, 4.0)
    assert p == Point(4.0, 6.0)
    assert p / 2.0 == Point(2.0, 3.0)


def test_point_inplace_operations_mutate():
    p = Point(1.0, 1.0)
    same = p
    p += Point(1.0, 3.0)
    p /= 2.0
    assert same is p
    assert p == Point(1.0, 2.0)


def test_point_distance():
    assert Point(0.0, 0.0).distance(Point(3.0, 4.0)) == pytest.approx(5.0)
    assert Point(1.5, -2.0).distance(Point(1.5, -2.0)) == 0.0


def test_points_to_array_accepts_points_and_arrays():
    pts = [Point(0.0, 1.0), Point(2.0, 3.0)]
    X = points_to_array(pts)
    assert X.shape == (2, 2)
    np.testing.assert_array_equal(X, [[0.0, 1.0], [2.0, 3.0]])
    np.testing.assert_array_equal(points_to_array([[0, 1], [2, 3]]), X)
    assert array_to_points(X) == pts
