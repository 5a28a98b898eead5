#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
KD树半径查询测试
"""

import numpy as np
import pytest

from cdbw import SpatialIndex, Point


@pytest.fixture
def index():
    X = np.array([[0.0, 0.0], [1.0, 0.0], [3.0, 0.0], [0.0, 2.0]])
    with SpatialIndex(X) as idx:
        yield idx


def test_radius_query_closed_ball(index):
    np.testing.assert_array_equal(index.radius_query(Point(0.0, 0.0), 1.0), [0, 1])
    np.testing.assert_array_equal(index.radius_query([0.0, 0.0], 2.0), [0, 1, 3])
    np.testing.assert_array_equal(index.radius_query([0.0, 0.0], 0.0), [0])


def test_radius_query_empty(index):
    assert index.radius_query([10.0, 10.0], 1.0).size == 0


def test_invalid_radius(index):
    with pytest.raises(ValueError):
        index.radius_query([0.0, 0.0], -1.0)
    with pytest.raises(ValueError):
        index.radius_query([0.0, 0.0], float('nan'))


def test_snapshot_is_independent_of_input():
    X = np.array([[0.0, 0.0], [5.0, 5.0]])
    idx = SpatialIndex(X)
    X[1] = [0.1, 0.1]
    np.testing.assert_array_equal(idx.radius_query([0.0, 0.0], 1.0), [0])
    assert not idx.points.flags.writeable


def test_close_releases_index():
    X = np.array([[0.0, 0.0], [1.0, 1.0]])
    with SpatialIndex(X) as idx:
        assert not idx.closed
    assert idx.closed
    with pytest.raises(RuntimeError):
        idx.radius_query([0.0, 0.0], 1.0)


@pytest.mark.parametrize('X', [np.zeros((0, 2)), np.zeros((3, 3)), np.zeros(4)])
def test_rejects_bad_shapes(X):
    with pytest.raises(ValueError):
        SpatialIndex(X)
