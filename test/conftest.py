#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
测试公用数据
"""

import numpy as np
import pytest

from cdbw import reset_logger

SQUARE = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.5, 0.5)]


def two_squares(gap=10.0):
    """两个 5 点方形簇，簇1沿 x 轴平移 gap"""
    X = np.array(SQUARE + [(x + gap, y) for x, y in SQUARE], dtype=np.float64)
    labels = np.array([0] * 5 + [1] * 5)
    return X, labels


@pytest.fixture
def squares():
    return two_squares()


@pytest.fixture(autouse=True)
def _clean_global_logger():
    reset_logger()
    yield
    reset_logger()
