#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
划分输入契约测试
"""

import numpy as np
import pytest

from cdbw import Partition, NOISE, InvalidConfigurationError


def test_partition_counts():
    p = Partition.from_labels([0, 0, 1, -1, 1, 2])
    assert p.object_count() == 6
    assert p.cluster_count() == 3
    assert p.cluster_id_of(3) == NOISE
    assert p.cluster_id_of(4) == 1
    assert p.size(1) == 2
    assert p.noise_count() == 1


def test_custom_noise_label_is_mapped():
    p = Partition.from_labels([0, 99, 1, 1], noise_label=99)
    assert p.cluster_id_of(1) == NOISE
    assert p.cluster_count() == 2


def test_minus_one_rejected_with_custom_noise_label():
    with pytest.raises(InvalidConfigurationError):
        Partition.from_labels([0, 99, -1, 1, 1], noise_label=99)


def test_partition_is_read_only():
    p = Partition([0, 1, 1])
    with pytest.raises(ValueError):
        p.cluster_ids[0] = 1


def test_num_clusters_from_medoids():
    p = Partition([0, 0, 1], medoid_ids=[0, 2])
    assert p.cluster_count() == 2
    assert p.medoid_ids == [0, 2]


@pytest.mark.parametrize('kwargs', [
    dict(cluster_ids=[0, 3], num_clusters=2),
    dict(cluster_ids=[0, -2]),
    dict(cluster_ids=[0, 1], medoid_ids=[0]),
    dict(cluster_ids=np.array([0.0, 1.0])),
    dict(cluster_ids=np.zeros((2, 2), dtype=int)),
])
def test_invalid_partitions_rejected(kwargs):
    with pytest.raises(InvalidConfigurationError):
        Partition(**kwargs)
