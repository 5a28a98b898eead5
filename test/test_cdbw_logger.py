#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 详细日志记录器测试
"""

import os

import pytest

from cdbw import CDbwEngine, CDbwLogger, DensityEstimator, get_logger, init_logger, reset_logger


def test_global_logger_disabled_by_default():
    logger = get_logger()
    assert not logger.enabled
    assert get_logger() is logger
    assert logger.write_log() is None
    reset_logger()
    assert get_logger() is not logger


def test_engine_records_run(squares, tmp_path):
    X, labels = squares
    logger = init_logger(log_dir=str(tmp_path), enabled=True)
    CDbwEngine(labels, X, r=3).compute()

    assert logger.metadata['n_clusters'] == 2
    assert logger.metadata['r'] == 3
    assert [rec['cluster_id'] for rec in logger.cluster_records] == [0, 1]
    assert {rec['pair'] for rec in logger.pair_records} == {(0, 1), (1, 0)}
    assert logger.score_record['separation'] == 9.0

    log_path = logger.write_log('run.txt')
    assert log_path == os.path.join(str(tmp_path), 'run.txt')
    with open(log_path, encoding='utf-8') as f:
        content = f.read()
    assert 'CDbw' in content
    assert '簇对 (0, 1)' in content
    assert '(1,5)' in content


def test_explicit_logger_and_clear(squares, tmp_path):
    X, labels = squares
    logger = CDbwLogger(log_dir=str(tmp_path / 'logs'), enabled=True)
    assert os.path.isdir(str(tmp_path / 'logs'))
    engine = CDbwEngine(labels, X, r=3, logger=logger)
    engine.compute()
    engine.compute()
    assert len(logger.cluster_records) == 2
    assert not get_logger().enabled
    logger.clear()
    assert logger.cluster_records == [] and logger.score_record is None


def test_pair_records_reuse_scoring_pass(squares, tmp_path, monkeypatch):
    # 开启日志时每个有序簇对的距离和密度仍只计算一次
    calls = {'distance': [], 'density': []}
    distance_between_clusters = DensityEstimator.distance_between_clusters
    density_between_clusters = DensityEstimator.density_between_clusters

    def counting_distance(self, c_i, c_j):
        calls['distance'].append((c_i, c_j))
        return distance_between_clusters(self, c_i, c_j)

    def counting_density(self, c_i, c_j):
        calls['density'].append((c_i, c_j))
        return density_between_clusters(self, c_i, c_j)

    monkeypatch.setattr(DensityEstimator, 'distance_between_clusters', counting_distance)
    monkeypatch.setattr(DensityEstimator, 'density_between_clusters', counting_density)

    X, labels = squares
    logger = CDbwLogger(log_dir=str(tmp_path), enabled=True)
    engine = CDbwEngine(labels, X, r=3, logger=logger)
    engine.compute()

    assert sorted(calls['distance']) == [(0, 1), (1, 0)]
    assert sorted(calls['density']) == [(0, 1), (1, 0)]
    records = {rec['pair']: rec for rec in logger.pair_records}
    assert records[(0, 1)]['distance'] == 9.0
    assert records[(1, 0)]['distance'] == 9.0
    mean_density = (records[(0, 1)]['density'] + records[(1, 0)]['density']) / 2
    assert mean_density == pytest.approx(engine.inter_cluster_density())
