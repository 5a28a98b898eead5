#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 计算详细日志记录器
用于记录每个簇的统计量、每个簇对的 RCR 匹配结果以及多尺度簇内密度
"""

import os
from datetime import datetime

from ..config import cdbw_log_dir


class CDbwLogger:
    """
    CDbw 计算详细日志记录器

    记录内容包括：
    - 对象数、簇数、噪声点数、代表点数量 r
    - 每个簇的大小、质心、标准差、代表点
    - 每个有序簇对的 RCR 对数量、簇间距离、簇间密度
    - 各收缩因子下的簇内密度和最终得分
    """

    def __init__(self, log_dir=None, enabled=True):
        """
        初始化日志记录器

        Args:
            log_dir: 日志文件保存目录
            enabled: 是否启用日志记录
        """
        self.enabled = enabled
        self.log_dir = log_dir or cdbw_log_dir
        self.metadata = {}
        self.cluster_records = []
        self.pair_records = []
        self.score_record = None

        if self.enabled:
            os.makedirs(self.log_dir, exist_ok=True)

    def set_metadata(self, dataset_name, n_objects, n_clusters, n_noise, r):
        """
        设置元数据

        Args:
            dataset_name: 数据集名称
            n_objects: 总对象数（包括噪声点）
            n_clusters: 簇数量
            n_noise: 噪声点数量
            r: 代表点数量
        """
        if not self.enabled:
            return

        self.metadata = {
            'dataset_name': dataset_name,
            'n_objects': n_objects,
            'n_clusters': n_clusters,
            'n_noise': n_noise,
            'r': r,
            'timestamp': datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        }

    def log_cluster(self, cluster):
        """记录单个簇的聚合数据"""
        if not self.enabled:
            return

        self.cluster_records.append({
            'cluster_id': cluster.id,
            'size': cluster.size(),
            'centroid': (cluster.centroid.x, cluster.centroid.y),
            'stdev': cluster.stdev,
            'representatives': list(cluster.representatives),
        })

    def log_pair(self, c_i, c_j, rcr_pairs, distance, density):
        """
        记录单个有序簇对的 RCR 匹配结果

        Args:
            c_i, c_j: 簇ID
            rcr_pairs: RCR 对列表
            distance: 簇间距离
            density: 簇间密度
        """
        if not self.enabled:
            return

        self.pair_records.append({
            'pair': (c_i, c_j),
            'n_rcr': len(rcr_pairs),
            'rcr_pairs': list(rcr_pairs),
            'distance': distance,
            'density': density,
        })

    def log_scores(self, shrink_factors, intra_densities, separation, compactness,
                   intra_density_change, cohesion, cdbw):
        """记录最终得分"""
        if not self.enabled:
            return

        self.score_record = {
            'intra_densities': list(zip(shrink_factors, intra_densities)),
            'separation': separation,
            'compactness': compactness,
            'intra_density_change': intra_density_change,
            'cohesion': cohesion,
            'cdbw': cdbw,
        }

    def write_log(self, filename=None):
        """
        将日志写入文件

        Args:
            filename: 日志文件名（不含路径），如果为None则自动生成

        Returns:
            log_path: 日志文件路径，未启用时返回None
        """
        if not self.enabled:
            return None

        if filename is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            dataset = self.metadata.get('dataset_name', 'unknown')
            filename = f"cdbw_{dataset}_{timestamp}.txt"

        log_path = os.path.join(self.log_dir, filename)

        with open(log_path, 'w', encoding='utf-8') as f:
            f.write("=" * 100 + "\n")
            f.write("CDbw 计算详细日志\n")
            f.write("=" * 100 + "\n\n")

            f.write("【元数据】\n")
            f.write(f"数据集名称: {self.metadata.get('dataset_name', 'N/A')}\n")
            f.write(f"总对象数: {self.metadata.get('n_objects', 'N/A')}\n")
            f.write(f"簇数量: {self.metadata.get('n_clusters', 'N/A')}\n")
            f.write(f"噪声点数量: {self.metadata.get('n_noise', 'N/A')}\n")
            f.write(f"代表点数量 r: {self.metadata.get('r', 'N/A')}\n")
            f.write(f"记录时间: {self.metadata.get('timestamp', 'N/A')}\n")
            f.write("\n" + "=" * 100 + "\n\n")

            f.write("【簇统计】\n\n")
            for record in self.cluster_records:
                cx, cy = record['centroid']
                f.write(f"簇{record['cluster_id']}: 大小={record['size']}, "
                        f"质心=({cx:.6f}, {cy:.6f}), 标准差={record['stdev']:.6f}\n")
                f.write(f"  代表点: {record['representatives']}\n")

            f.write(f"\n{'─' * 100}\n")
            f.write("【簇对 RCR 匹配】\n\n")
            for record in self.pair_records:
                c_i, c_j = record['pair']
                f.write(f"簇对 ({c_i}, {c_j}): RCR对数量={record['n_rcr']}, "
                        f"距离={record['distance']:.6f}, 密度={record['density']:.6f}\n")
                if record['n_rcr'] > 0:
                    pairs_str = ' '.join(f"({a},{b})" for a, b in record['rcr_pairs'])
                    f.write(f"  RCR对: {pairs_str}\n")

            if self.score_record is not None:
                f.write(f"\n{'─' * 100}\n")
                f.write("【得分】\n\n")
                for s, value in self.score_record['intra_densities']:
                    f.write(f"  收缩因子 s={s:.1f}: 簇内密度={value:.6f}\n")
                f.write(f"分离度: {self.score_record['separation']:.6f}\n")
                f.write(f"紧致度: {self.score_record['compactness']:.6f}\n")
                f.write(f"簇内密度变化: {self.score_record['intra_density_change']:.6f}\n")
                f.write(f"凝聚度: {self.score_record['cohesion']:.6f}\n")
                f.write(f"CDbw: {self.score_record['cdbw']:.6f}\n")

            f.write("\n" + "=" * 100 + "\n")
            f.write(f"日志记录完成，共记录 {len(self.cluster_records)} 个簇、{len(self.pair_records)} 个簇对\n")
            f.write("=" * 100 + "\n")

        print(f"\n📝 CDbw 计算日志已保存至: {log_path}")
        return log_path

    def clear(self):
        """清空记录"""
        self.cluster_records = []
        self.pair_records = []
        self.score_record = None


# 全局日志实例（用于简化调用）
_global_logger = None


def get_logger():
    """获取全局日志实例"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CDbwLogger(enabled=False)
    return _global_logger


def init_logger(log_dir=None, enabled=True):
    """
    初始化全局日志实例

    Args:
        log_dir: 日志保存目录
        enabled: 是否启用

    Returns:
        logger: CDbwLogger实例
    """
    global _global_logger
    _global_logger = CDbwLogger(log_dir=log_dir, enabled=enabled)
    return _global_logger


def reset_logger():
    """重置全局日志实例"""
    global _global_logger
    _global_logger = None
