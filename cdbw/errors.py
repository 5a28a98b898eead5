#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 异常定义
"""


class CDbwError(ValueError):
    """CDbw 计算相关错误的基类"""


class InvalidConfigurationError(CDbwError):
    """构造参数非法（r <= 0、点集形状不符、簇ID越界等），构造时立即失败"""


class DegenerateClusterError(CDbwError):
    """
    存在退化簇

    单点簇的标准差分母为 0（stdev = NaN），空簇没有质心，
    所有成员重合的簇标准差为 0，都会让密度与凝聚度失去意义。
    """

    def __init__(self, cluster_id, size, reason=None):
        self.cluster_id = cluster_id
        self.size = size
        if reason is None:
            reason = f"只有 {size} 个成员，无法计算标准差（至少需要2个）"
        super().__init__(f"簇 {cluster_id}: {reason}")
