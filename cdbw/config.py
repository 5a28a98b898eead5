#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw 评估参数集中配置
允许通过环境变量快速切换默认参数

使用示例:
    from cdbw.config import default_representatives, cdbw_log_dir

环境变量:
    export CDBW_REPRESENTATIVES=10       # 每个簇的代表点数量 r
    export CDBW_LOG_DIR=/custom/log/dir  # 详细日志保存目录
    export CDBW_NOISE_LABEL=-1           # 噪声/未分类标签
"""

import os

# =============================================================================
# 代表点与噪声标签
# =============================================================================

default_representatives = int(os.getenv('CDBW_REPRESENTATIVES', '10'))
noise_label = int(os.getenv('CDBW_NOISE_LABEL', '-1'))


# =============================================================================
# 多尺度收缩因子（固定8个采样点: 0.1 ~ 0.8）
# =============================================================================

SHRINK_FACTORS = tuple(round(0.1 * i, 1) for i in range(1, 9))


# =============================================================================
# 日志目录
# =============================================================================

cdbw_log_dir = os.getenv('CDBW_LOG_DIR', os.path.join('.', 'logs', 'cdbw'))
