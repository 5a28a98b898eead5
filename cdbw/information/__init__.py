#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CDbw Information Module
包含详细日志记录功能
"""

from .cdbw_logger import (
    CDbwLogger,
    get_logger,
    init_logger,
    reset_logger
)

__all__ = [
    'CDbwLogger',
    'get_logger',
    'init_logger',
    'reset_logger',
]
