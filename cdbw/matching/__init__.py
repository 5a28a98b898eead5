#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
RCR 匹配模块
"""

from .rcr import RCRMatcher, RCRPair, RCRTable

__all__ = [
    'RCRMatcher',
    'RCRPair',
    'RCRTable',
]
