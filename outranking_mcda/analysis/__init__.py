# -*- coding: utf-8 -*-
"""
Analysis Module
===============

Consistency checks on decision problems and assignments.
"""

from .consistency import ConsistencyChecker

__all__ = ['ConsistencyChecker']
