"""
Infrastructure Module

Operational concerns that sit beside the search dispatch: metrics.
"""
