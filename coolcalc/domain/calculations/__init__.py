"""
Freezer heat load calculations
"""

from .freezer_load import calculate_freezer_heat_load

__all__ = ['calculate_freezer_heat_load']
