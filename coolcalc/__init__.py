"""
CoolCalc freezer heat load engine
Heat load calculation and PDF heat load sheets for freezer rooms
"""

__version__ = "1.0.0"
