"""
eSigma assessment platform service layer
"""

__version__ = "1.0.0"
