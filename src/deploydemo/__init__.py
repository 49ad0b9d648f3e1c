"""
deploydemo: a minimal full-stack app for checking that a deployment works.
"""

__version__ = "1.0.0"
