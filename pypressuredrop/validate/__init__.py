"""
Method name and input validation.
"""

from .validate import validate_methods, validate_pressure
