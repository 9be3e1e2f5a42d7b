"""
Friction factor model.
"""

from .friction import chen_friction_factor
