"""
Hagedorn & Brown correlation with Griffith-Wallis bubble flow.
"""

from .hagedornbrown import (hb_correlation_numbers, hb_holdup, griffith_bubble_boundary,
                            griffith_wallis_holdup, griffith_wallis_gradient,
                            hagedorn_brown_gradient, hagedorn_brown)
