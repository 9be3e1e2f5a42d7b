"""
Beggs & Brill multiphase flow correlation with Payne et al. holdup correction.
"""

from .beggsbrill import (BBCoefficients, BB_DOWNHILL, bb_coefficients, froude_number,
                         bb_flow_pattern, bb_adjusted_holdup, bb_transition_weight, bb_holdup,
                         bb_friction_ratio, beggs_brill_gradient, beggs_brill)
