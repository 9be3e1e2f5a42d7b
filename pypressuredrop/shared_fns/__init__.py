"""
Helpers shared across the correlation modules: range checks, Duns & Ros
velocity numbers and array broadcasting.
"""

from .shared_fns import (check_positive, check_non_negative, check_range, neg_pow,
                         velocity_numbers, convert_to_numpy, broadcast_inputs)
