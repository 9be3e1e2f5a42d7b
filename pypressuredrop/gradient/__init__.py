"""
Common per segment contract for all correlations, plus a tabulated sweep.
"""

from .gradient import pressure_gradient, segment_dp, gradient_table, format_gradient_table
