"""
Enumerations and immutable per call value records.
"""

from .classes import (flow_pattern, dp_method, class_dic, FlowRates, PVTProperties,
                      PipeSegment, FlowState, CorrelationOptions, HoldupResult,
                      PressureGradientResult)
