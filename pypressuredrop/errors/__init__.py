"""
Typed failures raised by the correlation engine. All derive from
PressureDropError, itself a ValueError.
"""

from .errors import (PressureDropError, InvalidFlowRateError, DomainError,
                     UnknownFlowPatternError, ConfigurationError)
