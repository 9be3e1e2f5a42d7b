"""
Superficial velocities and flow weighted mixture properties.
"""

from .velocity import (liquid_velocity_superficial, gas_velocity_superficial, mixture_property,
                       mixture_velocity, no_slip_holdup, lumped_pvt, flow_state)
