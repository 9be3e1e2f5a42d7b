#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPressureDrop - Multiphase Pipe Flow Pressure Gradient Correlations
              Copyright (C) 2026, pyPressureDrop contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pypressuredrop.errors import InvalidFlowRateError, ConfigurationError
from pypressuredrop.constants import IN_PER_FT
from pypressuredrop.shared_fns import check_positive, check_non_negative, check_range

class flow_pattern(Enum):  # Beggs & Brill flow pattern
    SEGREGATED = 0
    INTERMITTENT = 1
    DISTRIBUTED = 2
    TRANSITION = 3

class dp_method(Enum):  # Pressure gradient correlation
    HB = 0  # Hagedorn & Brown (with optional Griffith-Wallis bubble flow)
    BB = 1  # Beggs & Brill
    GW = 2  # Griffith-Wallis bubble flow, only selected from within HB

class_dic = {
    "flowpattern": flow_pattern,
    "dpmethod": dp_method,
}


@dataclass(frozen=True)
class FlowRates:
    """ Surface production rates for one segment.

        q_o: Oil rate (bbl/day)
        q_w: Water rate (bbl/day)
        glr: Gas-liquid ratio (scf/bbl)
        r_s: Solution gas-oil ratio (scf/bbl)
    """
    q_o: float
    q_w: float
    glr: float = 0.0
    r_s: float = 0.0

    def __post_init__(self):
        for name in ('q_o', 'q_w', 'glr', 'r_s'):
            check_non_negative(name, getattr(self, name))

    @property
    def wor(self):
        """ Water-oil ratio, inf at 100% water cut """
        if self.q_o > 0:
            return self.q_w / self.q_o
        return math.inf

    @property
    def liquid_rate(self):
        return self.q_o + self.q_w


@dataclass(frozen=True)
class PVTProperties:
    """ Fluid properties at segment conditions with oil and water lumped into one liquid.

        b_o, b_w, b_g: Oil, water and gas formation volume factors
        rho_l, rho_g: Liquid and gas density (lbm/cuft)
        mu_l, mu_g: Liquid and gas viscosity (cP)
        sigma_l: Liquid interfacial tension (dynes/cm)
    """
    rho_l: float
    rho_g: float
    mu_l: float
    mu_g: float
    sigma_l: float
    b_o: float = 1.0
    b_w: float = 1.0
    b_g: float = 1.0

    def __post_init__(self):
        for name in ('rho_l', 'rho_g', 'mu_l', 'mu_g', 'sigma_l', 'b_o', 'b_w', 'b_g'):
            check_positive(name, getattr(self, name))


@dataclass(frozen=True)
class PipeSegment:
    """ Single pipe segment with uniform geometry and inclination.

        md: Measured depth increment of this segment (ft)
        tvd: True vertical depth increment of this segment (ft). md >= tvd >= 0
        inclination: Inclination from vertical (degrees). 0=vertical, 90=horizontal
        id: Internal diameter (inches)
        roughness: Absolute pipe roughness (inches). Defaults to 0.01
    """
    md: float
    tvd: float
    inclination: float
    id: float
    roughness: float = 0.01

    def __post_init__(self):
        check_non_negative('md', self.md)
        check_non_negative('tvd', self.tvd)
        if self.tvd > self.md * (1 + 1e-9) + 1e-9:
            raise ConfigurationError(f"tvd ({self.tvd} ft) cannot exceed md ({self.md} ft)")
        check_range('inclination', self.inclination, 0.0, 90.0)
        check_positive('id', self.id)
        check_non_negative('roughness', self.roughness)

    @property
    def id_ft(self):
        """Internal diameter (ft)."""
        return self.id / IN_PER_FT

    @property
    def area(self):
        """Flow area (sqft)."""
        return math.pi * (self.id / 24.0) ** 2

    @property
    def alpha(self):
        """Angle from horizontal (radians) for Beggs & Brill."""
        return (90.0 - self.inclination) * math.pi / 180.0


@dataclass(frozen=True)
class FlowState:
    """ Superficial velocities at segment conditions.

        v_sl: Superficial liquid velocity (ft/s)
        v_sg: Superficial gas velocity (ft/s)
    """
    v_sl: float
    v_sg: float

    def __post_init__(self):
        check_non_negative('v_sl', self.v_sl)
        check_non_negative('v_sg', self.v_sg)

    @property
    def v_m(self):
        return self.v_sl + self.v_sg

    @property
    def lambda_l(self):
        """No-slip liquid holdup, v_sl / v_m."""
        if self.v_m == 0:
            raise InvalidFlowRateError("No-slip holdup is undefined at zero mixture velocity")
        return self.v_sl / self.v_m

    @property
    def lambda_g(self):
        return 1.0 - self.lambda_l


@dataclass(frozen=True)
class CorrelationOptions:
    """ Per call switches. Each correlation reads only the flags that apply to it.

        uphill_flow: True for producers (flow up the segment), False for injectors. Defaults to True
        payne_correction: Apply Payne et al. holdup correction (Beggs & Brill). Defaults to True
        griffith_wallis: Use Griffith-Wallis below the bubble flow boundary (Hagedorn & Brown). Defaults to True
    """
    uphill_flow: bool = True
    payne_correction: bool = True
    griffith_wallis: bool = True

    @property
    def direction(self):
        """ +1 uphill, -1 downhill; friction always opposes flow """
        return 1 if self.uphill_flow else -1


@dataclass(frozen=True)
class HoldupResult:
    no_slip: float  # lambda_l
    holdup: float  # Adjusted (in-situ) liquid holdup
    pattern: Optional[flow_pattern] = None  # Beggs & Brill only
    psi: float = 1.0  # Inclination (BB) or secondary (HB) correction factor


@dataclass(frozen=True)
class PressureGradientResult:
    """ Pressure change over one segment (psi), split by component.
        Positive values mean pressure increases with depth.
    """
    elevation: float
    friction: float
    kinetic: float
    total: float
    holdup: HoldupResult
    method: dp_method
