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


# Unit conversion
IN_PER_FT = 12.0  # inches per foot
SEC_PER_DAY = 86400.0  # seconds per day
PSI_PER_LBFT2 = 1.0 / 144.0  # psi per lbf/ft2 (lbm/ft3 of hydrostatic head per ft)
PSC = 14.7  # Standard pressure used in dimensionless groups (psia)

# Superficial velocity conversions (rates per day, ID in inches -> ft/s)
VSL_FACTOR = 6.5e-5  # bbl/day
VSG_FACTOR = 1.16e-5  # scf/day equivalent

# Friction factor
LAMINAR_RE = 2200  # Laminar / turbulent boundary Reynolds number

# Beggs & Brill
BB_FROUDE_FACTOR = 0.373  # N_Fr = 0.373 * vm^2 / id(in)
BB_REYNOLDS_FACTOR = 124.0  # N_Re = 124 * rho * vm * id(in) / mu(cP)
BB_FRICTION_FACTOR = 1.294e-3  # dp/dl_f = 1.294e-3 * f * rho * vm^2 / id(in)
BB_KINETIC_FACTOR = 2.16e-4  # Ek = 2.16e-4 * f * vm * vsg * rho / p
PAYNE_UPHILL = 0.924  # Payne et al. holdup correction, uphill flow
PAYNE_DOWNHILL = 0.685  # Payne et al. holdup correction, downhill flow

# Hagedorn & Brown / Griffith-Wallis
DUNS_ROS_VELOCITY = 1.938  # Liquid and gas velocity number coefficient
DUNS_ROS_DIAMETER = 120.872  # Pipe diameter number coefficient (id in ft)
DUNS_ROS_VISCOSITY = 0.15726  # Liquid viscosity number coefficient
HB_REYNOLDS_FACTOR = 2.2e-2  # N_Re = 2.2e-2 * massflow(lbm/day) / (id(ft) * mu(cP))
HB_FRICTION_DENOM = 7.413e10  # f * massflow^2 / (7.413e10 * id(ft)^5 * rho)
GRIFFITH_SLIP_VELOCITY = 0.8  # Assumed bubble flow slip velocity (ft/s)
GRIFFITH_LB_MIN = 0.13  # Floor of the Griffith bubble flow boundary
