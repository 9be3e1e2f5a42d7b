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

import logging
import math
from typing import Tuple

from pypressuredrop.classes import (dp_method, PipeSegment, FlowState, PVTProperties,
                                    CorrelationOptions, HoldupResult, PressureGradientResult)
from pypressuredrop.constants import (DUNS_ROS_DIAMETER, DUNS_ROS_VISCOSITY, HB_REYNOLDS_FACTOR,
                                      HB_FRICTION_DENOM, GRIFFITH_SLIP_VELOCITY, GRIFFITH_LB_MIN,
                                      PSC, PSI_PER_LBFT2, SEC_PER_DAY)
from pypressuredrop.errors import DomainError
from pypressuredrop.friction import chen_friction_factor
from pypressuredrop.shared_fns import check_positive, velocity_numbers
from pypressuredrop.validate import validate_pressure

logger = logging.getLogger(__name__)


# ============================================================================
#  Holdup
# ============================================================================

def hb_correlation_numbers(v_sl, v_sg, id, rho_l, mu_l, sigma_l) -> Tuple[float, float, float, float]:
    """ Returns Duns & Ros dimensionless groups (N_lv, N_gv, N_d, N_l).
        All use liquid properties, including the gas velocity number.

        v_sl, v_sg: Superficial liquid and gas velocities (ft/s)
        id: Internal diameter (inches)
        rho_l: Liquid density (lbm/cuft)
        mu_l: Liquid viscosity (cP)
        sigma_l: Liquid interfacial tension (dynes/cm)
    """
    check_positive('id', id)
    check_positive('rho_l', rho_l)
    check_positive('sigma_l', sigma_l)
    n_lv, n_gv = velocity_numbers(v_sl, v_sg, rho_l, sigma_l)
    n_d = DUNS_ROS_DIAMETER * id / 12 * math.sqrt(rho_l / sigma_l)
    n_l = DUNS_ROS_VISCOSITY * mu_l * (1 / (rho_l * sigma_l ** 3)) ** 0.25
    return n_lv, n_gv, n_d, n_l


def hb_holdup(pressure_est, id, v_sl, v_sg, rho_l, mu_l, sigma_l) -> Tuple[float, float, float]:
    """ Returns Hagedorn & Brown liquid holdup as (holdup, psi, holdup / psi), using the
        rational fits of the holdup and secondary correction charts (Economides et al. p235).
        Does not account for inclination or oil/water slip.

        pressure_est: Estimated average segment pressure (psia)
    """
    n_lv, n_gv, n_d, n_l = hb_correlation_numbers(v_sl, v_sg, id, rho_l, mu_l, sigma_l)
    if n_gv <= 0:
        raise DomainError("Hagedorn & Brown holdup group is undefined without free gas (N_gv = 0)")

    cn_l = 0.061 * n_l ** 3 - 0.0929 * n_l ** 2 + 0.0505 * n_l + 0.0019
    h_grp = n_lv / n_gv ** 0.575 * (pressure_est / PSC) ** 0.1 * cn_l / n_d

    hl_by_psi = math.sqrt((0.0047 + 1123.32 * h_grp + 729489.64 * h_grp ** 2) /
                          (1 + 1097.1566 * h_grp + 722153.97 * h_grp ** 2))

    b_grp = n_gv * n_l ** 0.38 / n_d ** 2.14
    psi = ((1.0886 - 69.9473 * b_grp + 2334.3497 * b_grp ** 2 - 12896.683 * b_grp ** 3) /
           (1 - 53.4401 * b_grp + 1517.9369 * b_grp ** 2 - 8419.8115 * b_grp ** 3))

    logger.debug("Hagedorn & Brown groups: N_lv=%.4f, N_gv=%.4f, N_d=%.4f, N_l=%.6f, CN_l=%.6f, H=%.4e, B=%.4e",
                 n_lv, n_gv, n_d, n_l, cn_l, h_grp, b_grp)
    return psi * hl_by_psi, psi, hl_by_psi


def griffith_bubble_boundary(v_m, id):
    """ Returns Griffith bubble flow boundary gas fraction, floored at 0.13.
        v_m in ft/s and id in inches
    """
    return max(1.071 - 0.2218 * v_m ** 2 / id, GRIFFITH_LB_MIN)


def griffith_wallis_holdup(v_m, v_sg, v_s=GRIFFITH_SLIP_VELOCITY):
    """ Returns bubble flow liquid holdup for a fixed slip velocity v_s (ft/s, default 0.8) """
    ratio = 1 + v_m / v_s
    disc = ratio ** 2 - 4 * v_sg / v_s
    if disc < 0:
        raise DomainError(f"Griffith-Wallis discriminant is negative ({disc:.4f})")
    return 1 - 0.5 * (ratio - math.sqrt(disc))


def _clamp_holdup(holdup, lambda_l, uphill_flow):
    # True holdup cannot be below no-slip holdup in uphill flow
    floor = lambda_l if uphill_flow else 0.0
    return min(max(holdup, floor), 1.0)


def _mass_flow(segment: PipeSegment, state: FlowState, fluid: PVTProperties):
    """ Total mass flow (lbm/day) """
    return segment.area * (state.v_sl * fluid.rho_l + state.v_sg * fluid.rho_g) * SEC_PER_DAY


# ============================================================================
#  Pressure gradient
# ============================================================================

def griffith_wallis_gradient(segment: PipeSegment, state: FlowState, fluid: PVTProperties,
                             options: CorrelationOptions = None) -> PressureGradientResult:
    """ Returns PressureGradientResult (psi over the segment) for bubble flow using the
        Griffith-Wallis slip model. The no-slip holdup comes from state, not the caller's scope.
    """
    if options is None:
        options = CorrelationOptions()
    lambda_l = state.lambda_l
    hl = _clamp_holdup(griffith_wallis_holdup(state.v_m, state.v_sg), lambda_l, options.uphill_flow)
    if hl <= 0:
        raise DomainError("Griffith-Wallis friction term is undefined at zero liquid holdup")

    rho_m = fluid.rho_l * hl + fluid.rho_g * (1 - hl)
    massflow = _mass_flow(segment, state, fluid)
    id_ft = segment.id_ft

    # Liquid viscosity only, no mixture blend
    n_re = HB_REYNOLDS_FACTOR * massflow / (id_ft * fluid.mu_l)
    fric = chen_friction_factor(n_re, segment.id, segment.roughness)

    dpdl_el = PSI_PER_LBFT2 * rho_m
    dpdl_f = (options.direction * PSI_PER_LBFT2 * fric * massflow ** 2 /
              (HB_FRICTION_DENOM * id_ft ** 5 * fluid.rho_l * hl ** 2))
    elevation = dpdl_el * segment.tvd
    friction = dpdl_f * segment.md

    logger.debug("Griffith-Wallis: lambda_l=%.4f, holdup=%.4f, N_Re=%.1f, f=%.6f, dP=%.6f psi",
                 lambda_l, hl, n_re, fric, elevation + friction)
    return PressureGradientResult(elevation=elevation, friction=friction, kinetic=0.0,
                                  total=elevation + friction,
                                  holdup=HoldupResult(no_slip=lambda_l, holdup=hl),
                                  method=dp_method.GW)


def _hagedorn_brown_general(segment: PipeSegment, state: FlowState, fluid: PVTProperties,
                            pressure_est, options: CorrelationOptions) -> PressureGradientResult:
    lambda_l = state.lambda_l
    if lambda_l <= 0:
        # Gas only; the holdup fit floors at sqrt(0.0047) and would add phantom liquid
        hl, psi = 0.0, 1.0
    else:
        hl, psi, _ = hb_holdup(pressure_est, segment.id, state.v_sl, state.v_sg,
                               fluid.rho_l, fluid.mu_l, fluid.sigma_l)
        hl = _clamp_holdup(hl, lambda_l, options.uphill_flow)

    rho_m = fluid.rho_l * hl + fluid.rho_g * (1 - hl)
    massflow = _mass_flow(segment, state, fluid)
    id_ft = segment.id_ft

    mu_m = fluid.mu_l ** hl * fluid.mu_g ** (1 - hl)
    n_re = HB_REYNOLDS_FACTOR * massflow / (id_ft * mu_m)
    fric = chen_friction_factor(n_re, segment.id, segment.roughness)

    # Kinetic term neglected
    dpdl_el = PSI_PER_LBFT2 * rho_m
    dpdl_f = options.direction * PSI_PER_LBFT2 * fric * massflow ** 2 / (HB_FRICTION_DENOM * id_ft ** 5 * rho_m)
    elevation = dpdl_el * segment.tvd
    friction = dpdl_f * segment.md

    logger.debug("Hagedorn & Brown: lambda_l=%.4f, psi=%.4f, holdup=%.4f, mu_m=%.4f cP, N_Re=%.1f, f=%.6f, dP=%.6f psi",
                 lambda_l, psi, hl, mu_m, n_re, fric, elevation + friction)
    return PressureGradientResult(elevation=elevation, friction=friction, kinetic=0.0,
                                  total=elevation + friction,
                                  holdup=HoldupResult(no_slip=lambda_l, holdup=hl, psi=psi),
                                  method=dp_method.HB)


def hagedorn_brown_gradient(segment: PipeSegment, state: FlowState, fluid: PVTProperties,
                            pressure_est, options: CorrelationOptions = None) -> PressureGradientResult:
    """ Returns PressureGradientResult (psi over the segment) using Hagedorn & Brown.
        Below the Griffith bubble flow boundary, and with options.griffith_wallis set,
        the Griffith-Wallis bubble flow model is used instead.

        Originally developed for vertical wells; inclination enters only through tvd.

        segment: PipeSegment
        state: FlowState
        fluid: PVTProperties (lumped liquid)
        pressure_est: Estimated average segment pressure (psia)
        options: CorrelationOptions. Reads uphill_flow and griffith_wallis
    """
    if options is None:
        options = CorrelationOptions()
    validate_pressure(pressure_est)

    if options.griffith_wallis:
        l_b = griffith_bubble_boundary(state.v_m, segment.id)
        if state.lambda_g < l_b:
            logger.debug("Gas fraction %.4f below bubble flow boundary %.4f, using Griffith-Wallis",
                         state.lambda_g, l_b)
            return griffith_wallis_gradient(segment, state, fluid, options)
    return _hagedorn_brown_general(segment, state, fluid, pressure_est, options)


def hagedorn_brown(md, tvd, inclination, id, v_sl, v_sg, rho_l, rho_g, sigma_l, mu_l, mu_g,
                   pressure_est, roughness=0.01, uphill_flow=True, griffith_wallis=True):
    """ Returns pressure change over a segment (psi) using Hagedorn & Brown.
        Same arguments as beggs_brill, with griffith_wallis replacing payne_correction.

        griffith_wallis: Use Griffith-Wallis below the bubble flow boundary. Defaults to True
    """
    result = hagedorn_brown_gradient(
        PipeSegment(md=md, tvd=tvd, inclination=inclination, id=id, roughness=roughness),
        FlowState(v_sl=v_sl, v_sg=v_sg),
        PVTProperties(rho_l=rho_l, rho_g=rho_g, mu_l=mu_l, mu_g=mu_g, sigma_l=sigma_l),
        pressure_est,
        CorrelationOptions(uphill_flow=uphill_flow, griffith_wallis=griffith_wallis),
    )
    return result.total
