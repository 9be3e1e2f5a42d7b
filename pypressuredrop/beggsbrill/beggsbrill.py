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
from dataclasses import dataclass
from typing import Optional, Tuple

from pypressuredrop.classes import (flow_pattern, dp_method, PipeSegment, FlowState, PVTProperties,
                                    CorrelationOptions, HoldupResult, PressureGradientResult)
from pypressuredrop.constants import (BB_FROUDE_FACTOR, BB_REYNOLDS_FACTOR, BB_FRICTION_FACTOR,
                                      BB_KINETIC_FACTOR, PAYNE_UPHILL, PAYNE_DOWNHILL, PSI_PER_LBFT2)
from pypressuredrop.errors import DomainError, UnknownFlowPatternError
from pypressuredrop.friction import chen_friction_factor
from pypressuredrop.shared_fns import check_positive, neg_pow, velocity_numbers
from pypressuredrop.validate import validate_pressure

logger = logging.getLogger(__name__)

_ANGLE_TOL = 1e-9  # Angles closer than this to zero are treated as exactly horizontal / vertical


# ============================================================================
#  Coefficients
# ============================================================================

@dataclass(frozen=True)
class BBCoefficients:
    """ Horizontal holdup (a, b, c) and inclination correction (e, f, g, h) coefficients """
    a: Optional[float] = None
    b: Optional[float] = None
    c: Optional[float] = None
    e: Optional[float] = None
    f: Optional[float] = None
    g: Optional[float] = None
    h: Optional[float] = None


_BB_COEFFICIENTS = {
    flow_pattern.SEGREGATED: BBCoefficients(a=0.980, b=0.4846, c=0.0868,
                                            e=0.011, f=-3.7680, g=3.5390, h=-1.6140),
    flow_pattern.INTERMITTENT: BBCoefficients(a=0.845, b=0.5351, c=0.0173,
                                              e=2.960, f=0.3050, g=-0.4473, h=0.0978),
    flow_pattern.DISTRIBUTED: BBCoefficients(a=1.065, b=0.5824, c=0.0609),
}

# Inclination correction for all downhill flow, whatever the pattern
BB_DOWNHILL = BBCoefficients(e=4.700, f=-0.3692, g=0.1244, h=-0.5056)


def bb_coefficients(pattern: flow_pattern) -> BBCoefficients:
    """ Returns the coefficient set for a flow pattern. Transition has none of its own """
    try:
        return _BB_COEFFICIENTS[pattern]
    except KeyError:
        raise UnknownFlowPatternError(f"No Beggs & Brill coefficients for flow pattern {pattern}")


# ============================================================================
#  Flow pattern
# ============================================================================

def froude_number(v_m, id):
    """ Mixture Froude number, v_m in ft/s and id in inches """
    return BB_FROUDE_FACTOR * v_m ** 2 / check_positive('id', id)


def bb_flow_pattern(lambda_l, n_fr) -> flow_pattern:
    """ Returns Beggs & Brill flow pattern. Takacs p87

        lambda_l: No-slip liquid holdup (0-1)
        n_fr: Mixture Froude number
    """
    if not 0 <= lambda_l <= 1:
        raise DomainError(f"No-slip holdup must be between 0 and 1, got {lambda_l}")
    if not n_fr > 0:
        raise DomainError(f"Froude number must be positive, got {n_fr}")

    l1 = 316 * lambda_l ** 0.302
    l2 = 9.25e-4 * neg_pow(lambda_l, -2.468)
    l3 = 0.1 * neg_pow(lambda_l, -1.452)
    l4 = 0.5 * neg_pow(lambda_l, -6.738)

    # Boundaries overlap; first match wins
    if n_fr < l1 and n_fr < l2:
        return flow_pattern.SEGREGATED
    elif l2 <= n_fr < l3:
        return flow_pattern.TRANSITION
    elif n_fr >= l1 or n_fr >= l4:
        return flow_pattern.DISTRIBUTED
    else:
        return flow_pattern.INTERMITTENT


# ============================================================================
#  Holdup
# ============================================================================

def _payne_factor(uphill_flow, payne_correction):
    if not payne_correction:
        return 1.0
    return PAYNE_UPHILL if uphill_flow else PAYNE_DOWNHILL


def _adjusted_holdup(pattern, lambda_l, n_fr, n_lv, alpha, inclination,
                     uphill_flow, payne_correction) -> Tuple[float, float]:
    if lambda_l <= 0:
        return 0.0, 1.0
    if lambda_l >= 1:
        return 1.0, 1.0

    coeffs = bb_coefficients(pattern)
    hl0 = max(coeffs.a * lambda_l ** coeffs.b / n_fr ** coeffs.c, lambda_l)

    if math.isclose(alpha, 0.0, abs_tol=_ANGLE_TOL):  # Horizontal
        return hl0, 1.0

    if uphill_flow and pattern == flow_pattern.DISTRIBUTED:
        psi = 1.0
    else:
        row = coeffs if uphill_flow else BB_DOWNHILL
        c_corr = max((1 - lambda_l) * math.log(row.e * lambda_l ** row.f * n_lv ** row.g * n_fr ** row.h), 0)
        if math.isclose(inclination, 0.0, abs_tol=_ANGLE_TOL):  # Vertical
            psi = 1 + 0.3 * c_corr
        else:
            sin18 = math.sin(1.8 * alpha)
            psi = 1 + c_corr * (sin18 - sin18 ** 3 / 3)

    return hl0 * psi * _payne_factor(uphill_flow, payne_correction), psi


def bb_adjusted_holdup(pattern, lambda_l, n_fr, n_lv, alpha, inclination,
                       uphill_flow=True, payne_correction=True):
    """ Returns adjusted liquid holdup for one of the segregated, intermittent or
        distributed patterns, with optional Payne et al. correction. Takacs p88.
        The result is not yet clamped to the no-slip holdup; see bb_holdup.

        pattern: flow_pattern (not TRANSITION)
        lambda_l: No-slip liquid holdup
        n_fr: Mixture Froude number
        n_lv: Liquid velocity number
        alpha: Angle from horizontal (radians)
        inclination: Angle from vertical (degrees)
        uphill_flow: True for upward flow. Defaults to True
        payne_correction: Apply Payne et al. correction. Defaults to True
    """
    return _adjusted_holdup(pattern, lambda_l, n_fr, n_lv, alpha, inclination,
                            uphill_flow, payne_correction)[0]


def bb_transition_weight(lambda_l, n_fr):
    """ Returns the weight B given to the segregated holdup within the transition zone """
    if not 0 < lambda_l <= 1:
        raise DomainError(f"Transition weight needs no-slip holdup in (0, 1], got {lambda_l}")
    l3 = 0.1 * lambda_l ** -1.4516
    l2 = 9.25e-4 * lambda_l ** -2.468
    if l3 == l2:
        raise DomainError(f"Transition zone has zero width at no-slip holdup {lambda_l}")
    return (l3 - n_fr) / (l3 - l2)


def bb_holdup(lambda_l, n_fr, n_lv, alpha, inclination,
              uphill_flow=True, payne_correction=True) -> HoldupResult:
    """ Returns HoldupResult for the Beggs & Brill correlation. Transition flow
        interpolates between segregated and intermittent holdups. Holdup is clamped
        to [lambda_l, 1] for uphill flow and [0, 1] for downhill flow.
    """
    pattern = bb_flow_pattern(lambda_l, n_fr)
    args = (lambda_l, n_fr, n_lv, alpha, inclination, uphill_flow, payne_correction)

    if pattern == flow_pattern.TRANSITION:
        weight = bb_transition_weight(lambda_l, n_fr)
        hl_seg, psi_seg = _adjusted_holdup(flow_pattern.SEGREGATED, *args)
        hl_int, psi_int = _adjusted_holdup(flow_pattern.INTERMITTENT, *args)
        holdup = weight * hl_seg + (1 - weight) * hl_int
        psi = weight * psi_seg + (1 - weight) * psi_int
    elif pattern in (flow_pattern.SEGREGATED, flow_pattern.INTERMITTENT, flow_pattern.DISTRIBUTED):
        holdup, psi = _adjusted_holdup(pattern, *args)
    else:
        raise UnknownFlowPatternError(f"Unhandled flow pattern {pattern}")

    # True holdup cannot be below no-slip holdup in uphill flow
    floor = lambda_l if uphill_flow else 0.0
    holdup = min(max(holdup, floor), 1.0)
    return HoldupResult(no_slip=lambda_l, holdup=holdup, pattern=pattern, psi=psi)


# ============================================================================
#  Friction
# ============================================================================

def bb_friction_ratio(lambda_l, holdup):
    """ Returns two phase to no-slip friction factor ratio, f / f_n """
    if lambda_l == 0:
        return 1.0  # Single phase gas
    if holdup <= 0:
        raise DomainError(f"Liquid holdup must be positive with liquid present, got {holdup}")
    y = lambda_l / holdup ** 2
    if 1.0 < y < 1.2:
        s = math.log(2.2 * y - 1.2)  # General expression is singular near y = 1
    else:
        ln_y = math.log(y)
        denom = -0.0523 + 3.182 * ln_y - 0.872 * ln_y ** 2 + 0.01853 * ln_y ** 4
        if denom == 0:
            raise DomainError(f"Friction ratio exponent is singular at y={y}")
        s = ln_y / denom
    return math.exp(s)


# ============================================================================
#  Pressure gradient
# ============================================================================

def beggs_brill_gradient(segment: PipeSegment, state: FlowState, fluid: PVTProperties,
                         pressure_est, options: CorrelationOptions = None) -> PressureGradientResult:
    """ Returns PressureGradientResult (psi over the segment) using Beggs & Brill.

        Assumes outlet referenced, top-down traversal: uphill flow corresponds to
        producers and downhill flow to injectors. Oil/water slip is ignored.

        segment: PipeSegment
        state: FlowState
        fluid: PVTProperties (lumped liquid)
        pressure_est: Estimated average segment pressure (psia)
        options: CorrelationOptions. Reads uphill_flow and payne_correction
    """
    if options is None:
        options = CorrelationOptions()
    validate_pressure(pressure_est)

    v_m = state.v_m
    lambda_l = state.lambda_l
    n_fr = froude_number(v_m, segment.id)
    n_lv, _ = velocity_numbers(state.v_sl, state.v_sg, fluid.rho_l, fluid.sigma_l)

    hold = bb_holdup(lambda_l, n_fr, n_lv, segment.alpha, segment.inclination,
                     options.uphill_flow, options.payne_correction)
    hl = hold.holdup

    rho_ns = fluid.rho_l * lambda_l + fluid.rho_g * (1 - lambda_l)
    mu_ns = fluid.mu_l * lambda_l + fluid.mu_g * (1 - lambda_l)
    n_re = BB_REYNOLDS_FACTOR * rho_ns * v_m * segment.id / mu_ns
    f_n = chen_friction_factor(n_re, segment.id, segment.roughness)
    fric = f_n * bb_friction_ratio(lambda_l, hl)

    rho_m = fluid.rho_l * hl + fluid.rho_g * (1 - hl)
    sign = options.direction  # Friction acts against the flow

    dpdl_el = PSI_PER_LBFT2 * rho_m
    dpdl_f = sign * BB_FRICTION_FACTOR * fric * rho_ns * v_m ** 2 / segment.id
    e_k = BB_KINETIC_FACTOR * fric * v_m * state.v_sg * rho_ns / pressure_est

    # Kinetic term depends on the gradient itself; isolate it algebraically
    denom = 1 - sign * e_k
    if denom <= 0:
        raise DomainError(f"Kinetic energy term ({e_k:.4f}) leaves no physical solution")

    elevation = dpdl_el * segment.tvd
    friction = dpdl_f * segment.md
    total = (elevation + friction) / denom

    logger.debug("Beggs & Brill: pattern=%s, lambda_l=%.4f, N_Fr=%.4f, N_lv=%.4f, holdup=%.4f",
                 hold.pattern.name, lambda_l, n_fr, n_lv, hl)
    logger.debug("Beggs & Brill: N_Re=%.1f, f_n=%.6f, f=%.6f, Ek=%.3e, dP=%.6f psi",
                 n_re, f_n, fric, e_k, total)

    return PressureGradientResult(elevation=elevation, friction=friction,
                                  kinetic=total - elevation - friction, total=total,
                                  holdup=hold, method=dp_method.BB)


def beggs_brill(md, tvd, inclination, id, v_sl, v_sg, rho_l, rho_g, sigma_l, mu_l, mu_g,
                pressure_est, roughness=0.01, uphill_flow=True, payne_correction=True):
    """ Returns pressure change over a segment (psi) using Beggs & Brill.

        md: Measured depth increment (ft)
        tvd: True vertical depth increment (ft)
        inclination: Inclination from vertical (degrees)
        id: Internal diameter (inches)
        v_sl, v_sg: Superficial liquid and gas velocities (ft/s)
        rho_l, rho_g: Liquid and gas densities (lbm/cuft)
        sigma_l: Liquid interfacial tension (dynes/cm)
        mu_l, mu_g: Liquid and gas viscosities (cP)
        pressure_est: Estimated average segment pressure (psia)
        roughness: Absolute roughness (inches). Defaults to 0.01
        uphill_flow: True for producers. Defaults to True
        payne_correction: Apply Payne et al. holdup correction. Defaults to True
    """
    result = beggs_brill_gradient(
        PipeSegment(md=md, tvd=tvd, inclination=inclination, id=id, roughness=roughness),
        FlowState(v_sl=v_sl, v_sg=v_sg),
        PVTProperties(rho_l=rho_l, rho_g=rho_g, mu_l=mu_l, mu_g=mu_g, sigma_l=sigma_l),
        pressure_est,
        CorrelationOptions(uphill_flow=uphill_flow, payne_correction=payne_correction),
    )
    return result.total
