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

from pypressuredrop.classes import FlowRates, PVTProperties, FlowState
from pypressuredrop.constants import VSL_FACTOR, VSG_FACTOR
from pypressuredrop.errors import InvalidFlowRateError
from pypressuredrop.shared_fns import check_positive

logger = logging.getLogger(__name__)

# Oil and water are lumped into a single liquid phase; no oil/water slip is modelled.


def _pipe_area(id):
    return math.pi * (check_positive('id', id) / 24.0) ** 2  # id in inches -> ft2


def liquid_velocity_superficial(q_o, q_w, id, b_o, b_w):
    """ Returns superficial liquid velocity (ft/s)
        q_o: Oil rate (bbl/day)
        q_w: Water rate (bbl/day)
        id: Pipe internal diameter (inches)
        b_o: Oil formation volume factor (rb/stb)
        b_w: Water formation volume factor (rb/stb)
    """
    area = _pipe_area(id)
    if q_o > 0:
        wor = q_w / q_o
        return VSL_FACTOR * (q_o + q_w) / area * (b_o / (1 + wor) + b_w * wor / (1 + wor))
    else:  # 100% water cut
        return VSL_FACTOR * q_w * b_w / area


def gas_velocity_superficial(q_o, q_w, glr, r_s, id, b_g):
    """ Returns superficial gas velocity (ft/s) of the free gas
        q_o: Oil rate (bbl/day)
        q_w: Water rate (bbl/day)
        glr: Gas-liquid ratio (scf/bbl)
        r_s: Solution gas-oil ratio (scf/bbl)
        id: Pipe internal diameter (inches)
        b_g: Gas formation volume factor (ft3/scf)
    """
    area = _pipe_area(id)
    if q_o > 0:
        wor = q_w / q_o
        return VSG_FACTOR * (q_o + q_w) / area * (glr - r_s / (1 + wor)) * b_g
    else:  # 100% water cut
        return VSG_FACTOR * q_w * (glr - r_s) * b_g / area


def mixture_property(q_o, q_w, prop_o, prop_w):
    """ Returns rate weighted average of an oil and a water property.
        Ignores oil/water slip, mixing effects and emulsion rheology.
    """
    if q_o + q_w == 0:
        raise InvalidFlowRateError("Mixture properties are undefined with zero total liquid rate")
    return (q_o * prop_o + q_w * prop_w) / (q_o + q_w)


def mixture_velocity(v_sl, v_sg):
    return v_sl + v_sg


def no_slip_holdup(v_sl, v_sg):
    """ Returns no-slip liquid holdup v_sl / v_m """
    v_m = mixture_velocity(v_sl, v_sg)
    if v_m == 0:
        raise InvalidFlowRateError("No-slip holdup is undefined at zero mixture velocity")
    return v_sl / v_m


def lumped_pvt(rates: FlowRates, b_o, b_w, b_g, rho_o, rho_w, rho_g,
               mu_o, mu_w, mu_g, sigma_o, sigma_w) -> PVTProperties:
    """ Returns PVTProperties with oil and water blended into one liquid by flow rate.

        rates: FlowRates for the segment
        b_o, b_w, b_g: Formation volume factors
        rho_o, rho_w, rho_g: Oil, water and gas densities (lbm/cuft)
        mu_o, mu_w, mu_g: Oil, water and gas viscosities (cP)
        sigma_o, sigma_w: Oil and water interfacial tensions (dynes/cm)
    """
    pvt = PVTProperties(
        rho_l=mixture_property(rates.q_o, rates.q_w, rho_o, rho_w),
        rho_g=rho_g,
        mu_l=mixture_property(rates.q_o, rates.q_w, mu_o, mu_w),
        mu_g=mu_g,
        sigma_l=mixture_property(rates.q_o, rates.q_w, sigma_o, sigma_w),
        b_o=b_o,
        b_w=b_w,
        b_g=b_g,
    )
    logger.debug("Lumped liquid: rho_l=%.4f lbm/cuft, mu_l=%.4f cP, sigma_l=%.3f dynes/cm",
                 pvt.rho_l, pvt.mu_l, pvt.sigma_l)
    return pvt


def flow_state(rates: FlowRates, pvt: PVTProperties, id) -> FlowState:
    """ Returns FlowState (superficial velocities) for a segment of internal diameter id (inches) """
    v_sl = liquid_velocity_superficial(rates.q_o, rates.q_w, id, pvt.b_o, pvt.b_w)
    v_sg = gas_velocity_superficial(rates.q_o, rates.q_w, rates.glr, rates.r_s, id, pvt.b_g)
    if v_sg < 0:  # All gas in solution
        logger.debug("Solution gas exceeds GLR, no free gas (v_sg=%.4f ft/s set to zero)", v_sg)
        v_sg = 0.0
    logger.debug("Superficial velocities: v_sl=%.4f ft/s, v_sg=%.4f ft/s", v_sl, v_sg)
    return FlowState(v_sl=v_sl, v_sg=v_sg)
