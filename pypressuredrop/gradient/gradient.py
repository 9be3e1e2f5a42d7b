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

import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

from pypressuredrop.beggsbrill import beggs_brill_gradient
from pypressuredrop.classes import (PipeSegment, FlowState, PVTProperties, CorrelationOptions,
                                    PressureGradientResult)
from pypressuredrop.errors import ConfigurationError
from pypressuredrop.hagedornbrown import hagedorn_brown_gradient
from pypressuredrop.shared_fns import broadcast_inputs
from pypressuredrop.validate import validate_methods

logger = logging.getLogger(__name__)

# ============================================================================
#  Method Dispatch Dictionary
# ============================================================================

_METHOD_DIC = {
    "HB": hagedorn_brown_gradient,
    "BB": beggs_brill_gradient,
}

_INPUT_LABELS = {
    "md": "MD (ft)",
    "tvd": "TVD (ft)",
    "inclination": "Inclination (deg)",
    "id": "ID (in)",
    "roughness": "Roughness (in)",
    "v_sl": "Vsl (ft/s)",
    "v_sg": "Vsg (ft/s)",
    "rho_l": "Denl (lb/cuft)",
    "rho_g": "Deng (lb/cuft)",
    "sigma_l": "IFT (dynes/cm)",
    "mu_l": "ul (cP)",
    "mu_g": "ug (cP)",
    "pressure_est": "Pressure (psia)",
}


def _resolve_method(dpmethod):
    dpmethod = validate_methods(["dpmethod"], [dpmethod])
    if dpmethod.name not in _METHOD_DIC:
        raise ConfigurationError(f"{dpmethod.name} cannot be selected directly; choose one of {list(_METHOD_DIC)}")
    return dpmethod


# ============================================================================
#  Public API: pressure_gradient
# ============================================================================

def pressure_gradient(segment: PipeSegment, state: FlowState, fluid: PVTProperties, pressure_est,
                      dpmethod='HB', options: CorrelationOptions = None) -> PressureGradientResult:
    """ Returns PressureGradientResult for one segment using the chosen correlation.

        segment: PipeSegment
        state: FlowState
        fluid: PVTProperties
        pressure_est: Estimated average segment pressure (psia)
        dpmethod: 'HB' (Hagedorn & Brown) or 'BB' (Beggs & Brill). Defaults to 'HB'
        options: CorrelationOptions. Defaults to uphill flow with all corrections enabled
    """
    dpmethod = _resolve_method(dpmethod)
    return _METHOD_DIC[dpmethod.name](segment, state, fluid, pressure_est, options)


# ============================================================================
#  Public API: segment_dp
# ============================================================================

def segment_dp(md, tvd, inclination, id, v_sl, v_sg, rho_l, rho_g, sigma_l, mu_l, mu_g,
               pressure_est, roughness=0.01, dpmethod='HB', uphill_flow=True,
               payne_correction=True, griffith_wallis=True):
    """ Returns pressure change over a segment (psi), identical arguments for every correlation.

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
        dpmethod: 'HB' or 'BB'. Defaults to 'HB'
        uphill_flow: True for producers. Defaults to True
        payne_correction: Payne et al. holdup correction (BB only). Defaults to True
        griffith_wallis: Griffith-Wallis bubble flow (HB only). Defaults to True
    """
    result = pressure_gradient(
        PipeSegment(md=md, tvd=tvd, inclination=inclination, id=id, roughness=roughness),
        FlowState(v_sl=v_sl, v_sg=v_sg),
        PVTProperties(rho_l=rho_l, rho_g=rho_g, mu_l=mu_l, mu_g=mu_g, sigma_l=sigma_l),
        pressure_est,
        dpmethod=dpmethod,
        options=CorrelationOptions(uphill_flow=uphill_flow, payne_correction=payne_correction,
                                   griffith_wallis=griffith_wallis),
    )
    return result.total


# ============================================================================
#  Public API: gradient_table
# ============================================================================

def gradient_table(md: npt.ArrayLike, tvd: npt.ArrayLike, inclination: npt.ArrayLike,
                   id: npt.ArrayLike, v_sl: npt.ArrayLike, v_sg: npt.ArrayLike,
                   rho_l: npt.ArrayLike, rho_g: npt.ArrayLike, sigma_l: npt.ArrayLike,
                   mu_l: npt.ArrayLike, mu_g: npt.ArrayLike, pressure_est: npt.ArrayLike,
                   roughness: npt.ArrayLike = 0.01, dpmethod='HB', uphill_flow=True,
                   payne_correction=True, griffith_wallis=True) -> pd.DataFrame:
    """ Returns a DataFrame with one row per independent segment calculation.
        Scalars and arrays are broadcast against each other; rows are not accumulated,
        so this is a sweep rather than a traverse.

        Arguments as segment_dp, each may be a scalar or array
    """
    dpmethod = _resolve_method(dpmethod)
    options = CorrelationOptions(uphill_flow=uphill_flow, payne_correction=payne_correction,
                                 griffith_wallis=griffith_wallis)
    inputs = broadcast_inputs(md=md, tvd=tvd, inclination=inclination, id=id, roughness=roughness,
                              v_sl=v_sl, v_sg=v_sg, rho_l=rho_l, rho_g=rho_g, sigma_l=sigma_l,
                              mu_l=mu_l, mu_g=mu_g, pressure_est=pressure_est)
    nrows = len(inputs["md"])
    logger.debug("Calculating %d segments with %s", nrows, dpmethod.name)

    results = []
    for i in range(nrows):
        row = {k: float(v[i]) for k, v in inputs.items()}
        results.append(pressure_gradient(
            PipeSegment(md=row["md"], tvd=row["tvd"], inclination=row["inclination"],
                        id=row["id"], roughness=row["roughness"]),
            FlowState(v_sl=row["v_sl"], v_sg=row["v_sg"]),
            PVTProperties(rho_l=row["rho_l"], rho_g=row["rho_g"], mu_l=row["mu_l"],
                          mu_g=row["mu_g"], sigma_l=row["sigma_l"]),
            row["pressure_est"],
            dpmethod=dpmethod,
            options=options,
        ))

    df = pd.DataFrame()
    for key, label in _INPUT_LABELS.items():
        df[label] = inputs[key]
    df["Method"] = [r.method.name for r in results]
    df["Flow Pattern"] = [r.holdup.pattern.name if r.holdup.pattern is not None else "" for r in results]
    df["No-Slip Holdup"] = [r.holdup.no_slip for r in results]
    df["Holdup"] = [r.holdup.holdup for r in results]
    df["Elevation dP (psi)"] = [r.elevation for r in results]
    df["Friction dP (psi)"] = [r.friction for r in results]
    df["Kinetic dP (psi)"] = [r.kinetic for r in results]
    df["Total dP (psi)"] = [r.total for r in results]
    return df


def format_gradient_table(df: pd.DataFrame, floatfmt=".4f") -> str:
    """ Returns gradient_table output as a plain text table """
    return tabulate(df, headers="keys", floatfmt=floatfmt, showindex=False)
