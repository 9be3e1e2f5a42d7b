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
import numpy as np
import numpy.typing as npt
from typing import Tuple

from pypressuredrop.errors import ConfigurationError
from pypressuredrop.constants import DUNS_ROS_VELOCITY


def check_positive(name: str, value: float) -> float:
    """ Raises ConfigurationError unless value is a finite number > 0 """
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def check_non_negative(name: str, value: float) -> float:
    """ Raises ConfigurationError unless value is a finite number >= 0 """
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")
    return value


def check_range(name: str, value: float, lo: float, hi: float) -> float:
    """ Raises ConfigurationError unless lo <= value <= hi """
    if not math.isfinite(value) or value < lo or value > hi:
        raise ConfigurationError(f"{name} must be between {lo} and {hi}, got {value}")
    return value


def neg_pow(x: float, exponent: float) -> float:
    """ x ** exponent, returning +inf for x == 0 with a negative exponent
        (flow map boundaries at zero no-slip holdup)
    """
    if x == 0 and exponent < 0:
        return math.inf
    return x ** exponent


def velocity_numbers(v_sl: float, v_sg: float, rho_l: float, sigma_l: float) -> Tuple[float, float]:
    """ Returns Duns & Ros liquid and gas velocity numbers (N_lv, N_gv).
        Both use liquid density and interfacial tension.

        v_sl: Superficial liquid velocity (ft/s)
        v_sg: Superficial gas velocity (ft/s)
        rho_l: Liquid density (lbm/cuft)
        sigma_l: Liquid interfacial tension (dynes/cm)
    """
    group = DUNS_ROS_VELOCITY * (rho_l / sigma_l) ** 0.25
    return v_sl * group, v_sg * group


def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data
    else:
        return np.atleast_1d(input_data)


def broadcast_inputs(**kwargs: npt.ArrayLike) -> dict:
    """ Broadcasts scalar and array inputs against each other, returning a dict of
        equal length 1-D float arrays keyed as passed
    """
    names = list(kwargs.keys())
    try:
        arrays = np.broadcast_arrays(*[convert_to_numpy(kwargs[n]).astype(float) for n in names])
    except ValueError as e:
        raise ConfigurationError(f"Input arrays could not be broadcast together: {e}") from e
    return {n: np.ravel(a) for n, a in zip(names, arrays)}
