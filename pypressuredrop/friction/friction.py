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

from pypressuredrop.constants import LAMINAR_RE
from pypressuredrop.errors import DomainError
from pypressuredrop.shared_fns import check_positive, check_non_negative


def _log10(x):
    if x <= 0:
        raise DomainError(f"Logarithm of non-positive argument ({x}) in Chen friction factor")
    return math.log10(x)


def chen_friction_factor(n_re, id, roughness=0.01):
    """ Returns friction factor. Moody laminar law below the laminar boundary,
        Chen (1979) explicit approximation of Colebrook for turbulent flow.
        The two branches are not continuous at the boundary.

        n_re: Reynolds number
        id: Pipe internal diameter (inches)
        roughness: Absolute roughness (inches), ~0.0006 new to ~0.009 used tubing. Defaults to 0.01
    """
    check_positive('id', id)
    check_non_negative('roughness', roughness)
    if n_re <= 0:
        raise DomainError(f"Reynolds number must be positive, got {n_re}")
    if n_re <= LAMINAR_RE:
        return 16 / n_re
    k = roughness / id  # Relative roughness
    x = -4 * _log10(k / 3.7065 - 5.0452 / n_re * _log10(k ** 1.1098 / 2.8257 + (7.149 / n_re) ** 0.8981))
    return (1 / x) ** 2
