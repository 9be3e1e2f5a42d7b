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

from pypressuredrop.classes import class_dic
from pypressuredrop.errors import ConfigurationError
from pypressuredrop.shared_fns import check_positive

def validate_methods(names, variables):
    """ Resolves method names given as strings to their enum members.
        Enum members pass through unchanged. Returns a single value if one was passed
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                raise ConfigurationError(f"An incorrect {method} was specified: '{variables[m]}'")
        elif not isinstance(variables[m], class_dic[method]):
            raise ConfigurationError(f"An incorrect {method} was specified: {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables


def validate_pressure(pressure_est):
    """ Estimated segment pressure (psia) must be positive """
    return check_positive('pressure_est', pressure_est)
