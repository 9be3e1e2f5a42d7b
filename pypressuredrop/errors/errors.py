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


class PressureDropError(ValueError):
    """ Base class for all failures raised by the correlation engine.
        Deterministic for fixed inputs, so none of these are worth retrying.
    """


class InvalidFlowRateError(PressureDropError):
    """ Total liquid rate or mixture velocity is zero, leaving holdup and Froude number undefined """


class DomainError(PressureDropError):
    """ Argument outside the mathematical domain of a correlation term (log, root, division) """


class UnknownFlowPatternError(PressureDropError):
    """ Flow pattern did not resolve to one with a coefficient set """


class ConfigurationError(PressureDropError):
    """ Inconsistent or out of range input (geometry, PVT, options or method name) """
