#!/usr/bin/env python3
"""
Tests for pypressuredrop friction module (Chen explicit friction factor).
Run with: python3 -m pytest pypressuredrop/tests/ -v
"""

import sys
import os
import math

import pytest

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.friction import chen_friction_factor
from pypressuredrop.errors import DomainError, ConfigurationError


def _chen(n_re, id, roughness):
    k = roughness / id
    inner = math.log10(k ** 1.1098 / 2.8257 + (7.149 / n_re) ** 0.8981)
    x = -4 * math.log10(k / 3.7065 - 5.0452 / n_re * inner)
    return 1 / x ** 2


def test_laminar():
    assert chen_friction_factor(2000, 2.441) == pytest.approx(0.008, rel=1e-12)


def test_laminar_boundary_inclusive():
    """Re = 2200 is still laminar."""
    assert chen_friction_factor(2200, 2.441) == pytest.approx(16 / 2200, rel=1e-12)


def test_turbulent_matches_chen():
    for n_re in [5000, 1e5, 4.2e5, 1e7]:
        f = chen_friction_factor(n_re, 2.259, 0.0006)
        assert f == pytest.approx(_chen(n_re, 2.259, 0.0006), rel=1e-12), f"Re={n_re}"


def test_turbulent_range():
    """Fanning factors for commercial tubing sit between ~0.002 and ~0.02."""
    f = chen_friction_factor(4.2e5, 2.259, 0.0006)
    assert 0.002 < f < 0.02, f"Unexpected friction factor {f}"


def test_rougher_pipe_more_friction():
    smooth = chen_friction_factor(1e6, 2.441, 0.0006)
    rough = chen_friction_factor(1e6, 2.441, 0.009)
    assert rough > smooth


def test_discontinuity_at_boundary():
    """Laminar and turbulent branches do not meet at the boundary."""
    assert chen_friction_factor(2200, 2.441) != pytest.approx(chen_friction_factor(2200.001, 2.441))


def test_non_positive_reynolds():
    with pytest.raises(DomainError):
        chen_friction_factor(0, 2.441)
    with pytest.raises(DomainError):
        chen_friction_factor(-100, 2.441)


def test_bad_geometry():
    """Diameter and roughness are checked before the logarithms are taken."""
    with pytest.raises(ConfigurationError):
        chen_friction_factor(1e5, 2.0, -0.01)
    with pytest.raises(ConfigurationError):
        chen_friction_factor(1e5, 0.0, 0.01)


def test_smooth_pipe():
    f = chen_friction_factor(1e5, 2.441, 0.0)
    assert f == pytest.approx(_chen(1e5, 2.441, 0.0), rel=1e-12)
