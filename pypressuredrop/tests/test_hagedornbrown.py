#!/usr/bin/env python3
"""
Tests for pypressuredrop hagedornbrown module (Hagedorn & Brown, Griffith-Wallis).
Run with: python3 -m pytest pypressuredrop/tests/ -v
"""

import sys
import os
import math

import pytest

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.classes import (dp_method, PipeSegment, FlowState, PVTProperties,
                                    CorrelationOptions)
from pypressuredrop.errors import DomainError, ConfigurationError
from pypressuredrop.friction import chen_friction_factor
from pypressuredrop.hagedornbrown import (hb_correlation_numbers, hb_holdup, griffith_bubble_boundary,
                                          griffith_wallis_holdup, griffith_wallis_gradient,
                                          hagedorn_brown_gradient, hagedorn_brown)

# Worked example, Economides et al. (Petroleum Production Systems) example 7-9
_SEGMENT = PipeSegment(md=1, tvd=1, inclination=0, id=2.259, roughness=0.0006)
_STATE = FlowState(v_sl=4.67, v_sg=8.72)
_FLUID = PVTProperties(rho_l=49.49, rho_g=2.6, mu_l=2.0, mu_g=0.0131, sigma_l=30.0)


# ============================================================================
#  Holdup
# ============================================================================

def test_correlation_numbers():
    n_lv, n_gv, n_d, n_l = hb_correlation_numbers(4.67, 8.72, 2.259, 49.49, 2.0, 30.0)
    assert n_lv == pytest.approx(10.257, rel=1e-3)
    assert n_gv == pytest.approx(19.152, rel=1e-3)
    assert n_d == pytest.approx(29.225, rel=1e-3)
    assert n_l == pytest.approx(0.0092508, rel=1e-3)


def test_worked_example_holdup():
    hl, psi, hl_by_psi = hb_holdup(800, 2.259, 4.67, 8.72, 49.49, 2.0, 30.0)
    assert hl_by_psi == pytest.approx(0.47995, rel=1e-2)
    assert psi == pytest.approx(1.0614, rel=1e-2)
    assert hl == pytest.approx(0.5094, rel=1e-2)
    assert hl == pytest.approx(psi * hl_by_psi, rel=1e-12)


def test_holdup_without_free_gas():
    with pytest.raises(DomainError):
        hb_holdup(800, 2.259, 4.67, 0.0, 49.49, 2.0, 30.0)


def test_bubble_boundary():
    assert griffith_bubble_boundary(1.0, 2.0) == pytest.approx(0.9601, rel=1e-12)
    assert griffith_bubble_boundary(13.39, 2.259) == 0.13


def test_griffith_wallis_holdup():
    assert griffith_wallis_holdup(2.0, 0.5) == pytest.approx(0.81125, rel=1e-4)


def test_griffith_wallis_holdup_negative_discriminant():
    with pytest.raises(DomainError):
        griffith_wallis_holdup(1.0, 5.0)


# ============================================================================
#  Pressure gradient
# ============================================================================

def test_worked_example_gradient():
    result = hagedorn_brown_gradient(_SEGMENT, _STATE, _FLUID, 800)
    assert result.method == dp_method.HB
    assert result.kinetic == 0.0
    assert result.holdup.holdup == pytest.approx(0.5094, rel=1e-2)
    assert result.elevation == pytest.approx(0.18393, rel=2e-2)
    assert result.friction == pytest.approx(0.022665, rel=2e-2)
    assert result.total == pytest.approx(0.2066, rel=2e-2)


def test_worked_example_flat_form():
    total = hagedorn_brown(md=1, tvd=1, inclination=0, id=2.259, v_sl=4.67, v_sg=8.72,
                           rho_l=49.49, rho_g=2.6, sigma_l=30.0, mu_l=2.0, mu_g=0.0131,
                           pressure_est=800, roughness=0.0006)
    assert total == pytest.approx(0.2066, rel=2e-2)


def test_downhill_flips_friction():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.259, roughness=0.0006)
    up = hagedorn_brown_gradient(segment, _STATE, _FLUID, 800)
    down = hagedorn_brown_gradient(segment, _STATE, _FLUID, 800, CorrelationOptions(uphill_flow=False))
    assert down.elevation == pytest.approx(up.elevation, rel=1e-12)
    assert down.friction == pytest.approx(-up.friction, rel=1e-12)


def test_griffith_wallis_selected_in_bubble_flow():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    state = FlowState(v_sl=1.5, v_sg=0.5)
    assert state.lambda_g < griffith_bubble_boundary(state.v_m, segment.id)

    result = hagedorn_brown_gradient(segment, state, _FLUID, 800)
    assert result.method == dp_method.GW
    assert result.holdup.holdup == pytest.approx(griffith_wallis_holdup(2.0, 0.5), rel=1e-12)

    hl = result.holdup.holdup
    rho_m = 49.49 * hl + 2.6 * (1 - hl)
    assert result.elevation == pytest.approx(rho_m / 144 * 100, rel=1e-12)

    massflow = segment.area * (1.5 * 49.49 + 0.5 * 2.6) * 86400
    id_ft = 2.441 / 12
    n_re = 2.2e-2 * massflow / (id_ft * 2.0)
    fric = chen_friction_factor(n_re, 2.441, 0.01)
    dpdl_f = fric * massflow ** 2 / (7.413e10 * id_ft ** 5 * 49.49 * hl ** 2) / 144
    assert result.friction == pytest.approx(dpdl_f * 100, rel=1e-10)


def test_griffith_wallis_disabled():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    state = FlowState(v_sl=1.5, v_sg=0.5)
    result = hagedorn_brown_gradient(segment, state, _FLUID, 800, CorrelationOptions(griffith_wallis=False))
    assert result.method == dp_method.HB


def test_griffith_wallis_direct():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    result = griffith_wallis_gradient(segment, FlowState(v_sl=1.5, v_sg=0.5), _FLUID)
    assert result.method == dp_method.GW
    assert result.kinetic == 0.0
    assert result.total == pytest.approx(result.elevation + result.friction, rel=1e-12)


def test_holdup_clamped():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    for v_sl, v_sg in [(0.5, 20.0), (2.0, 10.0), (8.0, 4.0), (10.0, 40.0)]:
        state = FlowState(v_sl=v_sl, v_sg=v_sg)
        result = hagedorn_brown_gradient(segment, state, _FLUID, 1000)
        assert state.lambda_l <= result.holdup.holdup <= 1.0, f"v_sl={v_sl}, v_sg={v_sg}"


def test_idempotent():
    assert (hagedorn_brown_gradient(_SEGMENT, _STATE, _FLUID, 800) ==
            hagedorn_brown_gradient(_SEGMENT, _STATE, _FLUID, 800))


def test_correlation_numbers_bad_inputs():
    with pytest.raises(ConfigurationError):
        hb_correlation_numbers(4.67, 8.72, 2.259, 49.49, 2.0, 0.0)
    with pytest.raises(ConfigurationError):
        hb_correlation_numbers(4.67, 8.72, 2.259, 0.0, 2.0, 30.0)
    with pytest.raises(ConfigurationError):
        hb_correlation_numbers(4.67, 8.72, 0.0, 49.49, 2.0, 30.0)


def test_gas_only_has_no_holdup():
    """Without liquid the holdup fit is bypassed and the column is all gas."""
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    state = FlowState(v_sl=0.0, v_sg=10.0)
    result = hagedorn_brown_gradient(segment, state, _FLUID, 800)
    assert result.method == dp_method.HB
    assert result.holdup.holdup == 0.0
    assert result.elevation == pytest.approx(2.6 / 144 * 100, rel=1e-12)

    massflow = segment.area * 10.0 * 2.6 * 86400
    id_ft = 2.441 / 12
    n_re = 2.2e-2 * massflow / (id_ft * 0.0131)
    fric = chen_friction_factor(n_re, 2.441, 0.01)
    dpdl_f = fric * massflow ** 2 / (7.413e10 * id_ft ** 5 * 2.6) / 144
    assert result.friction == pytest.approx(dpdl_f * 100, rel=1e-10)
