#!/usr/bin/env python3
"""
Tests for pypressuredrop gradient module (method dispatch, segment_dp, gradient_table).
Run with: python3 -m pytest pypressuredrop/tests/ -v
"""

import sys
import os

import numpy as np
import pandas as pd
import pytest

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.classes import dp_method, PipeSegment, FlowState, PVTProperties
from pypressuredrop.errors import ConfigurationError, PressureDropError
from pypressuredrop.beggsbrill import beggs_brill
from pypressuredrop.hagedornbrown import hagedorn_brown
from pypressuredrop.gradient import pressure_gradient, segment_dp, gradient_table, format_gradient_table

_ARGS = dict(md=100, tvd=100, inclination=0, id=2.441, v_sl=3.0, v_sg=6.0, rho_l=50.0, rho_g=5.0,
             sigma_l=30.0, mu_l=1.0, mu_g=0.02, pressure_est=1000.0)


# ============================================================================
#  Dispatch
# ============================================================================

def test_segment_dp_dispatch():
    assert segment_dp(**_ARGS, dpmethod='HB') == pytest.approx(hagedorn_brown(**_ARGS), rel=1e-12)
    assert segment_dp(**_ARGS, dpmethod='bb') == pytest.approx(beggs_brill(**_ARGS), rel=1e-12)
    assert segment_dp(**_ARGS, dpmethod=dp_method.BB) == pytest.approx(beggs_brill(**_ARGS), rel=1e-12)


def test_segment_dp_default_is_hb():
    assert segment_dp(**_ARGS) == segment_dp(**_ARGS, dpmethod='HB')


def test_pressure_gradient_records():
    segment = PipeSegment(md=100, tvd=100, inclination=0, id=2.441)
    result = pressure_gradient(segment, FlowState(v_sl=3.0, v_sg=6.0),
                               PVTProperties(rho_l=50.0, rho_g=5.0, mu_l=1.0, mu_g=0.02, sigma_l=30.0),
                               1000.0, dpmethod='BB')
    assert result.method == dp_method.BB
    assert result.holdup.pattern is not None


def test_invalid_method():
    with pytest.raises(ConfigurationError):
        segment_dp(**_ARGS, dpmethod='XX')


def test_bubble_flow_not_directly_selectable():
    with pytest.raises(ConfigurationError):
        segment_dp(**_ARGS, dpmethod='GW')


def test_invalid_geometry():
    bad = dict(_ARGS, tvd=150)  # tvd > md
    with pytest.raises(ConfigurationError):
        segment_dp(**bad)
    with pytest.raises(ConfigurationError):
        segment_dp(**dict(_ARGS, inclination=120))
    with pytest.raises(ConfigurationError):
        segment_dp(**dict(_ARGS, id=0))


def test_errors_are_value_errors():
    """Callers catching ValueError see every failure."""
    with pytest.raises(ValueError):
        segment_dp(**dict(_ARGS, v_sl=0.0, v_sg=0.0))
    assert issubclass(ConfigurationError, PressureDropError)


# ============================================================================
#  Gradient table
# ============================================================================

def test_gradient_table_broadcast():
    v_sg = np.array([2.0, 6.0, 12.0])
    args = dict(_ARGS, v_sg=v_sg)
    df = gradient_table(**args, dpmethod='BB')
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 3
    assert list(df["Vsg (ft/s)"]) == [2.0, 6.0, 12.0]
    assert (df["Method"] == "BB").all()
    for i, vsg in enumerate(v_sg):
        expected = segment_dp(**dict(_ARGS, v_sg=vsg), dpmethod='BB')
        assert df["Total dP (psi)"].iloc[i] == pytest.approx(expected, rel=1e-12)


def test_gradient_table_columns():
    df = gradient_table(**_ARGS)
    for col in ["MD (ft)", "Pressure (psia)", "Method", "Flow Pattern", "No-Slip Holdup", "Holdup",
                "Elevation dP (psi)", "Friction dP (psi)", "Kinetic dP (psi)", "Total dP (psi)"]:
        assert col in df.columns, f"Missing column {col}"
    assert df["Flow Pattern"].iloc[0] == ""
    row = df.iloc[0]
    assert row["Total dP (psi)"] == pytest.approx(
        row["Elevation dP (psi)"] + row["Friction dP (psi)"] + row["Kinetic dP (psi)"], rel=1e-12)


def test_gradient_table_flow_pattern_names():
    df = gradient_table(**_ARGS, dpmethod='BB')
    assert df["Flow Pattern"].iloc[0] in ("SEGREGATED", "INTERMITTENT", "DISTRIBUTED", "TRANSITION")


def test_gradient_table_mismatched_arrays():
    with pytest.raises(ConfigurationError):
        gradient_table(**dict(_ARGS, v_sl=[1.0, 2.0], v_sg=[1.0, 2.0, 3.0]))


def test_format_gradient_table():
    text = format_gradient_table(gradient_table(**dict(_ARGS, md=[100, 200], tvd=[100, 200])))
    assert "Total dP (psi)" in text
    assert len(text.splitlines()) == 4  # header, rule, two rows
