"""
pypressuredrop
===================================

-----------------------------------------------------------
Multiphase pipe flow pressure gradient correlations
-----------------------------------------------------------

Per segment pressure gradient, flow pattern and liquid holdup for oil/water/gas
flow in wellbores, for use in nodal analysis. The calling code owns the depth
traverse; each function here evaluates a single segment and keeps no state.

Includes;

- Superficial velocities and flow weighted liquid properties
- Chen (1979) explicit friction factor
- Beggs & Brill flow pattern, holdup and pressure gradient, with Payne et al. correction
- Hagedorn & Brown holdup and pressure gradient, with Griffith-Wallis bubble flow
- A common interface to choose either correlation per segment, and a tabulated sweep

Sub-modules are imported on first access, e.g. pypressuredrop.beggsbrill
"""

import importlib
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

submodules = [
    'beggsbrill',
    'classes',
    'constants',
    'errors',
    'friction',
    'gradient',
    'hagedornbrown',
    'shared_fns',
    'validate',
    'velocity',
]

__all__ = submodules

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pypressuredrop.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pypressuredrop' has no attribute '{name}'"
            )
