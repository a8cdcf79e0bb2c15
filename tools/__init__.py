"""
Tools package for the Friction Loss MCP server.

This package contains the friction engine and the calculation tools registered with the MCP server.
"""

from .friction_engine import CalculationResult, classify_flow_regime, compute, compute_from_inputs
from .friction_loss import (
    calculate_friction_loss,
    calculate_friction_loss_from_form,
    friction_loss_sweep,
)

__all__ = [
    'CalculationResult',
    'classify_flow_regime',
    'compute',
    'compute_from_inputs',
    'calculate_friction_loss',
    'calculate_friction_loss_from_form',
    'friction_loss_sweep',
]
