"""
Friction engine: Darcy-Weisbach head loss in a full circular pipe.

Evaluation chain: unit normalization -> Reynolds number -> flow regime ->
friction factor (laminar closed form or Colebrook-White / Swamee-Jain) -> head loss.
Every function here is pure; inputs are checked before any arithmetic.
"""

import math
import logging
from typing import Literal

import fluids.core
from pydantic import BaseModel, ConfigDict, Field

from utils.colebrook import colebrook_white, swamee_jain
from utils.constants import (
    M3H_to_M3S, MM_to_M, G_GRAVITY, LAMINAR_RE_LIMIT, LAMINAR_CONSTANT,
    REGIME_LAMINAR, REGIME_TURBULENT, METHOD_COLEBROOK, METHOD_SWAMEE_JAIN,
    METHOD_LAMINAR, TURBULENT_METHODS, COLEBROOK_TOLERANCE, COLEBROOK_MAX_ITER,
)
from utils.input_resolver import DomainError, PhysicalInputs, check_domain

# Configure logging
logger = logging.getLogger("friction-loss-mcp.friction_engine")

FlowRegime = Literal["Laminar", "Transitional/Turbulent"]


class CalculationResult(BaseModel):
    """Result of a single head-loss evaluation."""

    model_config = ConfigDict(frozen=True)

    reynolds_number: float = Field(..., description="Reynolds number (dimensionless)")
    flow_regime: FlowRegime = Field(..., description="Laminar or Transitional/Turbulent")
    friction_factor: float = Field(..., description="Darcy friction factor (dimensionless)")
    head_loss_m: float = Field(..., description="Darcy-Weisbach head loss in m")
    velocity_m_s: float = Field(..., description="Mean flow velocity in m/s")
    relative_roughness: float = Field(..., description="Relative roughness ε/D")
    method: str = Field(..., description="Friction factor method used")
    iterations: int = Field(0, description="Colebrook iterations performed")
    converged: bool = Field(True, description="False if the Colebrook solve hit its iteration cap")


def _require_finite(value: float, quantity: str, field: str) -> None:
    """Intermediate results must stay finite; overflow is reported against the driving input."""
    if not math.isfinite(value):
        raise DomainError(
            f"{quantity} overflows for these inputs (got {value}); reduce {field}.",
            field=field, bound="finite result",
        )


def classify_flow_regime(re: float) -> str:
    """Laminar below Re = 2300, Transitional/Turbulent at or above it."""
    return REGIME_LAMINAR if re < LAMINAR_RE_LIMIT else REGIME_TURBULENT


def compute(
    flowrate: float,
    diameter: float,
    density: float,
    dynamic_viscosity: float,
    pipe_roughness: float,
    pipe_length: float,
    method: str = METHOD_COLEBROOK,
    tolerance: float = COLEBROOK_TOLERANCE,
    max_iter: int = COLEBROOK_MAX_ITER,
) -> CalculationResult:
    """Compute Reynolds number, flow regime, friction factor and head loss.

    Args:
        flowrate: Volumetric flowrate in m³/h (> 0)
        diameter: Pipe internal diameter in mm (> 0)
        density: Fluid density in kg/m³ (> 0)
        dynamic_viscosity: Fluid dynamic viscosity in Pa·s (> 0)
        pipe_roughness: Pipe absolute roughness in mm (>= 0)
        pipe_length: Pipe length in m (>= 0)
        method: Turbulent friction factor policy, "colebrook" (iterative) or
            "swamee_jain" (explicit)
        tolerance: Colebrook stopping criterion on |Δf|
        max_iter: Colebrook iteration cap

    Returns:
        CalculationResult

    Raises:
        DomainError: if any input violates its bound or the method is unknown
    """
    check_domain(
        flowrate_m3_h=flowrate,
        diameter_mm=diameter,
        density_kg_m3=density,
        viscosity_pa_s=dynamic_viscosity,
        roughness_mm=pipe_roughness,
        length_m=pipe_length,
    )
    if method not in TURBULENT_METHODS:
        raise DomainError(
            f"Unknown friction factor method '{method}'. Use one of: {', '.join(TURBULENT_METHODS)}.",
            field="method", bound="known method",
        )

    # 1. Unit normalization
    flow_si = flowrate * M3H_to_M3S
    diameter_si = diameter * MM_to_M
    roughness_si = pipe_roughness * MM_to_M
    area = math.pi / 4.0 * diameter_si * diameter_si
    if not (area > 0 and math.isfinite(area)):
        raise DomainError(
            f"Pipe diameter (D) gives no usable flow area (D={diameter} mm, A={area} m²).",
            field="diameter_mm", bound="> 0",
        )
    velocity = flow_si / area
    _require_finite(velocity, "Mean velocity", "flowrate_m3_h")

    # 2. Reynolds number
    Re = fluids.core.Reynolds(V=velocity, D=diameter_si, rho=density, mu=dynamic_viscosity)
    if not (Re > 0 and math.isfinite(Re)):
        raise DomainError(f"Reynolds number is not a positive finite value (Re={Re}).", field="reynolds_number", bound="> 0")
    eD = roughness_si / diameter_si

    # 3. Flow regime
    regime = classify_flow_regime(Re)

    # 4. Friction factor
    iterations = 0
    converged = True
    if regime == REGIME_LAMINAR:
        fd = LAMINAR_CONSTANT / Re
        used_method = METHOD_LAMINAR
    elif method == METHOD_SWAMEE_JAIN:
        fd = swamee_jain(Re, eD)
        used_method = METHOD_SWAMEE_JAIN
    else:
        fd, iterations, converged = colebrook_white(Re, eD, tolerance=tolerance, max_iter=max_iter)
        used_method = METHOD_COLEBROOK

    # 5. Darcy-Weisbach head loss
    _require_finite(fd, "Friction factor", "flowrate_m3_h")
    head_loss = fd * (pipe_length / diameter_si) * velocity * velocity / (2 * G_GRAVITY)
    _require_finite(head_loss, "Head loss", "length_m")

    logger.debug(
        "Q=%g m3/h D=%g mm -> v=%.6g m/s Re=%.6g (%s) f=%.8g [%s] hf=%.6g m",
        flowrate, diameter, velocity, Re, regime, fd, used_method, head_loss,
    )

    return CalculationResult(
        reynolds_number=Re,
        flow_regime=regime,
        friction_factor=fd,
        head_loss_m=head_loss,
        velocity_m_s=velocity,
        relative_roughness=eD,
        method=used_method,
        iterations=iterations,
        converged=converged,
    )


def compute_from_inputs(inputs: PhysicalInputs, **options) -> CalculationResult:
    """Run compute() on a PhysicalInputs record; options are forwarded (method, tolerance, max_iter)."""
    return compute(
        inputs.flowrate_m3_h,
        inputs.diameter_mm,
        inputs.density_kg_m3,
        inputs.viscosity_pa_s,
        inputs.roughness_mm,
        inputs.length_m,
        **options,
    )
