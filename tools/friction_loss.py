"""
Pipe friction loss calculation tool.

This module provides MCP-facing tools that evaluate Darcy-Weisbach head loss for a
single set of inputs, for raw text form values, or over a parameter sweep.
"""

import logging
from typing import Dict, Optional

import numpy as np

from tools.friction_engine import compute
from utils.constants import METHOD_COLEBROOK
from utils.input_resolver import DomainError, get_pipe_roughness_mm, parse_form_inputs
from utils.json_helpers import format_display, safe_json_dumps

# Configure logging
logger = logging.getLogger("friction-loss-mcp.friction_loss")

SWEEP_VARIABLES = (
    "flowrate_m3_h", "diameter_mm", "density_kg_m3",
    "viscosity_pa_s", "roughness_mm", "length_m",
)


def _result_payload(result, results_log, error_log) -> dict:
    payload = {
        "inputs_resolved": results_log,
        "reynolds_number": result.reynolds_number,
        "flow_regime": result.flow_regime,
        "friction_factor": result.friction_factor,
        "head_loss_m": result.head_loss_m,
        "flow_velocity_m_s": result.velocity_m_s,
        "relative_roughness": result.relative_roughness,
        "friction_method": result.method,
        "iterations": result.iterations,
        "converged": result.converged,
        "display": format_display(result),
    }
    if error_log:
        payload["warnings"] = error_log
    return payload


def calculate_friction_loss(
    flowrate_m3_h: Optional[float] = None,    # Volumetric flowrate in m³/h
    diameter_mm: Optional[float] = None,      # Pipe internal diameter in mm
    density_kg_m3: Optional[float] = None,    # Fluid density in kg/m³
    viscosity_pa_s: Optional[float] = None,   # Fluid dynamic viscosity in Pa·s
    roughness_mm: Optional[float] = None,     # Pipe absolute roughness in mm
    length_m: Optional[float] = None,         # Pipe length in m
    material: Optional[str] = None,           # Pipe material for roughness lookup
    method: str = METHOD_COLEBROOK,           # "colebrook" or "swamee_jain"
) -> str:
    """Calculate Reynolds number, flow regime, friction factor and head loss for a pipe.

    Roughness may be given directly or looked up by material name; an explicit
    roughness_mm takes precedence over material.

    Args:
        flowrate_m3_h: Flowrate in m³/h
        diameter_mm: Pipe internal diameter in mm
        density_kg_m3: Fluid density in kg/m³
        viscosity_pa_s: Fluid dynamic viscosity in Pa·s
        roughness_mm: Pipe absolute roughness in mm
        length_m: Pipe length in m
        material: Optional - Pipe material name (e.g., "Steel", "PVC")
        method: Turbulent friction factor method: "colebrook" (iterative, default)
            or "swamee_jain" (explicit)

    Returns:
        JSON string with results and display-formatted values, or an error
    """
    results_log = []
    error_log = []

    try:
        local_roughness, roughness_source = get_pipe_roughness_mm(material, roughness_mm)
        results_log.append(f"Pipe roughness: {roughness_source} -> {local_roughness:g} mm")

        result = compute(
            flowrate_m3_h, diameter_mm, density_kg_m3, viscosity_pa_s,
            local_roughness, length_m, method=method,
        )
        results_log.append(f"Friction factor method: {result.method}")

        if not result.converged:
            error_log.append(
                f"Colebrook iteration did not converge after {result.iterations} iterations; "
                "friction factor is a best estimate."
            )

        return safe_json_dumps(_result_payload(result, results_log, error_log))

    except DomainError as e:
        return safe_json_dumps({"error": str(e), "field": e.field, "log": results_log})
    except Exception as e:
        logger.error(f"Error in calculate_friction_loss: {e}", exc_info=True)
        return safe_json_dumps({"error": f"Calculation error: {str(e)}", "log": results_log})


def calculate_friction_loss_from_form(
    form: Dict[str, str],
    method: str = METHOD_COLEBROOK,
) -> str:
    """Calculate friction loss from raw text form values.

    Args:
        form: Mapping of field name to text, using either the snake_case names or the
            form keys flowrate, diameter, density, dynamicViscosity, pipeRoughness, pipeLength
        method: Turbulent friction factor method

    Returns:
        JSON string with results, or an error message suitable for the form
    """
    try:
        inputs = parse_form_inputs(form)
    except DomainError as e:
        return safe_json_dumps({"error": str(e), "field": e.field})

    return calculate_friction_loss(
        flowrate_m3_h=inputs.flowrate_m3_h,
        diameter_mm=inputs.diameter_mm,
        density_kg_m3=inputs.density_kg_m3,
        viscosity_pa_s=inputs.viscosity_pa_s,
        roughness_mm=inputs.roughness_mm,
        length_m=inputs.length_m,
        method=method,
    )


def friction_loss_sweep(
    variable: str,
    start: float,
    stop: float,
    n: int,
    # Base calculation parameters
    flowrate_m3_h: Optional[float] = None,
    diameter_mm: Optional[float] = None,
    density_kg_m3: Optional[float] = None,
    viscosity_pa_s: Optional[float] = None,
    roughness_mm: Optional[float] = None,
    length_m: Optional[float] = None,
    material: Optional[str] = None,
    method: str = METHOD_COLEBROOK,
) -> str:
    """Parameter sweep for pipe friction loss.

    Sweeps one input over numpy.linspace(start, stop, n) while holding the others
    constant. Points that violate an input bound are reported with an error and do
    not stop the sweep.

    Args:
        variable: Input to sweep, one of flowrate_m3_h, diameter_mm, density_kg_m3,
            viscosity_pa_s, roughness_mm, length_m
        start: Start value for sweep
        stop: Stop value for sweep
        n: Number of points in sweep

    Returns:
        JSON string with sweep results as list of dictionaries
    """
    if variable not in SWEEP_VARIABLES:
        return safe_json_dumps({"error": f"Invalid sweep variable '{variable}'. Use one of: {', '.join(SWEEP_VARIABLES)}."})
    if n < 1:
        return safe_json_dumps({"error": "n must be at least 1."})

    base_kwargs = {
        "flowrate_m3_h": flowrate_m3_h,
        "diameter_mm": diameter_mm,
        "density_kg_m3": density_kg_m3,
        "viscosity_pa_s": viscosity_pa_s,
        "roughness_mm": roughness_mm,
        "length_m": length_m,
    }

    try:
        if variable != "roughness_mm":
            base_kwargs["roughness_mm"], _ = get_pipe_roughness_mm(material, roughness_mm)
    except DomainError as e:
        return safe_json_dumps({"error": str(e), "field": e.field})

    sweep_values = np.linspace(start, stop, n)
    results = []

    for value in sweep_values:
        kwargs = base_kwargs.copy()
        kwargs[variable] = float(value)
        try:
            result = compute(
                kwargs["flowrate_m3_h"], kwargs["diameter_mm"], kwargs["density_kg_m3"],
                kwargs["viscosity_pa_s"], kwargs["roughness_mm"], kwargs["length_m"],
                method=method,
            )
            results.append({
                variable: float(value),
                "reynolds_number": result.reynolds_number,
                "flow_regime": result.flow_regime,
                "friction_factor": result.friction_factor,
                "head_loss_m": result.head_loss_m,
                "flow_velocity_m_s": result.velocity_m_s,
                "converged": result.converged,
            })
        except DomainError as e:
            results.append({variable: float(value), "error": str(e)})
        except Exception as e:
            logger.error(f"Error in friction_loss_sweep at {variable}={value}: {e}", exc_info=True)
            results.append({variable: float(value), "error": f"Calculation error: {str(e)}"})

    return safe_json_dumps({
        "sweep_variable": variable,
        "sweep_range": {"start": start, "stop": stop, "n": n},
        "results": results,
        "summary": {
            "total_points": len(results),
            "successful_points": len([r for r in results if "error" not in r]),
            "failed_points": len([r for r in results if "error" in r]),
        },
    })
