"""
Unified friction loss calculations: single evaluation, form input, and sweeps.
"""

from typing import Optional, Literal, Dict
import inspect
from tools.friction_loss import (
    calculate_friction_loss,
    calculate_friction_loss_from_form,
    friction_loss_sweep,
)


def friction_loss(
    mode: Literal["calculate", "parse_form", "sweep"] = "calculate",

    # Pipe and fluid inputs (fixed units)
    flowrate_m3_h: Optional[float] = None,
    diameter_mm: Optional[float] = None,
    density_kg_m3: Optional[float] = None,
    viscosity_pa_s: Optional[float] = None,
    roughness_mm: Optional[float] = None,
    length_m: Optional[float] = None,
    material: Optional[str] = None,
    method: Literal["colebrook", "swamee_jain"] = "colebrook",

    # Raw text form values (mode='parse_form')
    form: Optional[Dict[str, str]] = None,

    # Sweep parameters (mode='sweep')
    variable: Optional[str] = None,
    start: Optional[float] = None,
    stop: Optional[float] = None,
    n: Optional[int] = None,
) -> str:
    """
    Darcy-Weisbach head loss for full circular pipe flow.

    This omnitool consolidates the friction loss calculations:
    - mode='calculate': Reynolds number, flow regime, friction factor and head loss
    - mode='parse_form': Same, from raw text values as typed into a form
    - mode='sweep': Sweep one input over a linear range

    Args:
        mode: "calculate", "parse_form" or "sweep"

        Inputs:
            flowrate_m3_h: Flowrate in m³/h
            diameter_mm: Pipe internal diameter in mm
            density_kg_m3: Fluid density in kg/m³
            viscosity_pa_s: Dynamic viscosity in Pa·s
            roughness_mm: Absolute roughness in mm
            length_m: Pipe length in m
            material: Pipe material for roughness lookup (if roughness_mm omitted)
            method: "colebrook" (iterative) or "swamee_jain" (explicit)

        Form parameters:
            form: Field name -> text, e.g. {"flowrate": "100", "diameter": "150", ...}

        Sweep parameters:
            variable: Input to sweep (e.g. "flowrate_m3_h")
            start: Start value
            stop: Stop value
            n: Number of points

    Returns:
        JSON string with calculation results

    Examples:
        >>> friction_loss(flowrate_m3_h=100, diameter_mm=150, density_kg_m3=998,
        ...               viscosity_pa_s=0.001, roughness_mm=0.045, length_m=50)

        >>> friction_loss(mode="sweep", variable="flowrate_m3_h", start=10, stop=200, n=20,
        ...               diameter_mm=150, density_kg_m3=998, viscosity_pa_s=0.001,
        ...               material="Steel", length_m=50)
    """
    params = locals().copy()
    params.pop("mode")

    # Preflight checks for required parameters
    if mode == "parse_form" and form is None:
        return '{"error": "form is required for mode=parse_form"}'
    if mode == "sweep" and None in (variable, start, stop, n):
        return '{"error": "variable, start, stop and n are required for mode=sweep"}'

    if mode == "calculate":
        fn = calculate_friction_loss
    elif mode == "parse_form":
        fn = calculate_friction_loss_from_form
    elif mode == "sweep":
        fn = friction_loss_sweep
    else:
        return f'{{"error": "Invalid mode: {mode}. Must be \'calculate\', \'parse_form\' or \'sweep\'"}}'

    # Filter parameters to only those accepted by the target function
    sig = inspect.signature(fn)
    allowed = set(sig.parameters.keys())
    forwarded = {k: v for k, v in params.items() if k in allowed and v is not None}

    return fn(**forwarded)
