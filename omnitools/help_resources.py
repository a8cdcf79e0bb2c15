"""Help resources omnitool - lists input fields, solver methods, flow regimes and materials."""

import json
from typing import Literal

from utils.constants import (
    LAMINAR_RE_LIMIT, REGIME_LAMINAR, REGIME_TURBULENT, REGIME_DISPLAY,
    COLEBROOK_TOLERANCE, COLEBROOK_MAX_ITER,
)
from utils.input_resolver import list_roughness_materials


INPUT_FIELDS = [
    {"name": "flowrate_m3_h", "form_key": "flowrate", "unit": "m³/h", "bound": "> 0", "example": 100},
    {"name": "diameter_mm", "form_key": "diameter", "unit": "mm", "bound": "> 0", "example": 150},
    {"name": "density_kg_m3", "form_key": "density", "unit": "kg/m³", "bound": "> 0", "example": 998},
    {"name": "viscosity_pa_s", "form_key": "dynamicViscosity", "unit": "Pa·s", "bound": "> 0", "example": 0.001},
    {"name": "roughness_mm", "form_key": "pipeRoughness", "unit": "mm", "bound": ">= 0", "example": 0.045},
    {"name": "length_m", "form_key": "pipeLength", "unit": "m", "bound": ">= 0", "example": 50},
]

METHODS = {
    "colebrook": (
        "Colebrook-White solved by Newton iteration on 1/√f, seeded with Swamee-Jain. "
        f"Stops at |Δf| < {COLEBROOK_TOLERANCE:g} or {COLEBROOK_MAX_ITER} iterations (best estimate returned)."
    ),
    "swamee_jain": "Explicit Swamee-Jain (1976): f = 0.25 / [log10(ε/D/3.7 + 5.74/Re^0.9)]²",
}

REGIMES = [
    {"name": REGIME_LAMINAR, "display": REGIME_DISPLAY[REGIME_LAMINAR],
     "condition": f"Re < {LAMINAR_RE_LIMIT:g}", "friction_factor": "f = 64 / Re"},
    {"name": REGIME_TURBULENT, "display": REGIME_DISPLAY[REGIME_TURBULENT],
     "condition": f"Re >= {LAMINAR_RE_LIMIT:g}", "friction_factor": "Colebrook-White or Swamee-Jain"},
]


def help_resources(
    topic: Literal["inputs", "methods", "regimes", "materials", "all"] = "all",
) -> str:
    """List reference information for the friction loss tool.

    Args:
        topic: "inputs", "methods", "regimes", "materials" or "all"

    Returns:
        JSON string with the requested reference data
    """
    sections = {
        "inputs": lambda: INPUT_FIELDS,
        "methods": lambda: METHODS,
        "regimes": lambda: REGIMES,
        "materials": lambda: {name: round(value, 6) for name, value in list_roughness_materials().items()},
    }

    if topic == "all":
        return json.dumps({name: build() for name, build in sections.items()})
    if topic not in sections:
        return json.dumps({"error": f"Invalid topic: {topic}"})
    return json.dumps({topic: sections[topic]()})
