"""
Shared input resolution using Pydantic models.

Holds the physical input record, the single DomainError kind raised on precondition
violations, parsing of raw text form values, and pipe roughness lookup by material.
"""

import math
import logging
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import MM_to_M

logger = logging.getLogger("friction-loss-mcp.input_resolver")

# (name, label, strictly positive)
FIELD_BOUNDS = (
    ("flowrate_m3_h", "Flowrate (Q)", False),
    ("diameter_mm", "Pipe diameter (D)", True),
    ("density_kg_m3", "Fluid density (ρ)", True),
    ("viscosity_pa_s", "Dynamic viscosity (μ)", True),
    ("roughness_mm", "Pipe roughness (ε)", False),
    ("length_m", "Pipe length (L)", False),
)

# camelCase keys posted by the calculator form
FORM_ALIASES = {
    "flowrate": "flowrate_m3_h",
    "diameter": "diameter_mm",
    "density": "density_kg_m3",
    "dynamicViscosity": "viscosity_pa_s",
    "pipeRoughness": "roughness_mm",
    "pipeLength": "length_m",
}

FORM_MISSING_MESSAGE = "All fields must be filled with valid numbers."
FORM_BOUNDS_MESSAGE = "Inputs must be valid. Diameter, density, and viscosity must be positive."


class DomainError(ValueError):
    """Raised when an input violates its physical bound."""

    def __init__(self, message: str, field: Optional[str] = None, bound: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.bound = bound


class PhysicalInputs(BaseModel):
    """The six pipe-flow inputs in their fixed units."""

    model_config = ConfigDict(frozen=True)

    flowrate_m3_h: float = Field(..., description="Volumetric flowrate in m³/h")
    diameter_mm: float = Field(..., description="Pipe internal diameter in mm")
    density_kg_m3: float = Field(..., description="Fluid density in kg/m³")
    viscosity_pa_s: float = Field(..., description="Fluid dynamic viscosity in Pa·s")
    roughness_mm: float = Field(..., description="Pipe absolute roughness in mm")
    length_m: float = Field(..., description="Pipe length in m")

    def check(self) -> "PhysicalInputs":
        """Raise DomainError if any field is out of bounds; return self otherwise."""
        check_domain(**self.model_dump())
        return self


def check_domain(**values: float) -> None:
    """
    Validate the six physical inputs before any arithmetic is performed.

    Fields are checked in a fixed order (Q, D, ρ, μ, ε, L) and the first violation
    is raised. Flowrate must also be non-zero, since a zero Reynolds number leaves
    the friction factor undefined.

    Raises:
        DomainError: naming the offending field and the bound it violates
    """
    for name, label, positive in FIELD_BOUNDS:
        value = values.get(name)
        if value is None:
            raise DomainError(f"Missing required input: {name}.", field=name, bound="required")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DomainError(f"{label} must be a real number, got {value!r}.", field=name, bound="real")
        if not math.isfinite(value):
            raise DomainError(f"{label} must be finite, got {value}.", field=name, bound="finite")
        if positive and value <= 0:
            raise DomainError(f"{label} must be greater than zero, got {value}.", field=name, bound="> 0")
        if not positive and value < 0:
            raise DomainError(f"{label} must not be negative, got {value}.", field=name, bound=">= 0")

    if values["flowrate_m3_h"] == 0:
        raise DomainError(
            "Flowrate (Q) must be greater than zero: the Reynolds number is zero and "
            "the friction factor is undefined.",
            field="flowrate_m3_h", bound="> 0",
        )


def parse_form_inputs(raw: Dict[str, str]) -> PhysicalInputs:
    """
    Parse raw text values collected by a form into a checked PhysicalInputs.

    Accepts the snake_case field names as well as the calculator form keys
    (flowrate, diameter, density, dynamicViscosity, pipeRoughness, pipeLength).

    Raises:
        DomainError: FORM_MISSING_MESSAGE if any field is absent or not a number,
            FORM_BOUNDS_MESSAGE if any parsed value is out of bounds
    """
    normalized = {FORM_ALIASES.get(key, key): value for key, value in raw.items()}

    parsed = {}
    for name, _label, _positive in FIELD_BOUNDS:
        text = normalized.get(name)
        try:
            value = float(str(text).strip())
        except (TypeError, ValueError):
            raise DomainError(FORM_MISSING_MESSAGE, field=name, bound="number") from None
        if math.isnan(value):
            raise DomainError(FORM_MISSING_MESSAGE, field=name, bound="number")
        parsed[name] = value

    try:
        check_domain(**parsed)
    except DomainError as e:
        raise DomainError(FORM_BOUNDS_MESSAGE, field=e.field, bound=e.bound) from e

    return PhysicalInputs(**parsed)


def get_pipe_roughness_mm(material: Optional[str] = None, roughness_mm: Optional[float] = None) -> tuple:
    """Get pipe roughness in mm from an explicit value or a material name.

    Args:
        material: Optional pipe material name (case-insensitive, from fluids' roughness table)
        roughness_mm: Optional explicit roughness in mm; takes precedence

    Returns:
        Tuple of (roughness in mm, source description)

    Raises:
        DomainError: if neither is given or the material is unknown
    """
    if roughness_mm is not None:
        return roughness_mm, "Provided"

    if material is not None:
        from fluids.friction import _roughness
        mat_lower = {k.lower(): k for k in _roughness.keys()}
        actual_key = mat_lower.get(material.strip().lower())
        if actual_key is None:
            logger.warning("Material '%s' not found in roughness table", material)
            raise DomainError(
                f"Unknown pipe material '{material}'. Provide roughness_mm or one of: "
                f"{', '.join(sorted(_roughness.keys()))}.",
                field="material", bound="known material",
            )
        return _roughness[actual_key] / MM_to_M, f"Material Lookup '{actual_key}'"

    raise DomainError("Missing required input: roughness_mm or material.", field="roughness_mm", bound="required")


def list_roughness_materials() -> Dict[str, float]:
    """Return the material roughness table in mm."""
    from fluids.friction import _roughness
    return {name: value / MM_to_M for name, value in sorted(_roughness.items())}
