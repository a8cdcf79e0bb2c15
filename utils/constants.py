"""
Constants used across the Friction Loss MCP server.

This module defines unit conversion factors, solver defaults and display settings.
"""

# Conversion factors for the fixed input unit set
M3H_to_M3S = 1.0 / 3600.0    # m³/h to m³/s
MM_to_M = 0.001              # millimetre to meter

# Physical constants
G_GRAVITY = 9.80665          # Standard gravity acceleration, m/s² (NIST value)

# Flow regime classification
LAMINAR_RE_LIMIT = 2300.0    # Re below this is laminar; at or above is transitional/turbulent
LAMINAR_CONSTANT = 64.0      # Hagen-Poiseuille: f = 64 / Re
REGIME_LAMINAR = "Laminar"
REGIME_TURBULENT = "Transitional/Turbulent"

# Badge text shown next to each regime
REGIME_DISPLAY = {
    REGIME_LAMINAR: "Laminar Flow",
    REGIME_TURBULENT: "Turbulent Flow",
}

# Friction factor solver (Colebrook-White)
METHOD_COLEBROOK = "colebrook"
METHOD_SWAMEE_JAIN = "swamee_jain"
METHOD_LAMINAR = "laminar"
TURBULENT_METHODS = (METHOD_COLEBROOK, METHOD_SWAMEE_JAIN)
COLEBROOK_TOLERANCE = 1e-12  # Absolute |Δf| stopping criterion
COLEBROOK_MAX_ITER = 30      # Newton iteration cap

# Display precision (decimal places)
DISPLAY_DIGITS_REYNOLDS = 0
DISPLAY_DIGITS_FRICTION = 5
DISPLAY_DIGITS_HEAD_LOSS = 4
