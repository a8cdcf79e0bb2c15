"""
MCP Server for pipe friction loss calculations.

This server provides Darcy-Weisbach head loss tools for full circular pipe flow:
Reynolds number, flow regime, Colebrook-White friction factor and head loss.
"""

import logging
from mcp.server.fastmcp import FastMCP

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("friction-loss-mcp")

# Initialize the MCP server
mcp = FastMCP("friction-loss-calculator")

from omnitools.friction_loss import friction_loss
from omnitools.help_resources import help_resources

# Register omnitools with MCP
mcp.tool()(friction_loss)
mcp.tool()(help_resources)


def main():
    logger.info("Starting Friction Loss MCP server...")
    logger.info("Registered omnitools:")
    logger.info("  - friction_loss: Head loss, friction factor and flow regime (calculate/parse_form/sweep)")
    logger.info("  - help_resources: Input fields, solver methods, regimes and roughness materials")

    # Start the server
    mcp.run()


if __name__ == "__main__":
    main()
