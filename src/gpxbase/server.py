"""MCP server for gpxbase.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.load import register_load_tools
from .tools.convert import register_convert_tools
from .tools.edit import register_edit_tools
from .tools.stats import register_stats_tools
from .tools.export import register_export_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "gpxbase",
    instructions="Convert, analyze and edit GPX tracks: GeoJSON and WKT output, trimming and segment removal",
)

# Register all tool groups
register_load_tools(mcp)
register_convert_tools(mcp)
register_edit_tools(mcp)
register_stats_tools(mcp)
register_export_tools(mcp)
register_status_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
