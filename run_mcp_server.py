#!/usr/bin/env python3
"""Convenience script to run the MCP server from a source checkout.

Usage:
    python run_mcp_server.py [path/to/schema.graphqls]

Or make it executable:
    chmod +x run_mcp_server.py
    ./run_mcp_server.py ../schema.shopify.2025-01.graphqls
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from graphql_schema_mcp.main import main


if __name__ == "__main__":
    sys.exit(main())
