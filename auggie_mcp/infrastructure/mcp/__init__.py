# MCP (Model Context Protocol) Infrastructure
#
# This module provides the MCP server that exposes the Auggie CLI to agent
# hosts as the query_codebase tool, served over stdio.
