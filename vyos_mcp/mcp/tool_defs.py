"""MCP Tool Definitions for the VyOS server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Config Queries: vyos_show_config, vyos_config_exists, vyos_return_values
    - Config Changes: vyos_set_config, vyos_delete_config
    - Config Persistence: vyos_commit, vyos_save_config
    - Operational: vyos_show, vyos_reset, vyos_generate
    - Convenience: vyos_system_info, vyos_ping, vyos_traceroute,
      vyos_interface_stats, vyos_routing_table, vyos_dhcp_leases, vyos_health_check
    - Power: vyos_reboot, vyos_poweroff
"""

from typing import Any

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}, "required": []}


def _path_schema(description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "path": {
                "type": "array",
                "items": {"type": "string"},
                "description": description,
            },
        },
        "required": ["path"],
    }


_HOST_PROPERTY: dict[str, Any] = {"type": "string", "description": "Hostname or IP address"}


TOOL_DEFINITIONS: list[dict[str, Any]] = [
    # ============ Config Queries ============
    {
        "name": "vyos_show_config",
        "description": "Retrieve VyOS configuration at a path",
        "inputSchema": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "array",
                    "items": {"type": "string"},
                    "default": [],
                    "description": 'Configuration path components, e.g. ["interfaces", "ethernet", "eth0"]',
                },
                "format": {
                    "type": "string",
                    "enum": ["json", "raw"],
                    "default": "json",
                    "description": "Output format",
                },
            },
            "required": [],
        },
    },
    {
        "name": "vyos_config_exists",
        "description": "Check if a configuration path exists",
        "inputSchema": _path_schema("Configuration path to check"),
    },
    {
        "name": "vyos_return_values",
        "description": "Get values at a configuration path",
        "inputSchema": _path_schema("Configuration path"),
    },
    # ============ Config Changes ============
    {
        "name": "vyos_set_config",
        "description": "Set a VyOS configuration value",
        "inputSchema": _path_schema("Configuration path including value as last element"),
    },
    {
        "name": "vyos_delete_config",
        "description": "Delete a VyOS configuration node",
        "inputSchema": _path_schema("Configuration path to delete"),
    },
    # ============ Config Persistence ============
    {
        "name": "vyos_commit",
        "description": "Commit pending configuration changes",
        "inputSchema": {
            "type": "object",
            "properties": {
                "comment": {"type": "string", "description": "Optional commit comment"},
                "confirm_timeout": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Minutes before auto-rollback if not confirmed",
                },
            },
            "required": [],
        },
    },
    {
        "name": "vyos_save_config",
        "description": "Save running configuration to startup config",
        "inputSchema": _EMPTY_SCHEMA,
    },
    # ============ Operational ============
    {
        "name": "vyos_show",
        "description": "Run an operational show command",
        "inputSchema": _path_schema('Command path components, e.g. ["ip", "route"]'),
    },
    {
        "name": "vyos_reset",
        "description": "Run a reset command",
        "inputSchema": _path_schema("Command path components"),
    },
    {
        "name": "vyos_generate",
        "description": "Run a generate command",
        "inputSchema": _path_schema("Command path components"),
    },
    # ============ Convenience ============
    {
        "name": "vyos_system_info",
        "description": "Get system version, uptime, and resource usage",
        "inputSchema": _EMPTY_SCHEMA,
    },
    {
        "name": "vyos_ping",
        "description": "Ping a host from the router",
        "inputSchema": {
            "type": "object",
            "properties": {
                "host": _HOST_PROPERTY,
                "count": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 20,
                    "default": 4,
                    "description": "Number of pings",
                },
            },
            "required": ["host"],
        },
    },
    {
        "name": "vyos_traceroute",
        "description": "Traceroute to a host from the router",
        "inputSchema": {
            "type": "object",
            "properties": {"host": _HOST_PROPERTY},
            "required": ["host"],
        },
    },
    {
        "name": "vyos_interface_stats",
        "description": "Show interface statistics",
        "inputSchema": _EMPTY_SCHEMA,
    },
    {
        "name": "vyos_routing_table",
        "description": "Show routing table",
        "inputSchema": _EMPTY_SCHEMA,
    },
    {
        "name": "vyos_dhcp_leases",
        "description": "Show DHCP server leases",
        "inputSchema": _EMPTY_SCHEMA,
    },
    {
        "name": "vyos_health_check",
        "description": "System health check: CPU, memory, storage, uptime",
        "inputSchema": _EMPTY_SCHEMA,
    },
    # ============ Power ============
    {
        "name": "vyos_reboot",
        "description": "Reboot the router",
        "inputSchema": _EMPTY_SCHEMA,
    },
    {
        "name": "vyos_poweroff",
        "description": "Power off the router",
        "inputSchema": _EMPTY_SCHEMA,
    },
]
