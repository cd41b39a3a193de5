"""Enumeration types for VyOS MCP Server."""

import logging
from enum import StrEnum


class ToolName(StrEnum):
    """Available VyOS tools."""

    # Config queries
    VYOS_SHOW_CONFIG = "vyos_show_config"
    VYOS_CONFIG_EXISTS = "vyos_config_exists"
    VYOS_RETURN_VALUES = "vyos_return_values"
    # Config changes
    VYOS_SET_CONFIG = "vyos_set_config"
    VYOS_DELETE_CONFIG = "vyos_delete_config"
    # Config persistence
    VYOS_COMMIT = "vyos_commit"
    VYOS_SAVE_CONFIG = "vyos_save_config"
    # Operational commands
    VYOS_SHOW = "vyos_show"
    VYOS_RESET = "vyos_reset"
    VYOS_GENERATE = "vyos_generate"
    # Convenience tools
    VYOS_SYSTEM_INFO = "vyos_system_info"
    VYOS_PING = "vyos_ping"
    VYOS_TRACEROUTE = "vyos_traceroute"
    VYOS_INTERFACE_STATS = "vyos_interface_stats"
    VYOS_ROUTING_TABLE = "vyos_routing_table"
    VYOS_DHCP_LEASES = "vyos_dhcp_leases"
    VYOS_HEALTH_CHECK = "vyos_health_check"
    # Power
    VYOS_REBOOT = "vyos_reboot"
    VYOS_POWEROFF = "vyos_poweroff"


class ProtocolVersion(StrEnum):
    """MCP protocol revisions this server understands."""

    V2024_11_05 = "2024-11-05"
    V2025_03_26 = "2025-03-26"
    V2025_06_18 = "2025-06-18"


class ConfigFormat(StrEnum):
    """Output format for showConfig."""

    JSON = "json"
    RAW = "raw"  # VyOS curly-brace config text


class LogLevel(StrEnum):
    """MCP logging levels (RFC 5424 severities)."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"

    def to_python(self) -> int:
        """Map onto the closest stdlib logging level."""
        return _PYTHON_LEVELS[self]


_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.EMERGENCY: logging.CRITICAL,
}
