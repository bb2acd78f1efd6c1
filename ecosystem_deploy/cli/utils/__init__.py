"""CLI utilities"""

from .output import (
    console,
    format_error,
    format_manifest,
    format_network_list,
    format_step,
    format_validation,
    format_verification_report,
    format_yaml,
)

__all__ = [
    "console",
    "format_error",
    "format_manifest",
    "format_network_list",
    "format_step",
    "format_validation",
    "format_verification_report",
    "format_yaml",
]
