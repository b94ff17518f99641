"""
Configuration validation utilities.

This module turns the raw `[procfs]` and `[sampler]` tables into validated
configuration dataclasses.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import AppConfig, ProcfsConfig, SamplerConfig
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ["drop_new", "replace"]


def validate_procfs_config(procfs_data: Dict[str, Any]) -> ProcfsConfig:
    """
    Validate and create a ProcfsConfig from raw configuration data.

    The root directory is not required to exist at load time; a missing
    root surfaces as an I/O error on the first read.

    Args:
        procfs_data: Raw `[procfs]` table from TOML

    Returns:
        Validated ProcfsConfig instance

    Raises:
        ValidationError: If validation fails
    """
    root = procfs_data.get("root", "/proc")
    if not isinstance(root, str) or not root.strip():
        raise ValidationError(
            "procfs.root must be a non-empty string",
            field_name="procfs.root",
            value=root,
        )

    clock_ticks = validate_positive_integer(
        procfs_data.get("clock_ticks", 100),
        min_value=1,
        max_value=100000,
        field_name="procfs.clock_ticks",
    )

    return ProcfsConfig(root=Path(root), clock_ticks=clock_ticks)


def validate_sampler_config(sampler_data: Dict[str, Any]) -> SamplerConfig:
    """
    Validate and create a SamplerConfig from raw configuration data.

    Args:
        sampler_data: Raw `[sampler]` table from TOML

    Returns:
        Validated SamplerConfig instance

    Raises:
        ValidationError: If validation fails
    """
    interval_seconds = validate_positive_float(
        sampler_data.get("interval_seconds", 1.0),
        min_value=0.001,  # 1ms minimum
        max_value=3600.0,  # 1h maximum
        field_name="sampler.interval_seconds",
    )

    overflow_policy = validate_enum_choice(
        sampler_data.get("overflow_policy", "drop_new"),
        choices=OVERFLOW_POLICIES,
        field_name="sampler.overflow_policy",
    )

    stop_timeout = validate_positive_float(
        sampler_data.get("stop_timeout", 5.0),
        min_value=0.1,
        max_value=60.0,
        field_name="sampler.stop_timeout",
    )

    return SamplerConfig(
        interval_seconds=interval_seconds,
        overflow_policy=overflow_policy,
        stop_timeout=stop_timeout,
    )


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate the whole configuration document.

    Missing sections fall back to their defaults.
    """
    for section in ("procfs", "sampler"):
        if not isinstance(config_data.get(section, {}), dict):
            raise ValidationError(
                f"[{section}] must be a table",
                field_name=section,
                value=config_data.get(section),
            )

    return AppConfig(
        procfs=validate_procfs_config(config_data.get("procfs", {})),
        sampler=validate_sampler_config(config_data.get("sampler", {})),
    )
