"""Configuration schema and loading system for railing quotes.

This package provides JSON-based configuration loading and validation
for railing quotes. It includes Pydantic models for schema validation,
a configuration loader with error handling, and railing advisory checks.

Public API:
    - QuoteConfiguration: Root configuration model
    - RailingConfig: Rail style, infill, picket style and railing end
    - SectionConfigSchema: Section configuration model
    - CustomerConfig: Customer contact details
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_request: Convert a configuration to a QuoteRequest

Example:
    >>> from pathlib import Path
    >>> from railquote.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-deck.json"))
    ...     print(f"Sections: {len(config.sections)}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from railquote.application.config.adapter import config_to_request, config_to_sections
from railquote.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from railquote.application.config.schema import (
    SUPPORTED_VERSIONS,
    VALID_OUTPUT_FORMATS,
    CustomerConfig,
    DiagramOutputConfigSchema,
    OutputConfig,
    QuoteConfiguration,
    RailingConfig,
    SectionConfigSchema,
)
from railquote.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "VALID_OUTPUT_FORMATS",
    "ConfigError",
    "CustomerConfig",
    "DiagramOutputConfigSchema",
    "OutputConfig",
    "QuoteConfiguration",
    "RailingConfig",
    "SectionConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_request",
    "config_to_sections",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
