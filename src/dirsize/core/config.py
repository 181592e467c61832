"""Configuration system for the dirsize shell.

This module implements the configuration schema using Pydantic for
validation, with support for environment variable resolution and fail-fast
validation with actionable error messages.
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Final

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from dirsize.utils.yaml_loading import load_yaml_mapping

logger = logging.getLogger(__name__)

# ${NAME} reference to an upper-case environment variable
ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Z0-9_]+)\}")

DEFAULT_CONFIG_PATH: Final[Path] = Path("dirsize.yaml")


class ApplicationConfig(BaseModel):
    """Configuration for application-level settings.

    Defines logging level and an optional log file. The default level keeps
    the interactive console free of log output.
    """

    log_level: Annotated[
        str,
        Field(
            description="Logging level",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        ),
    ] = "WARNING"
    log_file: Annotated[
        Path | None,
        Field(
            description="Optional file receiving log output in addition to stderr",
        ),
    ] = None


class ShellConfig(BaseModel):
    """Configuration for the interactive shell."""

    banner: Annotated[
        bool,
        Field(
            description="Print the welcome banner when the shell starts",
        ),
    ] = True
    root_alias: Annotated[
        str,
        Field(
            min_length=1,
            description="Name accepted by 'cd' as an alias for the root directory",
        ),
    ] = "root"

    @field_validator("root_alias", mode="after")
    @classmethod
    def validate_root_alias(cls, v: str) -> str:
        """Validate that the root alias is a single token.

        Args:
            v: Alias value

        Returns:
            Validated alias

        Raises:
            ValueError: If the alias contains whitespace or is a reserved target
        """
        if any(ch.isspace() for ch in v):
            msg = f"Root alias must not contain whitespace: {v!r}"
            raise ValueError(msg)
        if v == "..":
            msg = "Root alias must not be '..'"
            raise ValueError(msg)
        return v


class TreeConfig(BaseModel):
    """Configuration for the tree loaded at start-up.

    A relative ``seed_file`` is anchored at the directory of the
    configuration file it came from. Whether the file exists is checked when
    the tree is loaded, so ``--tree`` can replace a stale setting.
    """

    seed_file: Annotated[
        Path | None,
        Field(
            description="YAML tree definition to load instead of the demo tree",
        ),
    ] = None

    @field_validator("seed_file", mode="after")
    @classmethod
    def anchor_seed_file(cls, v: Path | None, info: ValidationInfo) -> Path | None:
        """Resolve a relative seed file against the ``base_dir`` validation context."""
        if v is None or v.is_absolute():
            return v
        context: object = info.context  # pyright: ignore[reportAny]  # pydantic context is untyped
        if isinstance(context, dict) and isinstance(base_dir := context.get("base_dir"), Path):  # pyright: ignore[reportUnknownMemberType]
            return base_dir / v
        return v


class MainConfig(BaseModel):
    """Main application configuration schema.

    Top-level configuration container aggregating all configuration sections:
    - application: Logging settings
    - shell: Interactive shell behaviour
    - tree: Start-up tree source
    """

    application: Annotated[
        ApplicationConfig,
        Field(
            description="Application-level configuration",
        ),
    ] = ApplicationConfig()
    shell: Annotated[
        ShellConfig,
        Field(
            description="Interactive shell configuration",
        ),
    ] = ShellConfig()
    tree: Annotated[
        TreeConfig,
        Field(
            description="Tree source configuration",
        ),
    ] = TreeConfig()


class EnvironmentVariableError(Exception):
    """Exception raised when a referenced environment variable is not set."""


class ConfigurationError(Exception):
    """Exception raised when configuration loading or validation fails."""


def resolve_env_var(value: str) -> str:
    """Substitute every ``${NAME}`` reference in a string.

    Raises:
        EnvironmentVariableError: If a referenced variable is not set

    Examples:
        >>> os.environ["TREE_DIR"] = "/srv/trees"
        >>> resolve_env_var("${TREE_DIR}/demo.yaml")
        '/srv/trees/demo.yaml'
    """

    def lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        try:
            return os.environ[name]
        except KeyError:
            msg = f"Environment variable '{name}' is referenced but not set"
            raise EnvironmentVariableError(msg) from None

    return ENV_VAR_PATTERN.sub(lookup, value)


def resolve_env_vars(data: Mapping[str, object]) -> dict[str, object]:
    """Resolve references in the string settings of a configuration mapping.

    The configuration is a mapping of sections, each a mapping of scalar
    settings, so only nested mappings are descended into. Other values are
    left for validation to judge.

    Raises:
        EnvironmentVariableError: If a referenced variable is not set
    """
    resolved: dict[str, object] = {}
    for key, value in data.items():
        if isinstance(value, str):
            resolved[key] = resolve_env_var(value)
        elif isinstance(value, Mapping):
            resolved[key] = resolve_env_vars(value)  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
        else:
            resolved[key] = value
    return resolved


def format_validation_error(error: ValidationError, config_path: Path) -> str:
    """Render a Pydantic validation error as field-level diagnostics.

    Args:
        error: Validation error raised by the schema
        config_path: File the configuration was loaded from

    Returns:
        Multi-line message listing every failing field
    """
    error_lines = ["Configuration validation failed:", ""]
    for detail in error.errors():
        field_path = " → ".join(str(loc) for loc in detail["loc"])
        error_lines.append(f"  Field: {field_path}")
        error_lines.append(f"  Error: {detail['msg']}")
        error_lines.append(f"  Type: {detail['type']}")
        error_lines.append("")

    error_lines.append(f"Configuration file: {config_path}")
    error_lines.append("Please fix the above errors and try again.")
    return "\n".join(error_lines)


def load_main_config(config_path: Path) -> MainConfig:
    """Load and validate the configuration file.

    An empty file yields the defaults. Environment variable references are
    substituted before validation.

    Args:
        config_path: Path to configuration YAML file

    Returns:
        Validated MainConfig instance

    Raises:
        ConfigurationError: If the file cannot be loaded or is invalid
    """
    raw_data = load_yaml_mapping(config_path, label="Configuration file", error=ConfigurationError)

    try:
        resolved_data = resolve_env_vars(raw_data)
    except EnvironmentVariableError as e:
        msg = f"Environment variable resolution failed in {config_path}: {e}"
        raise ConfigurationError(msg) from e

    try:
        config = MainConfig.model_validate(resolved_data, context={"base_dir": config_path.parent})
    except ValidationError as e:
        raise ConfigurationError(format_validation_error(e, config_path)) from e

    logger.info("Configuration loaded", extra={"config_path": str(config_path)})
    return config
