"""
Resolver Configuration Schema.

Declarative settings consumed by PathResolver: the application folder name
used under the per-user special folders, the name of the assets directory
searched by the probe, and an optional explicit assets base.

Factory polymorphism mirrors the rest of the package: instances come from
YAML files, CLI arguments, or plain field defaults. The ``PATHFORGE_ASSETS``
environment variable pre-seeds the assets base for packaged/Docker layouts.
"""

# Standard Imports
import argparse
import os
from pathlib import Path
from typing import Any, Dict, Optional

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Internal Imports
from ..io import load_config_from_yaml
from ..paths.constants import ASSETS_ENV_VAR, DEFAULT_APP_NAME, DEFAULT_ASSETS_DIR_NAME


def _assets_from_env() -> Optional[str]:
    return os.getenv(ASSETS_ENV_VAR) or None


def _resolver_section(raw_data: Any, source: Path) -> Dict[str, Any]:
    """
    Extracts the resolver mapping from a loaded YAML document.

    An empty document or an empty ``resolver:`` key means "no settings".

    Raises:
        ValueError: If the document or its ``resolver`` section is not a mapping.
    """
    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ValueError(f"{source}: expected a mapping, got {type(raw_data).__name__}")

    section = raw_data.get("resolver", raw_data)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(
            f"{source}: 'resolver' must be a mapping, got {type(section).__name__}"
        )
    if not all(isinstance(key, str) for key in section):
        raise ValueError(f"{source}: resolver setting names must be strings")
    return section


class ResolverConfig(BaseModel):
    """
    Validated naming and assets settings for a PathResolver.

    Attributes:
        app_name: Folder created under the settings/data/cache special folders.
        assets_dir_name: Directory name probed for bundled assets.
        assets_base: Explicit assets base; disables probing when set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    assets_dir_name: str = Field(default=DEFAULT_ASSETS_DIR_NAME, min_length=1)
    assets_base: Optional[str] = Field(default_factory=_assets_from_env)

    @field_validator("app_name", "assets_dir_name")
    @classmethod
    def validate_single_element(cls, v: str) -> str:
        """Names must be a single path element."""
        v = v.strip()
        if not v or v in (".", ".."):
            raise ValueError(f"'{v}' is not a usable directory name")
        if "/" in v or "\\" in v:
            raise ValueError(f"'{v}' must not contain path separators")
        return v

    @field_validator("assets_base")
    @classmethod
    def validate_assets_base(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ResolverConfig":
        """
        Factory from a YAML file.

        Accepts either a flat mapping or one nested under a ``resolver`` key.
        """
        return cls(**_resolver_section(load_config_from_yaml(yaml_path), yaml_path))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ResolverConfig":
        """
        Factory from CLI arguments.

        **PRECEDENCE ORDER:**
        1. Flags passed explicitly on the command line
        2. Values from the ``--config`` YAML file
        3. Environment / field defaults
        """
        data: Dict[str, Any] = {}
        if getattr(args, "config", None):
            yaml_path = Path(args.config)
            data.update(_resolver_section(load_config_from_yaml(yaml_path), yaml_path))

        for field in ("app_name", "assets_dir_name", "assets_base"):
            value = getattr(args, field, None)
            if value is not None:
                data[field] = value

        return cls(**data)
