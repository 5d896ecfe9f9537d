"""Unified settings — CLI flags, env vars, and TOML manifest in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``WHITE_LABEL_*`` prefix (``WHITE_LABEL_BRAND`` selects the brand)
  3. TOML file    — ``white-label.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The brand is never read from the TOML file: a brand written into the
manifest would act as a silent default, and an unset brand must fail.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, EnvSettingsSource, PydanticBaseSettingsSource

from white_label.config.discovery import find_config, load_config
from white_label.config.models import BuildConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``white-label.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            import click

            try:
                config = load_config(toml_path)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            except ValidationError as exc:
                msg = f"Invalid manifest {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            # Only keys present in the file, so env vars can still fill the rest.
            self._data = config.model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


class UpperCaseEnvSettingsSource(EnvSettingsSource):
    """``WHITE_LABEL_*`` environment variables, honoured only in upper case.

    pydantic-settings matches names case-insensitively by default, which
    would let ``white_label_brand`` select a brand.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self.env_vars = {
            name.lower(): value for name, value in os.environ.items() if name == name.upper()
        }


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class WhiteLabelSettings(BaseSettings):
    """Unified settings for the white-label CLI and services.

    Attributes:
        brand: Configured brand, or None when neither ``--brand`` nor
            ``WHITE_LABEL_BRAND`` is set. An empty string is a configured brand.
        project_root: Directory relative paths resolve against (parent of
            ``white-label.toml``, or CWD if no manifest was found).
        config_path: Manifest in use, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WHITE_LABEL_",
        "env_nested_delimiter": "__",
    }

    brand: str | None = None

    # --- Resolved paths (not in TOML — derived from manifest location) ---
    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    build: BuildConfig = Field(default_factory=BuildConfig)
    constants: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI kwargs, then upper-case env vars, then the TOML manifest."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            UpperCaseEnvSettingsSource(settings_cls),
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        brand: str | None = None,
        **cli_flags: Any,
    ) -> WhiteLabelSettings:
        """Construct settings from a CLI invocation.

        Discovers ``white-label.toml`` via walk-up (or explicit
        *config_path*), resolves *project_root* from the manifest's parent
        directory, and merges CLI flags as highest-priority overrides.
        A *brand* of None leaves ``WHITE_LABEL_BRAND`` in charge.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        if brand is not None:
            cli_flags["brand"] = brand

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
