"""Cargo invocation settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, env_float, env_list, env_str

DEFAULT_CARGO = "cargo"


@dataclass(frozen=True, slots=True)
class CargoConfig:
    """Feature selection and telemetry switches for loading a workspace."""

    # Do not activate the `default` feature.
    no_default_features: bool = False
    # Activate all available features; wins over everything else.
    all_features: bool = True
    # Ignored when either of the flags above is set.
    features: tuple[str, ...] = ()
    # Run `cargo check` to learn OUT_DIR, cfgs and proc-macro dylibs.
    load_out_dirs_from_check: bool = False
    # Target triple passed as `--filter-platform`.
    target: str | None = None


@dataclass(frozen=True, slots=True)
class ToolchainConfig:
    cargo: str = DEFAULT_CARGO
    timeout_seconds: float | None = None


def get_cargo_config() -> CargoConfig:
    defaults = CargoConfig()
    return CargoConfig(
        no_default_features=env_flag(
            "CRATEMAP_NO_DEFAULT_FEATURES", default=defaults.no_default_features
        ),
        all_features=env_flag("CRATEMAP_ALL_FEATURES", default=defaults.all_features),
        features=env_list("CRATEMAP_FEATURES"),
        load_out_dirs_from_check=env_flag(
            "CRATEMAP_LOAD_OUT_DIRS_FROM_CHECK", default=defaults.load_out_dirs_from_check
        ),
        target=env_str("CRATEMAP_TARGET"),
    )


def get_toolchain_config() -> ToolchainConfig:
    return ToolchainConfig(
        cargo=env_str("CARGO") or DEFAULT_CARGO,
        timeout_seconds=env_float("CRATEMAP_CARGO_TIMEOUT"),
    )
