"""Public interface for the cargo adapter."""

from __future__ import annotations

from .client import CargoCheckEventSource, CargoMetadataFetcher, build_cargo_sources
from .command import check_command, feature_args, metadata_command
from .schema import CARGO_MESSAGE_ADAPTER, CargoMessage, CargoMetadata
from .translator import parse_build_events, translate_message, translate_metadata

__all__ = [
    "CARGO_MESSAGE_ADAPTER",
    "CargoCheckEventSource",
    "CargoMessage",
    "CargoMetadata",
    "CargoMetadataFetcher",
    "build_cargo_sources",
    "check_command",
    "feature_args",
    "metadata_command",
    "parse_build_events",
    "translate_message",
    "translate_metadata",
]
