"""Feature selection passed to cargo invocations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cratemap.config import CargoConfig


class FeatureMode(StrEnum):
    DEFAULT = "default"
    ALL_FEATURES = "all-features"
    NO_DEFAULT_FEATURES = "no-default-features"
    FEATURES = "features"


@dataclass(frozen=True, slots=True)
class FeatureSelection:
    """The single feature mode transmitted to cargo for one invocation."""

    mode: FeatureMode = FeatureMode.DEFAULT
    features: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: CargoConfig) -> FeatureSelection:
        # cargo treats --no-default-features and --features as overlapping switches;
        # only one mode is ever sent, in this order.
        if config.all_features:
            return cls(FeatureMode.ALL_FEATURES)
        if config.no_default_features:
            return cls(FeatureMode.NO_DEFAULT_FEATURES)
        if config.features:
            return cls(FeatureMode.FEATURES, tuple(config.features))
        return cls()
