from __future__ import annotations

from cratemap.config import CargoConfig
from cratemap.domain.features import FeatureMode, FeatureSelection


def test_all_features_overrides_everything() -> None:
    config = CargoConfig(all_features=True, no_default_features=True, features=("a",))

    assert FeatureSelection.from_config(config) == FeatureSelection(FeatureMode.ALL_FEATURES)


def test_no_default_features_overrides_explicit_list() -> None:
    config = CargoConfig(all_features=False, no_default_features=True, features=("a", "b"))

    selection = FeatureSelection.from_config(config)

    assert selection.mode is FeatureMode.NO_DEFAULT_FEATURES
    assert selection.features == ()


def test_explicit_features_pass_through() -> None:
    config = CargoConfig(all_features=False, features=("a", "b"))

    assert FeatureSelection.from_config(config) == FeatureSelection(
        FeatureMode.FEATURES, ("a", "b")
    )


def test_nothing_requested_uses_cargo_defaults() -> None:
    selection = FeatureSelection.from_config(CargoConfig(all_features=False))

    assert selection.mode is FeatureMode.DEFAULT
    assert selection.features == ()


def test_default_config_activates_all_features() -> None:
    assert FeatureSelection.from_config(CargoConfig()).mode is FeatureMode.ALL_FEATURES
