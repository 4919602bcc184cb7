from __future__ import annotations

from pathlib import Path

import pytest

from cratemap.config import CargoConfig
from cratemap.domain.features import FeatureMode
from cratemap.domain.ports import BuildEvent, BuildScriptExecuted, CompilerArtifact
from cratemap.domain.resources import collect_extern_resources, is_dylib, load_extern_resources
from tests.support.cargo import SERDE_DERIVE_ID, SERDE_ID, UTIL_ID, FakeBuildEventSource


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("libfoo.so", True),
        ("foo.dll", True),
        ("libfoo.dylib", True),
        ("FOO.DLL", True),
        ("libfoo.rmeta", False),
        ("libfoo.rlib", False),
        ("foo", False),
    ],
)
def test_is_dylib(name: str, expected: bool) -> None:
    assert is_dylib(Path(name)) is expected


def test_build_script_events_record_out_dir_and_cfgs() -> None:
    resources = collect_extern_resources(
        [BuildScriptExecuted(package_id="a", out_dir=Path("/out/a"), cfgs=("x", "y"))]
    )

    assert resources.out_dirs == {"a": Path("/out/a")}
    assert resources.cfgs == {"a": ("x", "y")}
    assert resources.proc_macro_dylib_paths == {}


def test_later_build_script_event_overwrites_earlier() -> None:
    resources = collect_extern_resources(
        [
            BuildScriptExecuted(package_id="a", out_dir=Path("/out/first"), cfgs=("old",)),
            BuildScriptExecuted(package_id="a", out_dir=Path("/out/second"), cfgs=()),
        ]
    )

    assert resources.out_dirs["a"] == Path("/out/second")
    assert resources.cfgs["a"] == ()


def test_proc_macro_artifact_records_first_dylib() -> None:
    resources = collect_extern_resources(
        [
            CompilerArtifact(
                package_id="pm",
                target_kind=("proc-macro",),
                filenames=(Path("/t/libpm.rmeta"), Path("/t/libpm.so"), Path("/t/pm.dll")),
            )
        ]
    )

    assert resources.proc_macro_dylib_paths == {"pm": Path("/t/libpm.so")}


def test_non_proc_macro_or_dylib_less_artifacts_are_ignored() -> None:
    resources = collect_extern_resources(
        [
            CompilerArtifact(package_id="lib", target_kind=("lib",), filenames=(Path("x.so"),)),
            CompilerArtifact(
                package_id="pm", target_kind=("proc-macro",), filenames=(Path("libpm.rmeta"),)
            ),
        ]
    )

    assert resources.proc_macro_dylib_paths == {}
    assert resources.out_dirs == {}


def test_load_extern_resources_folds_check_output(build_events: list[BuildEvent]) -> None:
    source = FakeBuildEventSource(events=build_events)
    manifest = Path("/work/ws/Cargo.toml")

    resources = load_extern_resources(
        manifest, CargoConfig(all_features=False, no_default_features=True), event_source=source
    )

    assert source.calls[0][0] == manifest
    assert source.calls[0][1].mode is FeatureMode.NO_DEFAULT_FEATURES
    assert resources.out_dirs == {
        SERDE_ID: Path("/work/ws/target/debug/build/serde-0f4e3c2b/out"),
        UTIL_ID: Path("/work/ws/target/debug/build/util-7b6a5948/out"),
    }
    assert resources.cfgs[SERDE_ID] == ("ops_bound", "core_reverse")
    assert resources.cfgs[UTIL_ID] == ("has_fast_path",)
    assert resources.proc_macro_dylib_paths == {
        SERDE_DERIVE_ID: Path("/work/ws/target/debug/deps/libserde_derive-5a1e0b2c.so")
    }
