"""Tests for wasmtargets.dsl and the step helpers."""

from __future__ import annotations

import pytest

from wasmtargets.dsl import build, echo, exe, remove_dir, table, target
from wasmtargets.errors import MissingPrerequisite
from wasmtargets.model import ECHO, EXEC, REMOVE_DIR, Command
from wasmtargets.settings import Settings, load_settings
from wasmtargets.step_workflows import cargo_fmt, wasm_pack_build
from wasmtargets.targets import default_targets


class TestCommands:
    def test_exe(self):
        c = exe("Build", "wasm-pack", "build")
        assert c.kind == EXEC
        assert c.argv == ("wasm-pack", "build")
        assert c.describe() == "wasm-pack build"

    def test_exe_requires_program(self):
        with pytest.raises(ValueError):
            exe("nothing")

    def test_remove_dir(self):
        c = remove_dir("pkg")
        assert c.kind == REMOVE_DIR
        assert c.path == "pkg"
        assert c.describe() == 'if [ -d "pkg" ]; then rm -rf pkg; fi'

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            Command(name="x", kind="shell")

    def test_echo_defaults_to_done(self):
        c = echo()
        assert c.kind == ECHO
        assert c.message == "Done"


class TestTarget:
    def test_needs_are_tuples(self):
        t = target("all", needs=["clean", "release"])
        assert t.needs == ("clean", "release")
        assert t.prerequisites == t.needs
        assert t.commands == ()

    def test_empty_target_rejected(self):
        with pytest.raises(ValueError):
            target("nothing")

    def test_default_cwd_only_fills_missing(self):
        t = target("x", exe("a", "a"), exe("b", "b", cwd="other"), echo(), cwd="crate")
        assert [c.cwd for c in t.commands] == ["crate", "other", None]

    def test_builder(self):
        t = (
            build("release")
            .depends_on("clean")
            .run("Build", "wasm-pack", "build", "--release")
            .echo()
            .describe("release build")
            .build()
        )
        assert t.needs == ("clean",)
        assert [c.kind for c in t.commands] == [EXEC, ECHO]
        assert t.description == "release build"

    def test_table_validates(self):
        with pytest.raises(MissingPrerequisite):
            table(target("all", needs=["ghost"]))


class TestSteps:
    def test_dev_build(self):
        assert wasm_pack_build("dev").argv == ("wasm-pack", "build", "--dev", "--target", "web")

    def test_release_without_default_features(self):
        c = wasm_pack_build("release", default_features=False)
        assert c.argv == (
            "wasm-pack", "build", "--release", "--target", "web", "--", "--no-default-features",
        )

    def test_unknown_profile(self):
        with pytest.raises(ValueError):
            wasm_pack_build("turbo")

    def test_cargo_fmt(self):
        assert cargo_fmt().argv == ("cargo", "fmt")
        assert cargo_fmt(check=True).argv == ("cargo", "fmt", "--check")


class TestDefaultTable:
    def test_declared_targets(self):
        tbl = default_targets()
        assert list(tbl) == ["all", "clean", "debug", "release", "format"]
        assert tbl.default == "all"
        assert tbl["all"].needs == ("clean", "release")
        for name in ("clean", "debug", "release", "format"):
            assert tbl[name].needs == ()

    def test_settings_flow_into_table(self):
        s = Settings(package_dir="out", packager="/opt/wasm-pack", cargo="cargo-nightly")
        tbl = default_targets(s)
        assert tbl["clean"].commands[0].path == "out"
        assert tbl["debug"].commands[0].argv[0] == "/opt/wasm-pack"
        assert tbl["format"].commands[0].argv == ("cargo-nightly", "fmt")


class TestSettings:
    def test_defaults(self):
        assert load_settings({}) == Settings()

    def test_environment(self):
        s = load_settings({
            "WASMTARGETS_ROOT": "/src",
            "WASMTARGETS_PACKAGE_DIR": "dist",
            "VERBOSE": "1",
        })
        assert s.root == "/src"
        assert s.package_dir == "dist"
        assert s.verbose is True
