"""Tests for the Jinja2 template renderer (dappgen.scaffolder.templates)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from dappgen.fs import MemoryFileSystem
from dappgen.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit

CONTEXT = {
    "project_name": "demo",
    "port": 8545,
    "shim_process_version": "v9.40",
    "solidity_version": "0.7.3",
    "accounts_json": json.dumps([{"privateKey": "0x" + "11" * 32, "balance": "1"}]),
    "image_extensions": ("png", "jpg"),
}


@pytest.fixture
def fs() -> MemoryFileSystem:
    fs = MemoryFileSystem()
    fs.mkdir(Path("/out/scripts"), parents=True)
    return fs


@pytest.fixture
def renderer(fs) -> TemplateRenderer:
    return TemplateRenderer(fs)


class TestListTemplates:
    def test_scripts(self, renderer):
        assert renderer.list_templates("scripts") == [
            "scripts/android.ts.j2",
            "scripts/ios.ts.j2",
            "scripts/postinstall.ts.j2",
            "scripts/web.ts.j2",
        ]

    def test_unknown_prefix(self, renderer):
        assert renderer.list_templates("nope") == []

    def test_all_templates_render(self, renderer):
        for template in renderer.list_templates():
            assert renderer.render(template, CONTEXT).strip()


class TestRender:
    def test_port_substituted(self, renderer):
        text = renderer.render("scripts/android.ts.j2", CONTEXT)
        assert "adb reverse tcp:8545 tcp:8545" in text
        assert "{{" not in text

    def test_hardhat_config(self, renderer):
        text = renderer.render("hardhat.config.js.j2", CONTEXT)
        assert 'solidity: "0.7.3"' in text
        assert "0x" + "11" * 32 in text

    def test_image_declarations(self, renderer):
        text = renderer.render("assets/index.d.ts.j2", CONTEXT)
        assert "declare module '*.png'" in text
        assert "declare module '*.jpg'" in text
        assert "declare module '*.mp4'" in text

    def test_missing_variable_is_an_error(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("hardhat.config.js.j2", {})


class TestRenderTree:
    def test_strips_suffix(self, renderer, fs):
        written = renderer.render_tree("scripts", Path("/out/scripts"), CONTEXT)
        assert [p.name for p in written] == ["android.ts", "ios.ts", "postinstall.ts", "web.ts"]
        assert fs.listdir(Path("/out/scripts")) == [
            "android.ts",
            "ios.ts",
            "postinstall.ts",
            "web.ts",
        ]

    def test_rendering_is_deterministic(self, renderer, fs):
        renderer.render_tree("scripts", Path("/out/scripts"), CONTEXT)
        first = dict(fs.files)
        renderer.render_tree("scripts", Path("/out/scripts"), CONTEXT)
        assert fs.files == first
