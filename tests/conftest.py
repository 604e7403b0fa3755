"""Shared pytest fixtures for the dappgen test suite.

Provides reusable fixtures for:
- An in-memory file system with an output directory
- A fake tool runner (and a factory for variants) that records commands and
  simulates the base project
- A factory that seeds the base project directly
- A run configuration and a derived ``ProjectContext``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

import pytest

from dappgen.config import Config
from dappgen.fs import FileSystem, MemoryFileSystem
from dappgen.models import CreateParams, ProjectContext
from dappgen.scaffolder.context import derive_context
from dappgen.utils import ExternalCommandError

OUTPUT_DIR = Path("/work")

BASE_PACKAGE_JSON: dict[str, Any] = {
    "name": "demo",
    "version": "1.0.0",
    "main": "node_modules/expo/AppEntry.js",
    "scripts": {"start": "expo start"},
    "dependencies": {"expo": "~40.0.0", "react": "16.13.1"},
    "devDependencies": {"typescript": "~4.0.0"},
    "private": True,
}

BASE_APP_JSON: dict[str, Any] = {
    "expo": {"name": "demo", "slug": "demo", "version": "1.0.0"},
}


# ---------------------------------------------------------------------------
# Base project simulation
# ---------------------------------------------------------------------------


def seed_base_project(fs: FileSystem, project_dir: Path, *, yarn: bool = False) -> None:
    """Write what create-react-native-app leaves behind."""
    fs.mkdir(project_dir, parents=True, exist_ok=True)
    fs.write_text(project_dir / "package.json", json.dumps(BASE_PACKAGE_JSON, indent=2))
    fs.write_text(project_dir / "app.json", json.dumps(BASE_APP_JSON, indent=2))
    fs.write_text(project_dir / ".gitignore", "node_modules/\n.expo/\n")
    fs.write_text(project_dir / "App.tsx", "export default function App() { return null; }\n")
    if yarn:
        fs.write_text(project_dir / "yarn.lock", "")


def seed_native_projects(fs: FileSystem, project_dir: Path) -> None:
    """Write what ``expo eject`` leaves behind."""
    fs.mkdir(project_dir / "android", exist_ok=True)
    fs.mkdir(project_dir / "ios", exist_ok=True)
    fs.write_text(
        project_dir / "android" / "gradle.properties",
        "android.useAndroidX=true\norg.gradle.jvmargs=-Xmx2048m\n",
    )


class FakeToolRunner:
    """``ToolRunner`` double that records commands instead of spawning them.

    ``create-react-native-app`` and ``expo eject`` are simulated on *fs* unless
    ``simulate`` is false; ``base_files`` overrides files of the simulated base
    project by relative path.  Any command whose program and first argument match
    an entry of ``fail_on`` raises ``ExternalCommandError``.
    """

    def __init__(
        self,
        fs: FileSystem,
        *,
        simulate: bool = True,
        yarn: bool = False,
        fail_on: Sequence[str] = (),
        base_files: Mapping[str, bytes] | None = None,
    ) -> None:
        self.fs = fs
        self.base_files = dict(base_files or {})
        self.simulate = simulate
        self.yarn = yarn
        self.fail_on = set(fail_on)
        self.calls: list[tuple[list[str], Path | None]] = []

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _ in self.calls]

    def run(self, cmd: Sequence[str], cwd: Path | None = None) -> None:
        cmd = list(cmd)
        self.calls.append((cmd, cwd))
        if " ".join(cmd[:2]) in self.fail_on or cmd[0] in self.fail_on:
            raise ExternalCommandError(cmd, 1, cwd)
        if not self.simulate:
            return
        if "create-react-native-app" in cmd:
            name = cmd[cmd.index("create-react-native-app") + 1]
            project_dir = Path(cwd) / name
            seed_base_project(self.fs, project_dir, yarn=self.yarn)
            for rel, content in self.base_files.items():
                self.fs.write_bytes(project_dir / rel, content)
        elif cmd[:2] == ["expo", "eject"]:
            seed_native_projects(self.fs, Path(cwd))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """In-memory file system with an empty output directory."""
    fs = MemoryFileSystem()
    fs.mkdir(OUTPUT_DIR, parents=True)
    return fs


@pytest.fixture
def config() -> Config:
    """Run configuration pointing at the in-memory output directory."""
    return Config(output_dir=OUTPUT_DIR)


@pytest.fixture
def make_runner(memory_fs: MemoryFileSystem) -> Callable[..., FakeToolRunner]:
    """Factory for ``FakeToolRunner``; defaults to ``memory_fs``.

    Keyword arguments are passed through, e.g. ``make_runner(yarn=True)`` or
    ``make_runner(fs=LocalFileSystem(), fail_on=["npm i"])``.
    """

    def _make(fs: FileSystem | None = None, **kwargs: Any) -> FakeToolRunner:
        return FakeToolRunner(memory_fs if fs is None else fs, **kwargs)

    return _make


@pytest.fixture
def fake_runner(make_runner: Callable[..., FakeToolRunner]) -> FakeToolRunner:
    """Tool runner that simulates the base project on ``memory_fs``."""
    return make_runner()


@pytest.fixture
def base_project(memory_fs: MemoryFileSystem) -> Callable[..., Path]:
    """Seed the base project for ``demo`` on ``memory_fs`` and return its path."""

    def _seed(*, yarn: bool = False, native: bool = False) -> Path:
        project_dir = OUTPUT_DIR / "demo"
        seed_base_project(memory_fs, project_dir, yarn=yarn)
        if native:
            seed_native_projects(memory_fs, project_dir)
        return project_dir

    return _seed


@pytest.fixture
def demo_params() -> CreateParams:
    return CreateParams(name="demo")


@pytest.fixture
def sample_context(
    memory_fs: MemoryFileSystem,
    config: Config,
    demo_params: CreateParams,
    base_project: Callable[..., Path],
) -> ProjectContext:
    """Context for ``demo`` with the base project and native projects present."""
    base_project(native=True)
    return derive_context(demo_params, config, memory_fs)
