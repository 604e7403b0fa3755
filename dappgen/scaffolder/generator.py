"""Generation step implementations.

``DappGenerator`` holds one method per entry of
:data:`dappgen.scaffolder.steps.STEPS`.  Every method reads the shared
``ProjectContext``, writes only through the ``FileSystem`` port and invokes
external tools only through the ``ToolRunner`` port.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any

from dappgen.config import Config
from dappgen.fs import FileSystem, FileSystemError
from dappgen.models import CreateParams, ProjectContext
from dappgen.utils import ToolRunner, console, pretty_json, print_warning

from . import presets
from .env import HARDHAT_PORT, all_env_variables, render_env_file, render_type_declarations
from .merge import merge_into
from .templates import TemplateRenderer


class DappGenerator:
    """Writes the files that turn a base React Native project into a dapp."""

    def __init__(
        self,
        config: Config,
        fs: FileSystem,
        runner: ToolRunner,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.fs = fs
        self.runner = runner
        self.renderer = renderer or TemplateRenderer(fs)

    # -- Base project ------------------------------------------------------

    def create_base_project(self, params: CreateParams) -> None:
        """Materialise the base project with create-react-native-app."""
        self.runner.run(
            [
                "npx",
                "create-react-native-app",
                params.name,
                "-t",
                self.config.scaffold_template,
            ],
            cwd=self.config.output_dir,
        )

    # -- Context building --------------------------------------------------

    def _build_context(self, ctx: ProjectContext) -> dict[str, Any]:
        """Build the Jinja2 template context."""
        return {
            "project_name": ctx.name,
            "port": HARDHAT_PORT,
            "shim_process_version": self.config.shim_process_version,
            "solidity_version": self.config.solidity_version,
            "accounts_json": json.dumps(
                [account.as_hardhat_account() for account in ctx.hardhat.accounts]
            ),
            "image_extensions": presets.IMAGE_EXTENSIONS,
        }

    # -- Assets ------------------------------------------------------------

    def prepare_assets(self, ctx: ProjectContext) -> None:
        """Create asset folders, copy the app icon and declare asset modules."""
        assets_dir = ctx.project_file("assets")
        self.fs.mkdir(assets_dir, exist_ok=True)

        for asset_type in presets.ASSET_TYPES:
            type_dir = assets_dir / asset_type
            self.fs.mkdir(type_dir, exist_ok=True)
            self.fs.write_text(type_dir / ".gitkeep", "")

        icon = resources.files("dappgen.scaffolder").joinpath("assets").joinpath("app-icon.png")
        self.fs.write_bytes(assets_dir / "image" / "app-icon.png", icon.read_bytes())

        self.renderer.render_to_file(
            "assets/index.d.ts.j2", assets_dir / "index.d.ts", self._build_context(ctx)
        )

    # -- Eject -------------------------------------------------------------

    def eject_expo_project(self, ctx: ProjectContext) -> None:
        """Configure ``app.json``, eject to native projects and raise the Gradle heap.

        The eject command only runs while ``android/`` does not exist yet.
        """
        merge_into(self.fs, ctx.project_file("app.json"), presets.expo_options(ctx))

        if self.fs.is_dir(ctx.project_file("android")):
            print_warning("  android/ already exists -- skipping expo eject.")
        else:
            self.runner.run(["expo", "eject", "--non-interactive"], cwd=ctx.project_dir)

        gradle = ctx.project_file("android", "gradle.properties")
        existing = self.fs.read_text(gradle)
        block = f"# 4GB Heap Size\norg.gradle.jvmargs={self.config.gradle_jvm_args}"
        if block not in existing:
            self.fs.write_text(gradle, f"{existing.rstrip()}\n\n{block}\n")

    # -- Shims & scripts ---------------------------------------------------

    def inject_shims(self, ctx: ProjectContext) -> None:
        """Write ``index.js`` with the Buffer/base-64/random-values shims."""
        self.renderer.render_to_file(
            "index.js.j2", ctx.project_file("index.js"), self._build_context(ctx)
        )

    def create_scripts(self, ctx: ProjectContext) -> None:
        """Write the postinstall and per-platform dev scripts."""
        self.fs.mkdir(ctx.scripts_dir, exist_ok=True)
        self.renderer.render_tree("scripts", ctx.scripts_dir, self._build_context(ctx))

    # -- package.json ------------------------------------------------------

    def prepare_package(self, ctx: ProjectContext) -> None:
        """Merge scripts, dependencies and tooling config into ``package.json``."""
        merge_into(
            self.fs,
            ctx.project_file("package.json"),
            presets.PACKAGE_OPTIONS,
            presets.PACKAGE_OVERLAY,
        )

    # -- Build-tool configs ------------------------------------------------

    def prepare_metro(self, ctx: ProjectContext) -> None:
        self.renderer.render_to_file(
            "metro.config.js.j2", ctx.project_file("metro.config.js"), self._build_context(ctx)
        )

    def prepare_babel(self, ctx: ProjectContext) -> None:
        self.renderer.render_to_file(
            "babel.config.js.j2", ctx.project_file("babel.config.js"), self._build_context(ctx)
        )

    # -- Lint / type configs -----------------------------------------------

    def prepare_eslint(self, ctx: ProjectContext) -> None:
        self.fs.write_text(ctx.project_file(".eslintrc.json"), pretty_json(presets.ESLINT_CONFIG))

    def prepare_tsconfig(self, ctx: ProjectContext) -> None:
        self.fs.write_text(ctx.project_file("tsconfig.json"), pretty_json(presets.TSCONFIG))

    def prepare_spelling(self, ctx: ProjectContext) -> None:
        self.fs.write_text(ctx.project_file(".cspell.json"), pretty_json(presets.CSPELL_CONFIG))

    # -- Environment -------------------------------------------------------

    def prepare_type_roots(self, ctx: ProjectContext) -> None:
        """Declare the ``@env`` module so TypeScript knows the generated variables."""
        declarations = render_type_declarations(all_env_variables(ctx))
        self.fs.write_text(ctx.project_file("index.d.ts"), declarations)

    def write_env(self, ctx: ProjectContext) -> None:
        """Write ``.env`` and an identical ``.env.example``."""
        content = render_env_file(all_env_variables(ctx))
        self.fs.write_text(ctx.project_file(".env"), content)
        self.fs.write_text(ctx.project_file(".env.example"), content)

    # -- .gitignore --------------------------------------------------------

    def prepare_gitignore(self, ctx: ProjectContext) -> None:
        """Append the generated blocks that ``.gitignore`` does not contain yet."""
        gitignore = ctx.project_file(".gitignore")
        existing = self.fs.read_text(gitignore) if self.fs.exists(gitignore) else ""
        missing = [block for block in presets.gitignore_blocks(ctx) if block not in existing]
        if not missing:
            console.print("  .gitignore already up to date")
            return

        head = f"{existing.rstrip()}\n\n" if existing.strip() else ""
        self.fs.write_text(gitignore, head + "\n\n".join(missing) + "\n")

    # -- Install -----------------------------------------------------------

    def install_dependencies(self, ctx: ProjectContext) -> None:
        """Install dependencies with the package manager the base project uses."""
        self.runner.run(["yarn"] if ctx.yarn else ["npm", "i"], cwd=ctx.project_dir)

    # -- Example -----------------------------------------------------------

    def prepare_example(self, ctx: ProjectContext) -> None:
        """Create the example contract, tests and frontend, then compile.

        Raises:
            FileSystemError: If any example file or test folder already exists.
        """
        contracts_dir = ctx.project_file("contracts")
        contract = contracts_dir / "Hello.sol"
        contracts_test_dir = ctx.tests_dir / "contracts"
        frontend_test_dir = ctx.tests_dir / "frontend"

        conflicts = [
            path for path in (contract, contracts_test_dir, frontend_test_dir)
            if self.fs.exists(path)
        ]
        if conflicts:
            raise FileSystemError(
                "Example content already present: "
                + ", ".join(str(path) for path in conflicts),
                conflicts[0],
            )

        template_ctx = self._build_context(ctx)

        self.fs.mkdir(contracts_dir, exist_ok=True)
        self.fs.mkdir(ctx.tests_dir, exist_ok=True)
        self.fs.mkdir(contracts_test_dir)
        self.fs.mkdir(frontend_test_dir)
        self.fs.write_text(contracts_test_dir / ".gitkeep", "")
        self.fs.write_text(frontend_test_dir / ".gitkeep", "")

        self.renderer.render_to_file(
            "__tests__/contracts/Hello.test.js.j2",
            contracts_test_dir / "Hello.test.js",
            template_ctx,
        )
        self.renderer.render_to_file(
            "__tests__/frontend/App.test.tsx.j2",
            frontend_test_dir / "App.test.tsx",
            template_ctx,
        )
        self.renderer.render_to_file("contracts/Hello.sol.j2", contract, template_ctx)
        self.renderer.render_to_file(
            "hardhat.config.js.j2", ctx.hardhat.hardhat_config, template_ctx
        )

        self.fs.mkdir(ctx.src_dir, exist_ok=True)
        self.renderer.render_to_file(
            "frontend/App.tsx.j2", ctx.src_dir / "App.tsx", template_ctx
        )

        original_app = ctx.project_file("App.tsx")
        if self.fs.exists(original_app):
            self.fs.remove(original_app)

        self.runner.run(["npx", "hardhat", "compile"], cwd=ctx.project_dir)

    # -- Summary -----------------------------------------------------------

    def success_message(self, ctx: ProjectContext) -> str:
        """Human-readable summary with the run commands for the package manager."""
        run = "yarn" if ctx.yarn else "npm run-script"
        lines = [
            "✔ Successfully integrated Web3 into React Native!",
            "",
            "To compile and run your project in development, execute one of the following commands:",
        ]
        lines.extend(f"- {run} {target}" for target in ("ios", "android", "web"))
        return "\n".join(lines)
