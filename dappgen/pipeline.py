"""dappgen pipeline orchestrator.

Runs a fixed, strictly ordered sequence over one ``ProjectContext``:

1. create-react-native-app materialises the base project.
2. The immutable ``ProjectContext`` is derived.
3. Checkpoint: the project directory must exist, otherwise the run ends with
   ``CreationStatus.FAILURE``.
4. Every step of :data:`dappgen.scaffolder.steps.STEPS`, in order.
5. ``CreationStatus.SUCCESS`` with a summary of the run commands.

A non-zero exit from any external tool (``ExternalCommandError``) or a
file-system failure (``FileSystemError``) after the checkpoint aborts the run
without a result and without cleaning up the partially generated project.

Usage::

    python -m dappgen.pipeline my-dapp
    python -m dappgen.pipeline my-dapp --output ./projects --uri-scheme mydapp
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Union

from rich.markup import escape
from rich.panel import Panel

from dappgen.config import Config
from dappgen.fs import FileSystem, FileSystemError, LocalFileSystem
from dappgen.models import CreateParams, CreationResult, CreationStatus, ProjectContext
from dappgen.scaffolder.context import derive_context
from dappgen.scaffolder.generator import DappGenerator
from dappgen.scaffolder.steps import STEPS, Step, select_steps
from dappgen.utils import (
    ExternalCommandError,
    SubprocessToolRunner,
    ToolRunner,
    console,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DirectoryResolutionError(Exception):
    """Raised when the base project directory is missing after scaffolding."""

    def __init__(self, project_dir: Path) -> None:
        self.project_dir = project_dir
        super().__init__(f"Failed to resolve project directory {project_dir}.")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """dappgen pipeline orchestrator.

    Attributes:
        config: Run configuration.
        fs: File-system port every step writes through.
        runner: Port used to invoke external tools.
        generator: Step implementations.
        steps: The ordered steps executed after the checkpoint.
    """

    def __init__(
        self,
        config: Config | None = None,
        fs: FileSystem | None = None,
        runner: ToolRunner | None = None,
        steps: Iterable[Union[Step, str]] | None = None,
        generator: DappGenerator | None = None,
    ) -> None:
        self.config = config or Config()
        self.fs = fs or LocalFileSystem()
        self.runner = runner or SubprocessToolRunner()
        self.generator = generator or DappGenerator(self.config, self.fs, self.runner)
        self.steps = STEPS if steps is None else _resolve_steps(steps)

    def run(self, params: CreateParams) -> CreationResult:
        """Scaffold the project described by *params*.

        Returns:
            A ``CreationResult``; ``FAILURE`` only when the checkpoint fails.

        Raises:
            ExternalCommandError: An external tool exited with a non-zero code.
            FileSystemError: A generated file could not be read or written.
        """
        pipeline_start = time.monotonic()

        console.print(
            Panel(
                f"[bold bright_cyan]dappgen[/bold bright_cyan]\n"
                f"Project : {escape(params.name)}\n"
                f"Output  : {escape(str(self.config.output_dir.resolve()))}\n"
                f"Steps   : {', '.join(step.name for step in self.steps)}",
                title="[bold]Create[/bold]",
                border_style="bright_cyan",
            )
        )

        self.generator.create_base_project(params)
        ctx = derive_context(params, self.config, self.fs)

        try:
            self._checkpoint(ctx)
        except DirectoryResolutionError as exc:
            print_error(str(exc))
            return CreationResult(context=ctx, status=CreationStatus.FAILURE, message=str(exc))

        total = len(self.steps)
        for index, step in enumerate(self.steps, start=1):
            print_step_header(index, total, step.name)
            getattr(self.generator, step.method)(ctx)

        message = self.generator.success_message(ctx)
        self._print_final_summary(ctx, time.monotonic() - pipeline_start)
        print_success(message)
        return CreationResult(context=ctx, status=CreationStatus.SUCCESS, message=message)

    def _checkpoint(self, ctx: ProjectContext) -> None:
        if not self.fs.is_dir(ctx.project_dir):
            raise DirectoryResolutionError(ctx.project_dir)

    def _print_final_summary(self, ctx: ProjectContext, total_elapsed: float) -> None:
        print_summary_table(
            {
                "Project": str(ctx.project_dir),
                "Package manager": "yarn" if ctx.yarn else "npm",
                "Accounts": str(len(ctx.hardhat.accounts)),
                "Steps": str(len(self.steps)),
                "Duration": format_duration(total_elapsed),
            },
            title="Create Results",
        )


def create(
    params: Union[CreateParams, dict[str, Any]],
    config: Config | None = None,
    fs: FileSystem | None = None,
    runner: ToolRunner | None = None,
) -> CreationResult:
    """Scaffold a React Native dapp; see :meth:`Pipeline.run`."""
    if not isinstance(params, CreateParams):
        params = CreateParams.model_validate(params)
    return Pipeline(config=config, fs=fs, runner=runner).run(params)


def _resolve_steps(steps: Iterable[Union[Step, str]]) -> tuple[Step, ...]:
    return tuple(
        step if isinstance(step, Step) else select_steps([step])[0] for step in steps
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``dappgen`` / ``python -m dappgen.pipeline``."""
    import argparse

    from pydantic import ValidationError

    parser = argparse.ArgumentParser(
        description="dappgen -- scaffold a React Native dapp wired to a local Hardhat network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  dappgen my-dapp\n"
            "  dappgen my-dapp -o ./projects --bundle-identifier io.example.mydapp\n"
        ),
    )

    parser.add_argument("name", help="Project name (also the directory name)")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory in which the project is created (default: $DAPPGEN_OUTPUT_DIR or .)",
    )
    parser.add_argument("--bundle-identifier", default="", help="iOS bundle identifier")
    parser.add_argument("--package-name", default="", help="Android application package")
    parser.add_argument("--uri-scheme", default="", help="Deep-link URI scheme")
    parser.add_argument(
        "--template",
        default=None,
        help="create-react-native-app template (default: with-typescript)",
    )

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        if args.output:
            config = config.model_copy(update={"output_dir": Path(args.output)})
        if args.template:
            config = config.model_copy(update={"scaffold_template": args.template})
        params = CreateParams(
            name=args.name,
            bundle_identifier=args.bundle_identifier,
            package_name=args.package_name,
            uri_scheme=args.uri_scheme,
        )
    except ValidationError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    try:
        result = create(params, config=config)
    except (ExternalCommandError, FileSystemError) as exc:
        console.print(f"[bold red]Aborted:[/bold red] {escape(str(exc))}")
        sys.exit(2)

    if result.status is not CreationStatus.SUCCESS:
        sys.exit(1)


if __name__ == "__main__":
    main()
