"""The ordered list of generation steps.

Each ``Step`` names a ``DappGenerator`` method and documents what happens when
the step runs a second time against the same project directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Idempotency(str, Enum):
    """Re-run contract of a generation step."""
    OVERWRITE = "overwrite"            # same inputs produce byte-identical files
    MERGE = "merge"                    # merged into existing JSON, stable on re-run
    SKIP_IF_EXISTS = "skip_if_exists"  # guarded by an existence check
    APPEND_MISSING = "append_missing"  # appends only blocks not already present
    EXTERNAL = "external"              # re-invokes an external tool
    CREATE_ONLY = "create_only"        # fails with FileSystemError on re-run


@dataclass(frozen=True)
class Step:
    """A named generation step bound to a ``DappGenerator`` method."""

    name: str
    method: str
    idempotency: Idempotency
    description: str = ""


STEPS: tuple[Step, ...] = (
    Step("assets", "prepare_assets", Idempotency.OVERWRITE,
         "Asset folders, app icon and asset module declarations"),
    Step("eject", "eject_expo_project", Idempotency.SKIP_IF_EXISTS,
         "Merge expo settings into app.json, eject, raise the Gradle heap"),
    Step("shims", "inject_shims", Idempotency.OVERWRITE,
         "index.js runtime shims"),
    Step("scripts", "create_scripts", Idempotency.OVERWRITE,
         "Dev-mode helper scripts under scripts/"),
    Step("package", "prepare_package", Idempotency.MERGE,
         "Scripts, dependencies and tooling merged into package.json"),
    Step("metro", "prepare_metro", Idempotency.OVERWRITE,
         "metro.config.js"),
    Step("babel", "prepare_babel", Idempotency.OVERWRITE,
         "babel.config.js"),
    Step("eslint", "prepare_eslint", Idempotency.OVERWRITE,
         ".eslintrc.json"),
    Step("tsconfig", "prepare_tsconfig", Idempotency.OVERWRITE,
         "tsconfig.json"),
    Step("spelling", "prepare_spelling", Idempotency.OVERWRITE,
         ".cspell.json"),
    Step("type_roots", "prepare_type_roots", Idempotency.OVERWRITE,
         "index.d.ts declarations for the generated environment"),
    Step("env", "write_env", Idempotency.OVERWRITE,
         ".env and .env.example"),
    Step("gitignore", "prepare_gitignore", Idempotency.APPEND_MISSING,
         "Generated .gitignore blocks"),
    Step("install", "install_dependencies", Idempotency.EXTERNAL,
         "yarn / npm install"),
    Step("example", "prepare_example", Idempotency.CREATE_ONLY,
         "Example contract, tests, hardhat.config.js, frontend/App.tsx, compile"),
)


def select_steps(names: Iterable[str], steps: tuple[Step, ...] = STEPS) -> tuple[Step, ...]:
    """Return the steps called *names*, in the order given.

    Raises:
        KeyError: If a name does not match any step.
    """
    by_name = {step.name: step for step in steps}
    selected: list[Step] = []
    for name in names:
        if name not in by_name:
            raise KeyError(f"Unknown step {name!r}; expected one of {', '.join(by_name)}")
        selected.append(by_name[name])
    return tuple(selected)
