"""dappgen configuration.

Typed settings for a scaffolding run.  Everything that may reasonably differ
between machines or projects lives here; values that the generated project
relies on by contract (the Hardhat port, the account balance) are module
constants in the scaffolder instead.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global dappgen configuration.

    Instances are created once by the CLI (or by the caller of
    :func:`dappgen.create`) and shared by every generation step.
    """

    output_dir: Path = Field(
        default=Path("."), description="Directory in which the project folder is created"
    )
    scaffold_template: str = Field(
        default="with-typescript",
        description="Template passed to create-react-native-app via -t",
    )
    solidity_version: str = Field(
        default="0.7.3", description="Compiler version written to hardhat.config.js"
    )
    gradle_jvm_args: str = Field(
        default="-Xmx4608m", description="Heap size appended to android/gradle.properties"
    )
    shim_process_version: str = Field(
        default="v9.40", description="Value assigned to process.version by the index.js shim"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DAPPGEN_OUTPUT_DIR, DAPPGEN_SCAFFOLD_TEMPLATE,
            DAPPGEN_SOLIDITY_VERSION, DAPPGEN_GRADLE_JVM_ARGS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DAPPGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["DAPPGEN_OUTPUT_DIR"])
        if os.environ.get("DAPPGEN_SCAFFOLD_TEMPLATE"):
            kwargs["scaffold_template"] = os.environ["DAPPGEN_SCAFFOLD_TEMPLATE"]
        if os.environ.get("DAPPGEN_SOLIDITY_VERSION"):
            kwargs["solidity_version"] = os.environ["DAPPGEN_SOLIDITY_VERSION"]
        if os.environ.get("DAPPGEN_GRADLE_JVM_ARGS"):
            kwargs["gradle_jvm_args"] = os.environ["DAPPGEN_GRADLE_JVM_ARGS"]
        return cls(**kwargs)
