"""Project context derivation.

Turns ``CreateParams`` into the frozen ``ProjectContext`` shared by every
generation step: resolved directories, the detected package manager and the
accounts seeded into the local Hardhat network.
"""

from __future__ import annotations

import secrets

from dappgen.config import Config
from dappgen.fs import FileSystem, LocalFileSystem
from dappgen.models import Account, CreateParams, HardhatOptions, ProjectContext

ACCOUNT_COUNT = 10
ACCOUNT_BALANCE = "1000000000000000000000"  # 1000 ETH in wei

# Order of the secp256k1 group; valid private keys lie in [1, n - 1].
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def generate_private_key() -> str:
    """Return a fresh ``0x``-prefixed, 64-digit hex private key."""
    secret = secrets.randbelow(SECP256K1_ORDER - 1) + 1
    return f"0x{secret:064x}"


def generate_accounts(count: int = ACCOUNT_COUNT) -> tuple[Account, ...]:
    """Generate *count* funded accounts.  Keys are never reused across calls."""
    return tuple(
        Account(private_key=generate_private_key(), balance=ACCOUNT_BALANCE)
        for _ in range(count)
    )


def derive_context(
    params: CreateParams,
    config: Config | None = None,
    fs: FileSystem | None = None,
) -> ProjectContext:
    """Derive the immutable ``ProjectContext`` for *params*.

    Directories are resolved against ``config.output_dir``.  The project
    directory is not required to exist; the orchestrator checks for it.
    """
    config = config or Config()
    fs = fs or LocalFileSystem()

    project_dir = (config.output_dir / params.name).resolve()
    scripts_dir = project_dir / "scripts"

    return ProjectContext(
        name=params.name,
        bundle_identifier=params.bundle_identifier,
        package_name=params.package_name,
        uri_scheme=params.uri_scheme,
        project_dir=project_dir,
        scripts_dir=scripts_dir,
        tests_dir=project_dir / "__tests__",
        src_dir=project_dir / "frontend",
        yarn=fs.exists(project_dir / "yarn.lock"),
        hardhat=HardhatOptions(
            hardhat_script=scripts_dir / "hardhat.ts",
            hardhat_config=project_dir / "hardhat.config.js",
            accounts=generate_accounts(),
        ),
    )
