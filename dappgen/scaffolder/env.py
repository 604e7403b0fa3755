"""Generated environment variables.

The generated app reads its network settings through ``react-native-dotenv``
(``import { HARDHAT_PORT } from '@env'``).  This module is the single source
of the variable list; the ``.env`` file, its ``.env.example`` copy and the
``@env`` type declarations are all rendered from it.
"""

from __future__ import annotations

from collections.abc import Sequence

from dappgen.models import EnvVariable, ProjectContext

HARDHAT_PORT = 8545


def all_env_variables(ctx: ProjectContext) -> tuple[EnvVariable, ...]:
    """Return the generated variables in their fixed order."""
    return (
        EnvVariable(name="HARDHAT_PORT", type_tag="string", value=str(HARDHAT_PORT)),
        EnvVariable(
            name="HARDHAT_PRIVATE_KEY",
            type_tag="string",
            value=ctx.hardhat.accounts[0].private_key,
        ),
    )


def render_env_file(variables: Sequence[EnvVariable]) -> str:
    """Render ``NAME=VALUE`` lines, one per variable, newline-terminated."""
    return "".join(f"{variable.name}={variable.value}\n" for variable in variables)


def render_type_declarations(variables: Sequence[EnvVariable]) -> str:
    """Render the ambient ``@env`` module declaration."""
    lines = ["declare module '@env' {"]
    lines.extend(f"   export const {v.name}: {v.type_tag};" for v in variables)
    lines.append("}")
    return "\n".join(lines) + "\n"
