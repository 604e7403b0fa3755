"""dappgen scaffolder -- turns a base React Native project into a Web3 dapp.

Key pieces:
    derive_context  - Frozen ProjectContext from CreateParams
    merge_into      - Non-destructive JSON config merge
    all_env_variables - Generated environment variables
    DappGenerator   - One method per generation step
    STEPS           - The ordered, named generation steps

Quick usage::

    from dappgen.scaffolder import DappGenerator, STEPS, derive_context

    ctx = derive_context(params, config, fs)
    generator = DappGenerator(config, fs, runner)
    for step in STEPS:
        getattr(generator, step.method)(ctx)
"""

from .context import ACCOUNT_BALANCE, ACCOUNT_COUNT, derive_context, generate_accounts
from .env import HARDHAT_PORT, all_env_variables, render_env_file, render_type_declarations
from .generator import DappGenerator
from .merge import ConfigFragment, deep_merge, merge_into
from .steps import STEPS, Idempotency, Step, select_steps
from .templates import TemplateRenderer

__all__ = [
    # Context
    "derive_context",
    "generate_accounts",
    "ACCOUNT_COUNT",
    "ACCOUNT_BALANCE",
    # Environment
    "HARDHAT_PORT",
    "all_env_variables",
    "render_env_file",
    "render_type_declarations",
    # Merge
    "ConfigFragment",
    "deep_merge",
    "merge_into",
    # Steps
    "DappGenerator",
    "STEPS",
    "Step",
    "Idempotency",
    "select_steps",
    "TemplateRenderer",
]
