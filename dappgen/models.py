"""Pydantic v2 models shared by the scaffolder and the pipeline.

All models are frozen: a ``ProjectContext`` is derived once per run and every
generation step only reads it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dappgen.utils import identifier_slug


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class CreationStatus(str, Enum):
    """Terminal outcome of a scaffolding run."""
    SUCCESS = "success"
    FAILURE = "failure"


# ---------------------------------------------------------------------------
# Input parameters
# ---------------------------------------------------------------------------

class CreateParams(BaseModel):
    """User-supplied parameters for :func:`dappgen.create`.

    Only ``name`` is required.  The native identifiers default to values
    derived from the name, e.g. ``"My Dapp"`` gives ``com.mydapp`` and the
    URI scheme ``mydapp``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project directory / package name")
    bundle_identifier: str = Field(default="", description="iOS bundle identifier")
    package_name: str = Field(default="", description="Android application package")
    uri_scheme: str = Field(default="", description="Deep-link URI scheme")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"project name must be a single directory name: {value!r}")
        return value

    @model_validator(mode="before")
    @classmethod
    def _default_identifiers(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return data
        slug = identifier_slug(data["name"])
        data = dict(data)
        if not data.get("bundle_identifier"):
            data["bundle_identifier"] = f"com.{slug}"
        if not data.get("package_name"):
            data["package_name"] = f"com.{slug}"
        if not data.get("uri_scheme"):
            data["uri_scheme"] = slug
        return data


# ---------------------------------------------------------------------------
# Derived context
# ---------------------------------------------------------------------------

class Account(BaseModel):
    """A funded test-network account."""

    model_config = ConfigDict(frozen=True)

    private_key: str = Field(..., pattern=r"^0x[0-9a-f]{64}$")
    balance: str = Field(..., pattern=r"^[0-9]+$", description="Balance in wei")

    def as_hardhat_account(self) -> dict[str, str]:
        """Return the account in the shape Hardhat expects in ``networks.hardhat.accounts``."""
        return {"privateKey": self.private_key, "balance": self.balance}


class HardhatOptions(BaseModel):
    """Hardhat file locations and the accounts seeded into the local network."""

    model_config = ConfigDict(frozen=True)

    hardhat_script: Path
    hardhat_config: Path
    accounts: tuple[Account, ...]


class ProjectContext(BaseModel):
    """Immutable record of every derived path and generated value of a run."""

    model_config = ConfigDict(frozen=True)

    name: str
    bundle_identifier: str
    package_name: str
    uri_scheme: str
    project_dir: Path
    scripts_dir: Path
    tests_dir: Path
    src_dir: Path
    yarn: bool = Field(..., description="True when the base project ships a yarn.lock")
    hardhat: HardhatOptions

    def project_file(self, *parts: str) -> Path:
        """Resolve *parts* relative to the project directory."""
        return self.project_dir.joinpath(*parts)


class EnvVariable(BaseModel):
    """A generated environment variable exposed to the app through ``@env``."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_tag: str
    value: str


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class CreationResult(BaseModel):
    """Outcome of :func:`dappgen.create`."""

    model_config = ConfigDict(frozen=True)

    context: ProjectContext
    status: CreationStatus
    message: str = Field(..., min_length=1)
