"""dappgen -- scaffold a React Native dapp wired to a local Hardhat network.

Quick usage::

    from dappgen import create

    result = create({"name": "my-dapp"})
    print(result.message)
"""

from .config import Config
from .fs import FileSystemError, LocalFileSystem, MemoryFileSystem
from .models import CreateParams, CreationResult, CreationStatus, ProjectContext
from .pipeline import DirectoryResolutionError, Pipeline, create
from .utils import ExternalCommandError, SubprocessToolRunner

__all__ = [
    "create",
    "Pipeline",
    "Config",
    # Models
    "CreateParams",
    "CreationResult",
    "CreationStatus",
    "ProjectContext",
    # Ports
    "LocalFileSystem",
    "MemoryFileSystem",
    "SubprocessToolRunner",
    # Errors
    "DirectoryResolutionError",
    "ExternalCommandError",
    "FileSystemError",
]
