from .base import (
    File,
    FileSystemException,
    Folder,
    InvalidPathError,
    Outcome,
    Resource,
    ResourceProvider,
    try_children,
    try_read,
)
from .memory import MemoryResourceProvider
from .physical import PHYSICAL_PROVIDER, PhysicalResourceProvider

__all__ = [
    "Resource",
    "File",
    "Folder",
    "ResourceProvider",
    "PhysicalResourceProvider",
    "MemoryResourceProvider",
    "PHYSICAL_PROVIDER",
    "FileSystemException",
    "InvalidPathError",
    "Outcome",
    "try_children",
    "try_read",
]
