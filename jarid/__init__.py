"""jarid: work out the Maven coordinates of Java archives."""

from jarid.archive import ArchiveHandle, JarArchive
from jarid.errors import ExposerFailure, InvalidConfiguration
from jarid.model.identity import Identity
from jarid.resolver import IdentityResolver, pick_largest, pick_smallest

__version__ = "0.1.0"

__all__ = [
    "ArchiveHandle",
    "ExposerFailure",
    "Identity",
    "IdentityResolver",
    "InvalidConfiguration",
    "JarArchive",
    "pick_largest",
    "pick_smallest",
]
