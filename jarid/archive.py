"""Archive handles consumed by the resolver and the bundled exposers."""

import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union, runtime_checkable

from jarid.logging import get_logger
from jarid.model.identity import Identity

MANIFEST_PATH = "META-INF/MANIFEST.MF"

logger = get_logger("jarid.archive")


@runtime_checkable
class ArchiveHandle(Protocol):
    """Anything the resolver can cache an identity on."""

    def get_cached_identity(self) -> Optional[Identity]:
        ...

    def set_cached_identity(self, identity: Identity) -> None:
        ...


class JarArchive:
    """
    Open Java archive with a single identity cache slot.

    The zip file stays open until ``close`` is called; use it as a context
    manager. Entry names and the manifest are read lazily and kept on the
    handle, so several exposers can inspect them without re-reading.

    The cache slot is not guarded by a lock. Two threads analyzing the same
    cold handle may both run the exposers and the last write wins.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._zip = zipfile.ZipFile(self.path, "r")
        self._entry_names: Optional[List[str]] = None
        self._manifest: Optional[Dict[str, str]] = None
        self._identity: Optional[Identity] = None
        logger.debug(f"Opened archive {self.path}")

    def __enter__(self) -> "JarArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    @property
    def filename(self) -> str:
        return self.path.name

    def get_cached_identity(self) -> Optional[Identity]:
        return self._identity

    def set_cached_identity(self, identity: Identity) -> None:
        self._identity = identity

    def entry_names(self) -> List[str]:
        """Names of all file entries, directories excluded."""
        if self._entry_names is None:
            self._entry_names = [name for name in self._zip.namelist() if not name.endswith("/")]
        return self._entry_names

    def has_entry(self, name: str) -> bool:
        return name in self.entry_names()

    def read_text(self, name: str, encoding: str = "utf-8") -> str:
        """Read an entry as text. Raises ``KeyError`` if it is missing."""
        return self._zip.read(name).decode(encoding)

    def manifest_attributes(self) -> Dict[str, str]:
        """Main-section attributes of ``META-INF/MANIFEST.MF``, empty if absent."""
        if self._manifest is None:
            if self.has_entry(MANIFEST_PATH):
                self._manifest = parse_main_attributes(self.read_text(MANIFEST_PATH))
            else:
                self._manifest = {}
        return self._manifest

    def __repr__(self) -> str:
        return f"JarArchive(path={self.path}, cached={self._identity is not None})"


def parse_main_attributes(text: str) -> Dict[str, str]:
    """Read the ``Name: value`` pairs before the first blank line.

    Continuation lines start with a single space and are joined onto the
    previous value. Per-entry sections after the blank line are ignored.
    """
    attributes: Dict[str, str] = {}
    last_key = None
    for line in text.splitlines():
        if not line.strip():
            break
        if line.startswith(" ") and last_key is not None:
            attributes[last_key] += line[1:]
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        last_key = key.strip()
        attributes[last_key] = value.strip()
    return attributes
