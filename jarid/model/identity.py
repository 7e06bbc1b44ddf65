"""Maven identity record accumulated by exposers for one archive."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

FIELDS = ("group_id", "artifact_id", "version", "name", "vendor")


def is_empty(value: Optional[str]) -> bool:
    """``None`` and ``""`` are the same thing everywhere in an identity."""
    return not value


@dataclass
class Identity:
    """
    Discovered or inferred Maven coordinates of a single archive.

    Every coordinate has a resolved slot (``group_id``, ``artifact_id``, ...) and
    an ordered list of candidates (``potential_group_ids``, ...). Exposers append
    candidates and may set resolved slots directly; the resolver later fills the
    slots that are still empty from the candidates.
    """

    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    vendor: Optional[str] = None

    potential_group_ids: List[Optional[str]] = field(default_factory=list)
    potential_artifact_ids: List[Optional[str]] = field(default_factory=list)
    potential_versions: List[Optional[str]] = field(default_factory=list)
    potential_names: List[Optional[str]] = field(default_factory=list)
    potential_vendors: List[Optional[str]] = field(default_factory=list)

    def __setattr__(self, key: str, value: Any) -> None:
        # collapse "" into None so there is a single empty variant
        if key in FIELDS and is_empty(value):
            value = None
        super().__setattr__(key, value)

    def add_group_id(self, group_id: Optional[str]) -> None:
        self.potential_group_ids.append(group_id)

    def add_artifact_id(self, artifact_id: Optional[str]) -> None:
        self.potential_artifact_ids.append(artifact_id)

    def add_version(self, version: Optional[str]) -> None:
        self.potential_versions.append(version)

    def add_name(self, name: Optional[str]) -> None:
        self.potential_names.append(name)

    def add_vendor(self, vendor: Optional[str]) -> None:
        self.potential_vendors.append(vendor)

    def add_and_set_group_id(self, group_id: Optional[str]) -> None:
        """Record a candidate and, when it is not empty, make it the group id."""
        self.add_group_id(group_id)
        if not is_empty(group_id):
            self.group_id = group_id

    def add_and_set_artifact_id(self, artifact_id: Optional[str]) -> None:
        self.add_artifact_id(artifact_id)
        if not is_empty(artifact_id):
            self.artifact_id = artifact_id

    def add_and_set_version(self, version: Optional[str]) -> None:
        self.add_version(version)
        if not is_empty(version):
            self.version = version

    def add_and_set_name(self, name: Optional[str]) -> None:
        self.add_name(name)
        if not is_empty(name):
            self.name = name

    def add_and_set_vendor(self, vendor: Optional[str]) -> None:
        self.add_vendor(vendor)
        if not is_empty(vendor):
            self.vendor = vendor

    def is_empty(self) -> bool:
        """Check if no coordinate has been resolved."""
        return all(is_empty(getattr(self, key)) for key in FIELDS)

    @property
    def coordinates(self) -> Optional[str]:
        """``groupId:artifactId:version`` with empty parts left out."""
        parts = [part for part in (self.group_id, self.artifact_id, self.version) if part]
        return ":".join(parts) if parts else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "version": self.version,
            "name": self.name,
            "vendor": self.vendor,
            "potential_group_ids": list(self.potential_group_ids),
            "potential_artifact_ids": list(self.potential_artifact_ids),
            "potential_versions": list(self.potential_versions),
            "potential_names": list(self.potential_names),
            "potential_vendors": list(self.potential_vendors),
        }

    def __str__(self) -> str:
        return f"Identity({self.coordinates or '<unknown>'})"
