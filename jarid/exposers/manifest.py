"""Candidates from the main attributes of ``META-INF/MANIFEST.MF``."""

import zipfile
from typing import Dict, Optional

from jarid.exposers.base import BaseExposer
from jarid.model.identity import Identity

NAME_ATTRIBUTES = ("Implementation-Title", "Specification-Title", "Bundle-Name", "Extension-Name")
VERSION_ATTRIBUTES = ("Implementation-Version", "Specification-Version", "Bundle-Version")
VENDOR_ATTRIBUTES = ("Implementation-Vendor", "Specification-Vendor", "Bundle-Vendor")
GROUP_ATTRIBUTES = ("Implementation-Vendor-Id", "Automatic-Module-Name")


def symbolic_name(value: Optional[str]) -> Optional[str]:
    """Strip OSGi directives: ``org.foo.bar;singleton:=true`` -> ``org.foo.bar``."""
    if not value:
        return None
    return value.split(";", 1)[0].strip() or None


class ManifestExposer(BaseExposer):
    """
    Exposer reading manifest attributes.

    Manifests are hand-maintained and often stale, so every attribute is only
    a candidate. ``Bundle-SymbolicName`` is usually the group id followed by
    the artifact id (``org.apache.commons.lang3``); it is offered as a group
    id candidate and its last segment as an artifact id candidate.
    """

    name = "manifest"

    def expose(self, identity: Identity, handle) -> None:
        try:
            attributes: Dict[str, str] = handle.manifest_attributes()
        except (KeyError, UnicodeDecodeError, zipfile.BadZipFile) as e:
            raise self._fail(handle, f"cannot read manifest: {e}") from e
        if not attributes:
            return

        for key in NAME_ATTRIBUTES:
            self._add(attributes, key, identity.add_name, handle)
        for key in VERSION_ATTRIBUTES:
            self._add(attributes, key, identity.add_version, handle)
        for key in VENDOR_ATTRIBUTES:
            self._add(attributes, key, identity.add_vendor, handle)
        for key in GROUP_ATTRIBUTES:
            self._add(attributes, key, identity.add_group_id, handle)

        bundle = symbolic_name(attributes.get("Bundle-SymbolicName"))
        if bundle:
            self._log_candidate("group_id", bundle, handle)
            identity.add_group_id(bundle)
            identity.add_artifact_id(bundle.rsplit(".", 1)[-1])

    def _add(self, attributes: Dict[str, str], key: str, add, handle) -> None:
        value = attributes.get(key)
        if value:
            self._log_candidate(key, value, handle)
            add(value)
