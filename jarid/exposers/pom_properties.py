"""Coordinates from the ``pom.properties`` files Maven writes into archives."""

import re
import zipfile
from typing import Dict, List

from jarid.exposers.base import BaseExposer
from jarid.model.identity import Identity

POM_PROPERTIES_PREFIX = "META-INF/maven/"
POM_PROPERTIES_NAME = "pom.properties"

# the first "=" or ":" ends the key
SEPARATOR = re.compile(r"\s*[=:]\s*")


def parse_properties(text: str) -> Dict[str, str]:
    """Read ``key=value`` / ``key: value`` lines, skipping ``#`` and ``!`` comments."""
    properties: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line[0] in "#!":
            continue
        parts = SEPARATOR.split(line, 1)
        if len(parts) == 2:
            properties[parts[0]] = parts[1].strip()
    return properties


class PomPropertiesExposer(BaseExposer):
    """
    Exposer reading ``META-INF/maven/<groupId>/<artifactId>/pom.properties``.

    A single ``pom.properties`` was written by the build that produced the
    archive, so its coordinates are set as resolved values. Shaded or
    uber jars carry one per bundled dependency; in that case none of them is
    authoritative and all are added as candidates only.
    """

    name = "pom_properties"

    def _find(self, handle) -> List[str]:
        return [
            entry
            for entry in handle.entry_names()
            if entry.startswith(POM_PROPERTIES_PREFIX) and entry.endswith("/" + POM_PROPERTIES_NAME)
        ]

    def expose(self, identity: Identity, handle) -> None:
        entries = self._find(handle)
        if not entries:
            return

        authoritative = len(entries) == 1
        if not authoritative:
            self.logger.debug(f"Found {len(entries)} pom.properties in {getattr(handle, 'path', handle)}, treating all as candidates")

        for entry in entries:
            try:
                properties = parse_properties(handle.read_text(entry))
            except (KeyError, UnicodeDecodeError, zipfile.BadZipFile) as e:
                raise self._fail(handle, f"cannot read {entry}: {e}") from e

            group_id = properties.get("groupId")
            artifact_id = properties.get("artifactId")
            version = properties.get("version")
            self._log_candidate("coordinates", f"{group_id}:{artifact_id}:{version}", handle)

            if authoritative:
                identity.add_and_set_group_id(group_id)
                identity.add_and_set_artifact_id(artifact_id)
                identity.add_and_set_version(version)
            else:
                identity.add_group_id(group_id)
                identity.add_artifact_id(artifact_id)
                identity.add_version(version)
