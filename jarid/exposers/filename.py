"""Guess artifact id and version from the archive file name."""

import re
from typing import Optional, Tuple

from jarid.exposers.base import BaseExposer
from jarid.model.identity import Identity

ARCHIVE_SUFFIXES = (".jar", ".war", ".ear", ".rar", ".zip")

# artifact-1.2.3, artifact-1.2.3-SNAPSHOT, artifact-1.2.3-sources
# the version starts with a numeric token, so "x-3d-engine-1.0" keeps "3d" in the artifact
VERSION_PATTERN = re.compile(r"^(?P<artifact>.+?)-(?P<version>\d+(?:\.\w+)*(?:-(?!sources$|javadoc$|tests$)[\w.]+)*)(?:-(?P<classifier>[A-Za-z][\w.]*))?$")


def split_filename(filename: str) -> Tuple[str, Optional[str]]:
    """Split ``commons-lang-2.6.jar`` into ``("commons-lang", "2.6")``.

    A file name without a version part returns the whole stem and ``None``.
    """
    stem = filename
    lowered = filename.lower()
    for suffix in ARCHIVE_SUFFIXES:
        if lowered.endswith(suffix):
            stem = filename[: -len(suffix)]
            break

    match = VERSION_PATTERN.match(stem)
    if not match:
        return stem, None
    return match.group("artifact"), match.group("version")


class FilenameExposer(BaseExposer):
    """
    Exposer reading the archive file name.

    File names are the weakest evidence available, so everything found here is
    added as a candidate only.
    """

    name = "filename"

    def expose(self, identity: Identity, handle) -> None:
        path = getattr(handle, "path", None)
        if path is None:
            return

        artifact_id, version = split_filename(path.name)
        self._log_candidate("artifact_id", artifact_id, handle)
        identity.add_artifact_id(artifact_id)
        identity.add_name(artifact_id)
        if version:
            self._log_candidate("version", version, handle)
            identity.add_version(version)
