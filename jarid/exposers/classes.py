"""Group id candidates from the packages of the classes in the archive."""

from typing import List

from jarid.exposers.base import BaseExposer
from jarid.model.identity import Identity


def class_packages(entry_names: List[str]) -> List[str]:
    """Distinct package names of ``.class`` entries, sorted.

    Entries under ``META-INF/`` (multi-release and module descriptors) and
    classes in the default package are skipped.
    """
    packages = set()
    for entry in entry_names:
        if not entry.endswith(".class") or entry.startswith("META-INF/"):
            continue
        package, _, _ = entry.rpartition("/")
        if package:
            packages.add(package.replace("/", "."))
    return sorted(packages)


class ClassesExposer(BaseExposer):
    """
    Exposer offering every class package as a group id candidate.

    Since the group id is picked as the shortest candidate, the root package
    of the library usually wins when nothing better is available.
    """

    name = "classes"

    def expose(self, identity: Identity, handle) -> None:
        packages = class_packages(handle.entry_names())
        if self.debug:
            self.logger.debug(f"{len(packages)} packages in {getattr(handle, 'path', handle)}")
        for package in packages:
            identity.add_group_id(package)
