"""Exposer factory for building ordered exposer lists from names."""

from typing import Dict, Iterable, List, Type

from jarid.errors import InvalidConfiguration
from jarid.exposers.base import BaseExposer
from jarid.exposers.classes import ClassesExposer
from jarid.exposers.filename import FilenameExposer
from jarid.exposers.manifest import ManifestExposer
from jarid.exposers.pom_properties import PomPropertiesExposer

# candidates are recorded in this order, which decides ties
DEFAULT_EXPOSERS = ["filename", "manifest", "pom_properties", "classes"]


class ExposerFactory:
    """Factory creating exposers by name."""

    # Default exposer mapping
    _EXPOSERS: Dict[str, Type[BaseExposer]] = {
        FilenameExposer.name: FilenameExposer,
        ManifestExposer.name: ManifestExposer,
        PomPropertiesExposer.name: PomPropertiesExposer,
        ClassesExposer.name: ClassesExposer,
    }

    def __init__(self) -> None:
        """Initialize factory."""
        self._custom_exposers: Dict[str, Type[BaseExposer]] = {}

    def register_exposer(self, name: str, exposer_class: Type[BaseExposer]) -> None:
        """Register a custom exposer under ``name``.

        Args:
            name: Name used in configuration files.
            exposer_class: Exposer class, instantiated with ``debug=...``.
        """
        self._custom_exposers[name.lower()] = exposer_class

    def get_supported_names(self) -> List[str]:
        """Get all registered exposer names."""
        names = list(self._EXPOSERS)
        names.extend(name for name in self._custom_exposers if name not in self._EXPOSERS)
        return names

    def is_supported(self, name: str) -> bool:
        return name.lower() in self._custom_exposers or name.lower() in self._EXPOSERS

    def create(self, name: str, debug: bool = False) -> BaseExposer:
        """Create a single exposer.

        Raises:
            InvalidConfiguration: If no exposer is registered under ``name``.
        """
        key = name.lower()
        exposer_class = self._custom_exposers.get(key) or self._EXPOSERS.get(key)
        if exposer_class is None:
            raise InvalidConfiguration(
                f"Unknown exposer: {name}. Supported: {self.get_supported_names()}"
            )
        return exposer_class(debug=debug)

    def create_all(self, names: Iterable[str], debug: bool = False) -> List[BaseExposer]:
        """Create exposers in the given order."""
        return [self.create(name, debug=debug) for name in names]


# Global factory instance
exposer_factory = ExposerFactory()
