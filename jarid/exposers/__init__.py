"""
Identity exposers.

Each exposer inspects an archive and contributes candidate (or resolved)
coordinates to an Identity. Exposers are independent of each other; the
resolver runs them in the configured order and reconciles what they found.

Bundled exposers:
- FilenameExposer: ``artifact-version.jar`` style file names
- ManifestExposer: ``Implementation-*``, ``Specification-*`` and ``Bundle-*`` attributes
- PomPropertiesExposer: ``META-INF/maven/**/pom.properties`` written by Maven builds
- ClassesExposer: package names of the classes in the archive

Usage:
    from jarid.exposers.factory import ExposerFactory

    exposers = ExposerFactory().create_all(["pom_properties", "manifest"])
"""

from jarid.exposers.base import BaseExposer, Exposer

__all__ = ["BaseExposer", "Exposer"]
