"""
Identity resolution for Java archives.

The resolver runs every configured exposer against an archive, then fills the
coordinates no exposer set directly from the collected candidates:

- group id and version: shortest candidate (long values tend to be package
  paths or carry qualifiers)
- artifact id, name and vendor: longest candidate (long values tend to be the
  most descriptive)

Ties go to the candidate recorded first. The result is cached on the archive
handle, so analyzing the same handle again returns the same Identity without
running the exposers.

Usage:
    from jarid.archive import JarArchive
    from jarid.resolver import IdentityResolver

    resolver = IdentityResolver.from_config(load_config("jarid.yaml").resolver)
    with JarArchive("commons-lang-2.6.jar") as archive:
        identity = resolver.analyze(archive)
"""

from typing import Iterable, Optional, Sequence

from jarid.config import ResolverConfig
from jarid.errors import InvalidConfiguration
from jarid.exposers.base import Exposer
from jarid.exposers.factory import ExposerFactory, exposer_factory
from jarid.logging import get_logger
from jarid.model.identity import Identity

logger = get_logger("jarid.resolver")


def pick_smallest(candidates: Iterable[Optional[str]]) -> Optional[str]:
    """Shortest non-empty candidate, earliest one on ties, ``None`` if there is none."""
    smallest = None
    for value in candidates:
        if value and (smallest is None or len(value) < len(smallest)):
            smallest = value
    return smallest


def pick_largest(candidates: Iterable[Optional[str]]) -> Optional[str]:
    """Longest non-empty candidate, earliest one on ties, ``None`` if there is none."""
    largest = None
    for value in candidates:
        if value and (largest is None or len(value) > len(largest)):
            largest = value
    return largest


def normalize(identity: Identity) -> Identity:
    """Fill every empty coordinate of ``identity`` from its candidates."""
    if not identity.group_id:
        identity.group_id = pick_smallest(identity.potential_group_ids)

    if not identity.artifact_id:
        identity.artifact_id = pick_largest(identity.potential_artifact_ids)

    if not identity.version:
        identity.version = pick_smallest(identity.potential_versions)

    if not identity.name:
        identity.name = pick_largest(identity.potential_names)

    if not identity.vendor:
        identity.vendor = pick_largest(identity.potential_vendors)

    return identity


class IdentityResolver:
    """
    Work out the Maven coordinates of an archive from a list of exposers.

    The resolver keeps no state besides its exposers. It can be shared across
    threads analyzing different archives as long as the exposers can.
    """

    def __init__(self, exposers: Optional[Sequence[Exposer]]):
        """
        Args:
            exposers: Exposers to run, in order. May be empty.

        Raises:
            InvalidConfiguration: If ``exposers`` is None.
        """
        if exposers is None:
            raise InvalidConfiguration("IdentityResolver requires a sequence of exposers, got None")
        self.exposers = tuple(exposers)

    @classmethod
    def from_config(cls, config: ResolverConfig, factory: Optional[ExposerFactory] = None) -> "IdentityResolver":
        """Build a resolver running the exposers named in ``config``."""
        factory = factory or exposer_factory
        return cls(factory.create_all(config.exposers, debug=config.debug))

    def analyze(self, handle) -> Identity:
        """
        Find the Maven identity of an archive.

        If the handle already carries an identity it is returned as is. Open a
        new handle to re-read an archive.

        Exceptions raised by exposers are not caught: they propagate to the
        caller and nothing is cached, so the next call starts over.

        Args:
            handle: Archive to analyze (see ``jarid.archive.ArchiveHandle``)

        Returns:
            The identity, possibly with empty coordinates
        """
        identity = handle.get_cached_identity()
        if identity is not None:
            logger.debug(f"Using cached identity for {handle!r}")
            return identity

        identity = Identity()

        for exposer in self.exposers:
            logger.debug(f"Running {exposer!r} on {handle!r}")
            exposer.expose(identity, handle)

        normalize(identity)

        handle.set_cached_identity(identity)

        logger.info(f"Identified {handle!r} as {identity.coordinates or '<unknown>'}")
        return identity
