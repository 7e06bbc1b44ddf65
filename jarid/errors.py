"""Exceptions raised by jarid."""

from typing import Optional


class InvalidConfiguration(ValueError):
    """Raised when a resolver or its exposer list cannot be configured."""


class ExposerFailure(RuntimeError):
    """Raised by an exposer when archive content cannot be read or decoded.

    The resolver never catches this; it reaches the caller of ``analyze``
    and leaves the archive's identity cache empty.
    """

    def __init__(self, exposer: str, archive: Optional[str], reason: str):
        self.exposer = exposer
        self.archive = archive
        self.reason = reason
        super().__init__(f"{exposer} failed on {archive or '<unknown archive>'}: {reason}")
