from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from jarid.errors import ExposerFailure
from jarid.logging import get_logger
from jarid.model.identity import Identity


@runtime_checkable
class Exposer(Protocol):
    """A strategy contributing coordinates for one archive."""

    def expose(self, identity: Identity, handle) -> None:
        ...


class BaseExposer(ABC):
    """
    Abstract base class for the bundled exposers.
    """

    name = "base"

    def __init__(self, debug: bool = False):
        """
        Initialize the exposer.

        Args:
            debug: Log every candidate this exposer contributes
        """
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def expose(self, identity: Identity, handle) -> None:
        """
        Add what this exposer can find about ``handle`` to ``identity``.

        Args:
            identity: Identity being built for the archive
            handle: Archive being analyzed
        """
        pass

    def _fail(self, handle, reason: str) -> ExposerFailure:
        """Build the failure raised when archive content is unusable."""
        path = getattr(handle, "path", None)
        return ExposerFailure(self.name, str(path) if path is not None else None, reason)

    def _log_candidate(self, field: str, value: Optional[str], handle) -> None:
        if self.debug:
            self.logger.debug(f"{self.name}: {field}={value!r} for {getattr(handle, 'path', handle)}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(debug={self.debug})"
