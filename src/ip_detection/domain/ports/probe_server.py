"""Probe server port."""

from abc import ABC, abstractmethod


class ProbeServer(ABC):
    """Port for hosting the identity probe endpoint."""

    @abstractmethod
    async def start(self) -> None:
        """Start serving requests."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop serving requests."""
        ...
