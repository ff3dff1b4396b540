"""Abstract notifier interface (port) for transient user notifications."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Port for toast-style notifications: one per finished operation."""

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        ...
