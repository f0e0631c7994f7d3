from abc import ABC, abstractmethod
from pathlib import Path


class OpenerError(RuntimeError):
    """Raised when the native open/reveal command could not run or failed."""


class IOSOpener(ABC):
    """
    Contract for handing a path to the operating system's file manager.
    Abstracts away the per-platform commands from the request handlers.
    """

    @abstractmethod
    def open_file(self, path: Path) -> None:
        """
        Opens the file with its default application.

        Raises:
            OpenerError: If the command could not be launched or exited non-zero.
        """
        pass

    @abstractmethod
    def reveal_folder(self, path: Path) -> None:
        """
        Shows the folder in the native file manager.

        Raises:
            OpenerError: If the command could not be launched or exited non-zero.
        """
        pass
