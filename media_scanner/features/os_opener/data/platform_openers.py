import logging
import os
import subprocess
from pathlib import Path
from typing import List

from ..domain.interfaces import IOSOpener, OpenerError

logger = logging.getLogger(__name__)


class CommandOpener(IOSOpener):
    """
    Base adapter that runs an argument-list command and waits for it.
    Commands are never routed through a shell, so quotes, spaces or `&`
    in file names are passed through intact.
    """

    def open_file(self, path: Path) -> None:
        self._run(self.file_command(path))

    def reveal_folder(self, path: Path) -> None:
        self._run(self.folder_command(path))

    def file_command(self, path: Path) -> List[str]:
        raise NotImplementedError

    def folder_command(self, path: Path) -> List[str]:
        raise NotImplementedError

    def _run(self, cmd: List[str], check: bool = True) -> None:
        logger.info(f"Executing opener: {' '.join(cmd)}")

        try:
            subprocess.run(
                cmd,
                check=check,
                capture_output=True,
                text=True
            )
        except subprocess.CalledProcessError as e:
            error_message = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
            logger.error(f"Opener failed. STDERR: {error_message}")
            raise OpenerError(f"Open command failed: {error_message}") from e
        except OSError as e:
            logger.error(f"Opener could not be launched: {e}")
            raise OpenerError(f"Open command could not be launched: {e}") from e


class MacOpener(CommandOpener):
    def file_command(self, path: Path) -> List[str]:
        return ["open", str(path)]

    def folder_command(self, path: Path) -> List[str]:
        return ["open", str(path)]


class WindowsOpener(CommandOpener):
    def open_file(self, path: Path) -> None:
        # ShellExecute directly; `cmd /c start` would parse & | ^ in the name
        logger.info(f"Opening with default application: {path}")
        try:
            os.startfile(str(path))
        except OSError as e:
            logger.error(f"Opener failed: {e}")
            raise OpenerError(f"Open command failed: {e}") from e

    def folder_command(self, path: Path) -> List[str]:
        return ["explorer", str(path)]

    def reveal_folder(self, path: Path) -> None:
        # explorer.exe exits with 1 even when the window opened
        self._run(self.folder_command(path), check=False)


class XdgOpener(CommandOpener):
    def file_command(self, path: Path) -> List[str]:
        return ["xdg-open", str(path)]

    def folder_command(self, path: Path) -> List[str]:
        return ["xdg-open", str(path)]
