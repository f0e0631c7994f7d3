from typing import FrozenSet


class IgnoreRules:
    """
    Central logic for what entries the scanner should skip.
    """

    def __init__(self, ignored_names: FrozenSet[str]):
        self.ignored_names = frozenset(ignored_names)

    def should_ignore(self, name: str) -> bool:
        """
        Returns True if the file/folder should be skipped at any depth.
        """
        # Hidden entries (.git, .DS_Store, ...)
        if name.startswith("."):
            return True

        # Configured directory names such as the dependency cache
        return name in self.ignored_names
