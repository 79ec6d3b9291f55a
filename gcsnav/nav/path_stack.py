"""
History of directory prefixes visited in one navigation session.
"""

from ..core.errors import IllegalBack


ROOT_PREFIX = ""


class PathStack:
    """
    Stack of prefixes with the bucket root at the bottom.

    Never empty: index 0 is always the root, and the top is the directory
    being shown. Going back is legal only while depth() > 1.
    """

    def __init__(self):
        self._paths = [ROOT_PREFIX]

    def top(self) -> str:
        return self._paths[-1]

    def push(self, prefix: str):
        self._paths.append(prefix)

    def pop(self) -> str:
        """Drop the current directory and return the one now on top."""
        if len(self._paths) <= 1:
            raise IllegalBack("Already at the bucket root")
        self._paths.pop()
        return self._paths[-1]

    def depth(self) -> int:
        return len(self._paths)

    @property
    def at_root(self) -> bool:
        return len(self._paths) == 1

    def __repr__(self) -> str:
        return f"PathStack({self._paths!r})"
