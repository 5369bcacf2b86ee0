"""A file-system tree in which files and directories share one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["FileSystemNode", "FileNode", "DirectoryNode", "INDENT_INCREMENT"]

INDENT_INCREMENT = 3


class FileSystemNode(ABC):
    """A node of the tree that can list itself."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def ls(self, indent: int = 0) -> list[str]:
        """Print the listing of this node, indented by ``indent`` spaces.

        Returns the printed lines.
        """


class FileNode(FileSystemNode):
    """A leaf of the tree."""

    def ls(self, indent: int = 0) -> list[str]:
        line = f"{' ' * indent}{self.name}.file"
        print(line)
        return [line]


class DirectoryNode(FileSystemNode):
    """A node that holds other nodes in the order they were added."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[FileSystemNode] = []

    def add(self, child: FileSystemNode) -> None:
        """Append ``child`` to this directory."""
        self.children.append(child)

    def ls(self, indent: int = 0) -> list[str]:
        line = f"{' ' * indent}Directory ({self.name})/"
        print(line)
        lines = [line]
        for child in self.children:
            lines.extend(child.ls(indent + INDENT_INCREMENT))
        return lines