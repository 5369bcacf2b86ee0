import pytest

from patternkit.filesystem import (
    INDENT_INCREMENT,
    DirectoryNode,
    FileNode,
    FileSystemNode,
)


def _sample_tree() -> DirectoryNode:
    root = DirectoryNode("root")
    dir1 = DirectoryNode("1")
    dir2 = DirectoryNode("2")
    dir3 = DirectoryNode("3")
    dir2.add(FileNode("B"))
    dir2.add(FileNode("C"))
    dir2.add(dir3)
    root.add(FileNode("A"))
    root.add(dir1)
    root.add(dir2)
    return root


def test_file_listing_uses_indent():
    assert FileNode("A").ls(4) == ["    A.file"]


def test_file_listing_default_indent():
    assert FileNode("notes").ls() == ["notes.file"]


def test_empty_directory_listing():
    assert DirectoryNode("empty").ls() == ["Directory (empty)/"]


def test_sample_tree_listing():
    assert _sample_tree().ls() == [
        "Directory (root)/",
        "   A.file",
        "   Directory (1)/",
        "   Directory (2)/",
        "      B.file",
        "      C.file",
        "      Directory (3)/",
    ]


def test_listing_is_printed(capsys):
    lines = _sample_tree().ls()
    out = capsys.readouterr().out
    assert out == "".join(line + "\n" for line in lines)


def test_children_indented_one_step_deeper():
    parent = DirectoryNode("p")
    parent.add(FileNode("f"))
    lines = parent.ls(2)
    depth = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert depth == [2, 2 + INDENT_INCREMENT]


def test_children_keep_insertion_order():
    directory = DirectoryNode("d")
    for name in ["z", "a", "m"]:
        directory.add(FileNode(name))
    assert [child.name for child in directory.children] == ["z", "a", "m"]


def test_abstract_node_cannot_be_created():
    with pytest.raises(TypeError):
        FileSystemNode("x")