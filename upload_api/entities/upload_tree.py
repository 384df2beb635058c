# upload_api/entities/upload_tree.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class FileLeaf:
    size_bytes: int


@dataclass
class DirectoryNode:
    # dict mantém a ordem de inserção
    children: dict[str, "TreeNode"] = field(default_factory=dict)


TreeNode = Union[FileLeaf, DirectoryNode]
