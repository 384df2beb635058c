# upload_api/services/upload_tree.py
"""Reconstrução da hierarquia declarada pelo cliente, só para log.

Nada aqui toca o disco: os arquivos são gravados num diretório plano e a
árvore existe apenas para conferência no log.
"""
from __future__ import annotations

import logging
from typing import Iterable

from upload_api.entities.upload import UploadedFile
from upload_api.entities.upload_tree import DirectoryNode, FileLeaf

logger = logging.getLogger(__name__)

INDENT = "   "


def build_tree(files: Iterable[UploadedFile]) -> DirectoryNode:
    """Monta a árvore a partir de ``declared_name`` (segmentos separados por ``/``).

    O primeiro a chegar vence: um nó existente nunca é substituído, então um
    nome repetido mantém o tamanho do primeiro arquivo.
    """
    root = DirectoryNode()
    for f in files:
        parts = [p for p in f.declared_name.split("/") if p]
        if not parts:
            continue

        current = root
        for i, part in enumerate(parts):
            is_last = i == len(parts) - 1
            node = current.children.get(part)
            if node is None:
                node = FileLeaf(f.size_bytes) if is_last else DirectoryNode()
                current.children[part] = node
            if is_last:
                break
            if not isinstance(node, DirectoryNode):
                logger.debug(
                    "Tree: '%s' passes through file '%s'; left out", f.declared_name, part
                )
                break
            current = node
    return root


def render_tree(node: DirectoryNode, prefix: str = "") -> list[str]:
    lines: list[str] = []
    for name, child in node.children.items():
        if isinstance(child, FileLeaf):
            lines.append(f"{prefix}─{name} ({child.size_bytes / 1024:.2f} KB)")
        else:
            lines.append(f"{prefix}📂 {name}")
            lines.extend(render_tree(child, prefix + INDENT))
    return lines


def log_tree(tree: DirectoryNode, log: logging.Logger = logger) -> None:
    log.info("📂 Upload Tree:")
    for line in render_tree(tree):
        log.info(line)
