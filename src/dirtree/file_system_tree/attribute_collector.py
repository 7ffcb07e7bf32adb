"""Computation of the optional attributes requested for each node."""

import os
from typing import Any, Dict, Sequence

from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.types import Attribute


class AttributeCollector:
    """Computes the requested attributes for a node.

    Only requested attributes are produced. ``type`` comes from the node itself,
    ``extension`` from the file name, and every other attribute straight from the
    stat result, except for a directory's ``size``: that is the sum of its
    children's sizes. Children are attached before their parent is attributed, so
    sizes roll up from the leaves as the recursion unwinds.

    Attributes:
        attributes (Sequence[Attribute]): The attributes to compute, in request order.
    """

    def __init__(self, attributes: Sequence[Attribute]) -> None:
        self.attributes = tuple(attributes)

    def attributes_for(self, node: TreeNode, stat_result: os.stat_result) -> Dict[str, Any]:
        """Compute the requested attributes for ``node``.

        Args:
            node: The node being attributed. For directories its children must
                already be attached.
            stat_result: Stat information for the entry (for a followed symlink,
                the target's).

        Returns:
            A mapping from attribute name to value, in request order.
        """
        values: Dict[str, Any] = {}
        for attribute in self.attributes:
            if attribute is Attribute.TYPE:
                values[attribute.value] = node.node_type
            elif attribute is Attribute.EXTENSION:
                if not node.is_dir:
                    values[attribute.value] = file_extension(node.name)
            elif attribute is Attribute.SIZE and node.is_dir:
                values[attribute.value] = sum(child.attributes[attribute.value] for child in node.children)
            else:
                values[attribute.value] = getattr(stat_result, attribute.stat_field)
        return values


def file_extension(name: str) -> str:
    """Return the lowercase suffix of ``name`` including its leading dot.

    Example:
        >>> file_extension("file_a.TXT")
        '.txt'
        >>> file_extension("archive.tar.gz")
        '.gz'
        >>> file_extension(".gitignore")
        ''
    """
    return os.path.splitext(name)[1].lower()
