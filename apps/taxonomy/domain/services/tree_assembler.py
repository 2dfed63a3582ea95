"""
Builds the category forest from a flat list of records.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence
from uuid import UUID

from ..entities.category import Category

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TreeNode:
    """A category with its nested children and product rollups."""
    category: Category
    children: List['TreeNode'] = field(default_factory=list)
    product_count: int = 0
    total_product_count: int = 0

    @property
    def id(self) -> UUID:
        return self.category.id


class TreeAssembler:
    """Turns flat category lists into a forest and walks it."""

    def assemble(self, categories: Sequence[Category]) -> List[TreeNode]:
        """
        Build the forest in one index pass and one attach pass.

        Children keep the order of the input. A node whose parent is not in
        the input, or is itself, becomes a root. Nodes caught in a parent
        cycle (only possible with corrupt input) are promoted to roots so
        every record shows up exactly once.
        """
        nodes: Dict[UUID, TreeNode] = {}
        ordered: List[TreeNode] = []
        for category in categories:
            if category.id in nodes:
                logger.warning(f"Duplicate category id in tree input: {category.id}")
                continue
            node = TreeNode(category=category)
            nodes[category.id] = node
            ordered.append(node)

        roots: List[TreeNode] = []
        parents: Dict[UUID, TreeNode] = {}
        for node in ordered:
            parent_id = node.category.parent_id
            parent = nodes.get(parent_id) if parent_id is not None else None
            if parent is None or parent is node:
                roots.append(node)
            else:
                parent.children.append(node)
                parents[node.id] = parent

        reached = self._reachable(roots)
        if len(reached) < len(ordered):
            for node in ordered:
                if node.id in reached:
                    continue
                logger.warning(f"Category {node.id} is part of a parent cycle; treating it as a root")
                parent = parents.pop(node.id)
                parent.children.remove(node)
                roots.append(node)
                reached |= self._reachable([node])
        return roots

    def _reachable(self, roots: Sequence[TreeNode]) -> set:
        seen = set()
        stack = list(roots)
        while stack:
            node = stack.pop()
            if node.id in seen:
                continue
            seen.add(node.id)
            stack.extend(node.children)
        return seen

    def count_descendants(self, node: TreeNode) -> int:
        return sum(1 + self.count_descendants(child) for child in node.children)

    def flatten(self, node: TreeNode) -> List[Category]:
        """Pre-order: the node, then each child subtree left to right."""
        result: List[Category] = []
        stack = [node]
        while stack:
            current = stack.pop()
            result.append(current.category)
            stack.extend(reversed(current.children))
        return result

    def flatten_forest(self, roots: Sequence[TreeNode]) -> List[Category]:
        result: List[Category] = []
        for root in roots:
            result.extend(self.flatten(root))
        return result

    def rollup_product_counts(self, roots: Sequence[TreeNode], counts: Mapping[UUID, int]) -> None:
        """Set direct and subtree product counts on every node."""
        for root in roots:
            self._rollup(root, counts)

    def _rollup(self, node: TreeNode, counts: Mapping[UUID, int]) -> int:
        node.product_count = counts.get(node.id, 0)
        node.category.product_count = node.product_count
        node.total_product_count = node.product_count + sum(
            self._rollup(child, counts) for child in node.children
        )
        return node.total_product_count
