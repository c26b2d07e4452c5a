"""
Tagged tree model for verb entries.

An entry is an arbitrary JSON value. It is converted once into a tree of
TextLeaf / SequenceNode / MappingNode / OtherLeaf nodes, and FormCollector
walks that tree to gather every textual form.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple, Union

from .normalize import normalize_text


@dataclass(frozen=True)
class TextLeaf:
    text: str


@dataclass(frozen=True)
class SequenceNode:
    items: Tuple["TreeNode", ...]


@dataclass(frozen=True)
class MappingNode:
    # Only values matter; keys are field names such as "past" or "gerund"
    values: Tuple["TreeNode", ...]


@dataclass(frozen=True)
class OtherLeaf:
    value: Any


TreeNode = Union[TextLeaf, SequenceNode, MappingNode, OtherLeaf]


def to_tree(value: Any) -> TreeNode:
    """Convert a decoded JSON value into a TreeNode."""
    if isinstance(value, str):
        return TextLeaf(value)
    if isinstance(value, Mapping):
        return MappingNode(tuple(to_tree(item) for item in value.values()))
    if isinstance(value, (list, tuple)):
        return SequenceNode(tuple(to_tree(item) for item in value))
    return OtherLeaf(value)


class FormCollector:
    """
    Visitor collecting normalized, non-empty, de-duplicated text leaves.

    Forms are kept in first-seen order.
    """

    def __init__(self):
        self._forms: Dict[str, None] = {}

    def visit(self, node: TreeNode) -> None:
        if isinstance(node, TextLeaf):
            self.visit_text(node)
        elif isinstance(node, SequenceNode):
            self.visit_sequence(node)
        elif isinstance(node, MappingNode):
            self.visit_mapping(node)
        # OtherLeaf: numbers, booleans and null are not forms

    def visit_text(self, node: TextLeaf) -> None:
        form = normalize_text(node.text)
        if form:
            self._forms.setdefault(form, None)

    def visit_sequence(self, node: SequenceNode) -> None:
        for item in node.items:
            self.visit(item)

    def visit_mapping(self, node: MappingNode) -> None:
        for item in node.values:
            self.visit(item)

    @property
    def forms(self) -> List[str]:
        return list(self._forms)


def collect_forms(entry: Any) -> List[str]:
    """
    Collect every textual form found anywhere in an entry.

    :param entry: Verb entry (any decoded JSON value)
    :return: Unique normalized forms in traversal order
    """
    collector = FormCollector()
    collector.visit(to_tree(entry))
    return collector.forms
