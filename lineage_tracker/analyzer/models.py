"""Data model for declarations, references and their source locations."""
from dataclasses import dataclass, field
from typing import List

from tree_sitter import Node


GLOBAL_SCOPE = "global"
SCOPE_SEPARATOR = "::"


@dataclass(frozen=True)
class Location:
    """Position of a token in the analyzed file.

    Line and column are 1-based (editor convention); length is the byte span.
    """
    line: int
    column: int
    length: int

    @classmethod
    def from_node(cls, node: Node) -> 'Location':
        """Build a Location from a tree-sitter node.

        Args:
            node: Node whose start point and byte span are used

        Returns:
            Location with 1-based line/column
        """
        row, column = node.start_point
        return cls(
            line=row + 1,
            column=column + 1,
            length=node.end_byte - node.start_byte,
        )


@dataclass
class Reference:
    """One occurrence of a declared name."""
    location: Location
    context: str  # Scope path at the point of occurrence


@dataclass
class Declaration:
    """A declared variable and every occurrence recorded against it."""
    name: str
    location: Location
    scope: str  # '::'-joined scope path, or 'global'
    references: List[Reference] = field(default_factory=list)
