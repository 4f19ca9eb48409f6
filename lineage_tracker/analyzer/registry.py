"""Registry of declarations and the references recorded against them."""
from typing import Dict, ItemsView, Iterator, Optional

from .models import Declaration, Location, Reference


class LineageRegistry:
    """Store mapping each declared name to its Declaration.

    Keyed by name only: a later declaration with the same name replaces the
    earlier one and starts with an empty reference list, whatever scope
    either was declared in.

    Lifecycle: 'empty' until a traversal finishes, then 'populated'. There is
    no deletion; the only mutators are declare() and add_reference().
    """

    EMPTY = 'empty'
    POPULATED = 'populated'

    def __init__(self):
        """Initialize an empty registry."""
        self._declarations: Dict[str, Declaration] = {}
        self.state = self.EMPTY

    def declare(self, name: str, location: Location, scope: str) -> Declaration:
        """Insert a declaration, overwriting any existing one with this name.

        The replaced declaration's references are discarded and the new one
        moves to the end of the enumeration order.

        Args:
            name: Declared identifier text
            location: Location of the name token
            scope: Scope path of the declaration site

        Returns:
            The newly stored Declaration
        """
        declaration = Declaration(name=name, location=location, scope=scope)
        self._declarations.pop(name, None)
        self._declarations[name] = declaration
        return declaration

    def add_reference(self, name: str, location: Location, context: str) -> Optional[Reference]:
        """Append a reference to an existing declaration.

        Args:
            name: Identifier text of the occurrence
            location: Location of the occurrence
            context: Scope path at the occurrence

        Returns:
            The recorded Reference, or None if no declaration has this name
        """
        declaration = self._declarations.get(name)
        if declaration is None:
            return None

        reference = Reference(location=location, context=context)
        declaration.references.append(reference)
        return reference

    def mark_populated(self):
        """Record that a traversal completed successfully."""
        self.state = self.POPULATED

    @property
    def is_populated(self) -> bool:
        return self.state == self.POPULATED

    def get(self, name: str) -> Optional[Declaration]:
        return self._declarations.get(name)

    def items(self) -> ItemsView[str, Declaration]:
        return self._declarations.items()

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)
