"""Runtime type identifiers with an explicit inheritance table."""

from __future__ import annotations


class TypeIds:
    """Hands out a stable integer per class and records base-class links."""

    def __init__(self) -> None:
        self._ids: dict[type, int] = {}
        self._next_id = 0
        self._bases: dict[int, set[int]] = {}

    def get_id(self, cls: type) -> int:
        """Return the id of ``cls``, assigning the next free one on first use."""
        type_id = self._ids.get(cls)
        if type_id is None:
            type_id = self._next_id
            self._next_id += 1
            self._ids[cls] = type_id
        return type_id

    def register_base_class(self, derived: type, base: type) -> None:
        """Record that ``derived`` inherits from ``base``."""
        derived_id = self.get_id(derived)
        base_id = self.get_id(base)
        self._bases.setdefault(derived_id, set()).add(base_id)

    def is_base_of(self, child_id: int, parent_id: int) -> bool:
        """Tell whether ``parent_id`` is ``child_id`` or one of its registered ancestors."""
        pending = [child_id]
        visited: set[int] = set()
        while pending:
            current = pending.pop()
            if current == parent_id:
                return True
            if current in visited:
                continue
            visited.add(current)
            pending.extend(self._bases.get(current, ()))
        return False

    def name_of(self, cls: type) -> str:
        """Return a readable name for ``cls``."""
        return cls.__qualname__


TYPE_IDS = TypeIds()