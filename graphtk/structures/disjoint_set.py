"""Disjoint-set (union-find) over arbitrary hashable elements.

Uses path compression in ``find`` and union by rank in ``union``. Elements
must be registered (through the constructor or ``add``) before use.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Set


class DisjointSet:
    """Partition of registered elements into disjoint sets.

    Example:
        >>> ds = DisjointSet([1, 2, 3, 4])
        >>> ds.union(1, 2)
        True
        >>> ds.connected(1, 2), ds.connected(1, 3)
        (True, False)
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: Hashable) -> bool:
        return element in self._parent

    def add(self, element: Hashable) -> bool:
        """Register ``element`` as a singleton set.

        Returns:
            True if the element was new, False if it was already registered.
        """
        if element in self._parent:
            return False
        self._parent[element] = element
        self._rank[element] = 0
        return True

    def find(self, element: Hashable) -> Hashable:
        """Return the representative of the set containing ``element``.

        Raises:
            KeyError: If ``element`` was never registered.
        """
        parent = self._parent
        if element not in parent:
            raise KeyError(f"Element '{element}' does not exist in the disjoint set.")

        root = element
        while parent[root] != root:
            root = parent[root]

        # Path compression
        while parent[element] != root:
            parent[element], element = root, parent[element]

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        The root of lower rank is attached under the root of higher rank. On a
        tie, ``a``'s root becomes the parent and its rank grows by one.

        Returns:
            True if two sets were merged, False if they were already one set.

        Raises:
            KeyError: If either element was never registered.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_b < rank_a:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Return True if ``a`` and ``b`` belong to the same set."""
        return self.find(a) == self.find(b)

    def components(self) -> List[Set[Hashable]]:
        """Return every set, in order of first registration of its members."""
        groups: Dict[Hashable, Set[Hashable]] = {}
        for element in self._parent:
            groups.setdefault(self.find(element), set()).add(element)
        return list(groups.values())
