###########################################################################
###########################################################################
## A disjoint-set forest data structure and union-find algorithm.        ##
##                                                                       ##
## Copyright (C)  2022  Oliver Michael Kamperis                          ##
## Email: o.m.kamperis@gmail.com                                         ##
##                                                                       ##
## This program is free software: you can redistribute it and/or modify  ##
## it under the terms of the GNU General Public License as published by  ##
## the Free Software Foundation, either version 3 of the License, or     ##
## any later version.                                                    ##
##                                                                       ##
## This program is distributed in the hope that it will be useful,       ##
## but WITHOUT ANY WARRANTY; without even the implied warranty of        ##
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the          ##
## GNU General Public License for more details.                          ##
##                                                                       ##
## You should have received a copy of the GNU General Public License     ##
## along with this program. If not, see <https://www.gnu.org/licenses/>. ##
###########################################################################
###########################################################################

"""Module containing a disjoint-set forest data structure."""

import collections.abc
import logging
from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from ufgraph.errors import ElementNotFoundError, PreconditionError

__copyright__ = "Copyright (C) 2022 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "ForestDisjointSet",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


# Disjoint-set generic element type (must be hashable).
ST = TypeVar("ST", bound=Hashable)


class ForestDisjointSet(collections.abc.Mapping, Generic[ST]):
    """
    A disjoint-set forest, also called union-find.

    A disjoint-set forest partitions a universe of registered elements into
    disjoint sub-sets, such that any registered element is part of one, and
    only one, of the sub-sets. Each sub-set is stored as a rooted tree, whose
    root element is the representative of the sub-set.

    It provides two main operators;
    - unioning (merging) the disjoint sub-sets containing two elements,
    - and finding the representative of the sub-set containing an element,

    hence the alternative name; union-find.

    The trees are stored in an arena of tree-node records, addressed by dense
    integer handles, one handle per registered element. Each record holds the
    element, the handle of its parent (a root is its own parent), its rank (an
    upper bound on the height of the sub-tree rooted at it) and the size of
    the sub-tree rooted at it. The records are stored as parallel lists, so
    that re-parenting a node is a single list write.

    Both the path compression and union by rank heuristics are always
    applied, such that any sequence of m operations on n elements costs
    O(m α(n)) total time, where α is the inverse Ackermann function.

    Instances are not thread-safe.

    As a mapping, the disjoint-set maps each registered element to the current
    representative of the sub-set containing it.

    Example Usage
    -------------
    ```
    from ufgraph.datastructures.disjointset import ForestDisjointSet

    # Construct a disjoint-set with integer elements from an iterable,
    # it is initially fully-disjoint, such that no two elements are in
    # the same sub-set.
    >>> forest: ForestDisjointSet[int] = ForestDisjointSet(range(5))
    >>> forest
    ForestDisjointSet({0: {0}, 1: {1}, 2: {2}, 3: {3}, 4: {4}})

    # When the ranks of the two sub-sets are equal, the representative
    # of the second element's sub-set becomes the new representative.
    >>> forest.union(3, 4)
    4
    >>> forest.find_set(3)
    4
    >>> forest.is_connected(3, 4)
    True
    >>> forest.get_current_representatives()
    {0, 1, 2, 4}
    ```
    """

    __DISJOINT_SET_LOGGER = logging.getLogger("ForestDisjointSet")

    __slots__ = {
        "__handle_of": "Maps: element -> handle of its tree node record.",
        "__element_at": "Maps: handle -> element of the tree node record.",
        "__parent_of": "Maps: handle -> handle of the parent record.",
        "__rank_of": "Maps: handle -> rank of the tree node record.",
        "__size_of": "Maps: handle -> size of the sub-tree rooted there.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self,
        elements: Iterable[ST] | None = None, /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new disjoint-set forest.

        Parameters
        ----------
        `elements: Iterable[ST] | None = None` - An iterable of elements, each
        of which is registered as its own singleton sub-set. If not given or
        None, the disjoint-set is initially empty.

        `debug: bool = False` - Whether to log debug messages.

        Raises
        ------
        `PreconditionError` - If any of the given elements is None or the
        elements contain duplicates.
        """
        self.__handle_of: dict[ST, int] = {}
        self.__element_at: list[ST] = []
        self.__parent_of: list[int] = []
        self.__rank_of: list[int] = []
        self.__size_of: list[int] = []
        self.__debug: bool = debug

        if elements is not None:
            for element in elements:
                self.make_set(element)

    def __str__(self) -> str:
        """
        Return string summary representation describing number of elements and
        disjoint sub-sets.
        """
        return (f"Disjoint-Set Forest: total elements = {len(self)}, "
                f"total disjoint sub-sets = {self.count_sets()}")

    def __repr__(self) -> str:
        """Return an instantiable string representation of the disjoint-set."""
        sets_ = {
            root: set(set_)
            for root, set_ in self.find_all_sets(compress=False).items()
        }
        return f"{self.__class__.__name__}({sets_!r})"

    def __getitem__(self, element: ST, /) -> ST:
        """
        Get the representative of the sub-set containing the given element.

        Raises
        ------
        `ElementNotFoundError` - If the element is not registered.
        """
        return self.__element_at[self.__find_root(self.__get_handle(element))]

    def __contains__(self, element: object, /) -> bool:
        """Whether an element is registered in the disjoint-set."""
        return element in self.__handle_of

    def __iter__(self) -> Iterator[ST]:
        """Iterate over all registered elements in registration order."""
        yield from self.__handle_of

    def __len__(self) -> int:
        """Get the number of registered elements."""
        return len(self.__handle_of)

    def __get_handle(self, element: ST | None) -> int:
        """
        Get the handle of the tree node record of a registered element.

        Raises `PreconditionError` if the element is None, and
        `ElementNotFoundError` if it is not registered.
        """
        if element is None:
            raise PreconditionError("The element must not be None.")
        handle: int | None = self.__handle_of.get(element)
        if handle is None:
            raise ElementNotFoundError(
                f"The element {element!r} is not in the disjoint-set {self!s}."
            )
        return handle

    def __find_root(self, handle: int, /, compress: bool = True) -> int:
        """
        Find the handle of the root of the tree containing the given handle.

        The root is found by an iterative search up the tree, and if
        compression is enabled, the path is then fully compressed by a
        separate loop, such that every node visited on the path has its
        parent set to the root.
        """
        # A node is a root if its parent is itself.
        parent_of: list[int] = self.__parent_of
        root: int = handle
        while (parent := parent_of[root]) != root:
            root = parent

        # Compression performed by a seperate loop,
        # achieves maximum possible level of compression.
        if compress:
            while (parent := parent_of[handle]) != root:
                parent_of[handle] = root
                handle = parent

        return root

    def is_present(self, element: ST | None, /) -> bool:
        """
        Whether the given element is registered in the disjoint-set.

        Unlike `find_set`, this never raises, and returns False for None.
        """
        return element is not None and element in self.__handle_of

    def make_set(self, element: ST, /) -> None:
        """
        Register the given element as a new singleton sub-set.

        The new tree node record has rank zero, size one, and is its own
        parent.

        Raises
        ------
        `PreconditionError` - If the element is None or already registered.
        """
        if element is None:
            raise PreconditionError("The element must not be None.")
        if element in self.__handle_of:
            raise PreconditionError(
                f"The element {element!r} is already in a disjoint sub-set."
            )
        handle: int = len(self.__element_at)
        self.__handle_of[element] = handle
        self.__element_at.append(element)
        self.__parent_of.append(handle)
        self.__rank_of.append(0)
        self.__size_of.append(1)

    def find_set(self, element: ST, /) -> Optional[ST]:
        """
        Find the representative of the sub-set containing the given element.

        The path from the element to the root of its tree is fully compressed,
        such that future look-ups on the same path are constant time.

        Parameters
        ----------
        `element: ST@ForestDisjointSet` - The element whose representative to
        find.

        Returns
        -------
        `ST@ForestDisjointSet | None` - The representative of the sub-set
        containing the given element, or None if the element is not
        registered.

        Raises
        ------
        `PreconditionError` - If the element is None.
        """
        if element is None:
            raise PreconditionError("The element must not be None.")
        handle: int | None = self.__handle_of.get(element)
        if handle is None:
            return None
        return self.__element_at[self.__find_root(handle)]

    def find_path(self, element: ST, /) -> list[ST]:
        """
        Find the current path from the given element to the representative of
        its sub-set, without compressing it.

        The list will contain only the given element if and only if the given
        element is the representative of its own sub-set.
        """
        handle: int = self.__get_handle(element)
        path: list[ST] = [element]
        parent_of: list[int] = self.__parent_of
        while (parent := parent_of[handle]) != handle:
            path.append(self.__element_at[parent])
            handle = parent
        return path

    def union(self, element_1: ST, element_2: ST, /) -> ST:
        """
        Union the sub-sets containing the given elements together,
        using the union-by-rank algorithm.

        The root with the strictly greater rank becomes the parent of the
        other root. If the ranks are equal, the root of the sub-set containing
        the second element becomes the parent, and its rank is incremented.
        In either case, the size of the absorbed tree is added to the size of
        the new root.

        Parameters
        ----------
        `element_1: ST@ForestDisjointSet` - Any registered element.

        `element_2: ST@ForestDisjointSet` - Any registered element.

        Returns
        -------
        `ST@ForestDisjointSet` - The representative of the combined sub-set.

        Raises
        ------
        `PreconditionError` - If either element is None.

        `ElementNotFoundError` - If either element is not registered.
        """
        handle_1: int = self.__get_handle(element_1)
        handle_2: int = self.__get_handle(element_2)
        root_1: int = self.__find_root(handle_1)
        root_2: int = self.__find_root(handle_2)
        if root_1 == root_2:
            return self.__element_at[root_1]

        # Union by rank - Always union the shorter tree into the taller tree,
        # root_1 is always the root that is unioned onto root_2. Ties keep
        # root_2 as the parent.
        rank_of: list[int] = self.__rank_of
        if rank_of[root_1] > rank_of[root_2]:
            root_1, root_2 = root_2, root_1
        self.__parent_of[root_1] = root_2
        self.__size_of[root_2] += self.__size_of[root_1]

        # If the ranks were the same, the tree unioned onto has grown.
        if rank_of[root_1] == rank_of[root_2]:
            rank_of[root_2] += 1

        if self.__debug:
            self.__DISJOINT_SET_LOGGER.debug(
                "Unioned sub-set of %r onto sub-set of %r: "
                "representative = %r, rank = %d, size = %d.",
                self.__element_at[root_1], self.__element_at[root_2],
                self.__element_at[root_2], rank_of[root_2],
                self.__size_of[root_2]
            )

        return self.__element_at[root_2]

    def is_connected(self, element_1: ST, /, *elements: ST) -> bool:
        """
        Determine whether the elements are all in the same disjoint sub-set.

        Raises
        ------
        `ElementNotFoundError` - If any of the elements is not registered.
        """
        root_1: int = self.__find_root(self.__get_handle(element_1))
        return all(
            root_1 == self.__find_root(self.__get_handle(element))
            for element in elements
        )

    def get_rank(self, element: ST, /) -> int:
        """Get the rank of the tree node record of the given element."""
        return self.__rank_of[self.__get_handle(element)]

    def get_set_size(self, element: ST, /) -> int:
        """
        Get the number of elements in the sub-set containing the given
        element in constant amortised time.
        """
        return self.__size_of[self.__find_root(self.__get_handle(element))]

    def count_sets(self) -> int:
        """Get the number of disjoint sub-sets."""
        return sum(
            1 for handle, parent in enumerate(self.__parent_of)
            if handle == parent
        )

    def get_current_representatives(self) -> set[ST]:
        """
        Get the representatives of all current disjoint sub-sets.

        These are exactly the elements whose tree node record is a root.
        """
        element_at: list[ST] = self.__element_at
        return {
            element_at[handle]
            for handle, parent in enumerate(self.__parent_of)
            if handle == parent
        }

    def get_current_elements_of_set_containing(self, element: ST, /) -> set[ST]:
        """
        Get all elements of the sub-set containing the given element.

        This requires scanning all registered elements, and is therefore
        linear time. Use `find_all_sets` if more than one sub-set is needed.

        Raises
        ------
        `ElementNotFoundError` - If the element is not registered.
        """
        root: int = self.__find_root(self.__get_handle(element))
        find_root = self.__find_root
        return {
            element_
            for handle, element_ in enumerate(self.__element_at)
            if find_root(handle) == root
        }

    def find_all_sets(self, compress: bool = True) -> dict[ST, frozenset[ST]]:
        """
        Find all distinct sub-sets in this disjoint-set.

        Parameters
        ----------
        `compress: bool = True` - Whether to compress all paths, from all
        elements, of all sets, to their respective roots.

        Returns
        -------
        `dict[ST@ForestDisjointSet, frozenset[ST@ForestDisjointSet]]` - A
        dictionary, whose keys are the representatives of each distinct
        sub-set, and the values are the sub-sets themselves.
        """
        # Find all disjoint sub-sets by finding the root of all
        # elements and then grouping elements with the same root.
        element_at: list[ST] = self.__element_at
        sets: dict[ST, set[ST]] = {}
        for handle, element in enumerate(element_at):
            root: int = self.__find_root(handle, compress)
            sets.setdefault(element_at[root], set()).add(element)
        return {root: frozenset(set_) for root, set_ in sets.items()}

    def clear(self) -> None:
        """
        Unregister all elements.

        All elements must be registered again with `make_set` before use.
        """
        if self.__debug:
            self.__DISJOINT_SET_LOGGER.debug(
                "Clearing disjoint-set forest of %d elements.", len(self)
            )
        self.__handle_of.clear()
        self.__element_at.clear()
        self.__parent_of.clear()
        self.__rank_of.clear()
        self.__size_of.clear()
