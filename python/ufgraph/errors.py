###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""
Module for all graph and disjoint-set related errors.

Each error also derives from the built-in exception it specialises, so that
callers may catch either the library error or the usual built-in type.
Operations whose failure is an expected outcome of normal use (such as adding
a duplicate node, or removing an edge that is not in a graph) return False or
None instead of raising any of these errors.
"""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "UfGraphError",
    "PreconditionError",
    "ElementNotFoundError",
    "NodeNotFoundError",
    "NodeIndexError",
    "UnsupportedGraphOperationError",
    "EdgeWeightError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class UfGraphError(Exception):
    """Base class for all errors raised by graphs, forests and algorithms."""
    pass


class PreconditionError(UfGraphError, ValueError):
    """
    Raised when an argument violates the precondition of an operation.

    For example, passing None where a node or element is required, passing a
    directed graph or edge where an undirected one is required, or creating a
    set for an element that is already registered.
    """
    pass


class ElementNotFoundError(PreconditionError, KeyError):
    """Raised when an element is not registered in a disjoint-set forest."""

    def __str__(self) -> str:
        # KeyError quotes its message, which reads badly for sentences.
        return str(self.args[0]) if self.args else ""


class NodeNotFoundError(ElementNotFoundError):
    """Raised when a node or node label is not in a graph."""
    pass


class NodeIndexError(PreconditionError, IndexError):
    """Raised when a node position is outside the range of a graph."""
    pass


class UnsupportedGraphOperationError(UfGraphError, NotImplementedError):
    """
    Raised when a graph cannot answer a query because of its orientation,
    such as asking an undirected graph for the predecessors of a node.
    """
    pass


class EdgeWeightError(UfGraphError, ValueError):
    """
    Raised when an edge is unweighted or has a weight that is not a finite
    non-negative number, where such a weight is required.
    """
    pass
