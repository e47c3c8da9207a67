"""
Base abstract class for the hierarchical store the cleanup works on

Concrete stores hand out opaque node handles.  The cleanup code never
keeps a handle longer than one inspection or deletion; the root() and
child() context managers make sure every handle is closed on all exit
paths.
"""

import abc
import contextlib

from etw_msi_cleanup.exceptions import StoreError


class Store(metaclass=abc.ABCMeta):
    """
    Narrow interface over a tree of named nodes, each holding named
    child nodes and named scalar values
    """

    @abc.abstractmethod
    def open_root(self, path, writable=False):
        """Open a well-known location, returning None if it's absent"""

    @abc.abstractmethod
    def open_child(self, node, name, writable=False):
        """Open an immediate child of a node, returning None if absent"""

    @abc.abstractmethod
    def list_children(self, node):
        """Return a snapshot list of the names of a node's children"""

    @abc.abstractmethod
    def get_value_names(self, node):
        """Return the names of the values stored directly on a node"""

    @abc.abstractmethod
    def get_value(self, node, name):
        """Return a named value of a node, or None if it's absent"""

    @abc.abstractmethod
    def delete_subtree(self, node, name):
        """
        Delete a child and everything beneath it; raises OSError if
        the deletion fails
        """

    @abc.abstractmethod
    def close(self, node):
        """Release a node handle"""

    @contextlib.contextmanager
    def root(self, path, writable=False, required=False):
        """
        Scoped open of a well-known location; yields None for an absent
        optional location, raises StoreError for an absent required one
        """

        node = self.open_root(path, writable)

        with self._scoped(node, path, required):
            yield node

    @contextlib.contextmanager
    def child(self, node, name, writable=False, required=False):
        """Scoped open of a child node, with the same rules as root()"""

        sub_node = self.open_child(node, name, writable)

        with self._scoped(sub_node, name, required):
            yield sub_node

    @contextlib.contextmanager
    def _scoped(self, node, name, required):
        if node is None:
            if required:
                raise StoreError(f'Unable to open required location {name}')

            yield
            return

        try:
            yield
        finally:
            self.close(node)
