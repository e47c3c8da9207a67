import copy

import pytest

from etw_msi_cleanup import constants
from etw_msi_cleanup.store import Store


class Node:
    """A key in the in-memory tree: named values plus named children"""

    def __init__(self, values=None, children=None):
        self.values = dict(values or {})
        self.children = dict(children or {})

    def as_dict(self):
        return {
            'values': dict(self.values),
            'children': {k: v.as_dict() for k, v in self.children.items()},
        }


class Handle:
    def __init__(self, node, name, writable):
        self.node = node
        self.name = name
        self.writable = writable
        self.closed = False


class MemoryStore(Store):
    """
    Store over a dict of root path -> Node, recording every handle so
    tests can check nothing is left open and nothing was touched
    """

    def __init__(self, roots=None):
        self.roots = dict(roots or {})
        self.handles = list()
        self.deleted = list()

    def _handle(self, node, name, writable):
        if node is None:
            return None

        handle = Handle(node, name, writable)
        self.handles.append(handle)
        return handle

    def _check(self, handle):
        assert not handle.closed, f'{handle.name} used after close'

    @property
    def open_handles(self):
        return [h for h in self.handles if not h.closed]

    def open_root(self, path, writable=False):
        return self._handle(self.roots.get(path), path, writable)

    def open_child(self, node, name, writable=False):
        self._check(node)
        return self._handle(node.node.children.get(name), name, writable)

    def list_children(self, node):
        self._check(node)
        return list(node.node.children)

    def get_value_names(self, node):
        self._check(node)
        return list(node.node.values)

    def get_value(self, node, name):
        self._check(node)
        return node.node.values.get(name)

    def delete_subtree(self, node, name):
        self._check(node)
        assert node.writable, f'{node.name} not opened writable'

        if name not in node.node.children:
            raise FileNotFoundError(name)

        child = node.node.children[name]
        assert not any(h.node is child for h in self.open_handles), \
            f'{name} deleted while still open'

        del node.node.children[name]
        self.deleted.append(name)

    def close(self, node):
        self._check(node)
        node.closed = True


def product(display_name):
    return Node(children={
        'InstallProperties': Node(values={'DisplayName': display_name}),
        'Features': Node(values={'Main': ''}),
    })


def build_registry():
    """
    A registry with the ETW Host Service leftovers mixed in with
    unrelated installations
    """

    installer = Node(children={
        'UpgradeCodes': Node(children={
            'F499BC52FCDCB12419656725A8FA0C1E': Node(
                values={'9A2D1F3B4C5D6E7F8091A2B3C4D5E6F7': ''}
            ),
            '00112233445566778899AABBCCDDEEFF': Node(
                values={'FFEEDDCCBBAA99887766554433221100': ''}
            ),
        }),
        'UserData': Node(children={
            'S-1-5-18': Node(children={
                'Components': Node(children={
                    '32FAF4D19A4677B4AAECA19B32580DC9': Node(
                        values={'ABCDEF': r'C:\Program Files\Old\svc.exe'}
                    ),
                    '11111111111111111111111111111111': Node(
                        values={'ABCDEF': 'Some Product (ETW Host) x64'}
                    ),
                    '22222222222222222222222222222222': Node(
                        values={'ABCDEF': r'C:\Program Files\Other\a.dll',
                                'Count': 3}
                    ),
                }),
                'Products': Node(children={
                    'AAAA0000AAAA0000AAAA0000AAAA0000': product(
                        'JetBrains ETW Service'),
                    'BBBB0000BBBB0000BBBB0000BBBB0000': product(
                        'JetBrains ETW Host Service 2.0'),
                    'CCCC0000CCCC0000CCCC0000CCCC0000': product(
                        'Other JetBrains ETW Host Service'),
                }),
            }),
            'S-1-5-21-1000': Node(children={
                'Products': Node(children={
                    'DDDD0000DDDD0000DDDD0000DDDD0000': product(
                        'JetBrains ETW Host Service (x64)'),
                    'EEEE0000EEEE0000EEEE0000EEEE0000': Node(),
                }),
            }),
        }),
    })

    classes = Node(children={
        'UpgradeCodes': Node(children={
            'F499BC52FCDCB12419656725A8FA0C1E': Node(),
        }),
        'Products': Node(children={
            'AAAA0000AAAA0000AAAA0000AAAA0000': Node(
                values={'ProductName': 'JetBrains ETW Service'}),
            'FFFF0000FFFF0000FFFF0000FFFF0000': Node(
                values={'ProductName': 'Unrelated Tool'}),
        }),
    })

    return {
        constants.INSTALLER_PATH: installer,
        constants.CLASSES_INSTALLER_PATH: classes,
    }


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def store(registry):
    return MemoryStore(registry)


@pytest.fixture
def snapshot():
    """Deep copy of a node tree as plain dicts, for comparisons"""

    def take(node):
        return copy.deepcopy(node.as_dict())

    return take
