"""
Predicates deciding whether a child node should be deleted

Each factory returns a callable taking (store, node, name), where node
is the opened child and name its key name.  Predicates only read from
the store.  Absent values or sub-keys make a predicate false, never
an error.
"""

from etw_msi_cleanup import constants


def label_matches(value, prefixes, exacts):
    """True if value is a string starting with a prefix or equal to an exact label"""

    if not isinstance(value, str):
        return False

    return value.startswith(tuple(prefixes)) or value in exacts


def name_equals(target):
    def predicate(store, node, name):
        return name == target

    return predicate


def any_value_contains(marker):
    """Match nodes with a string value directly on them containing marker"""

    def predicate(store, node, name):
        for value_name in store.get_value_names(node):
            value = store.get_value(node, value_name)

            if isinstance(value, str) and marker in value:
                return True

        return False

    return predicate


def display_name_matches(prefixes=constants.PRODUCT_PREFIXES,
                         exacts=constants.PRODUCT_EXACTS):
    """
    Match products whose InstallProperties sub-key carries a DisplayName
    with one of the given labels; the product key name itself says
    nothing about the product
    """

    def predicate(store, node, name):
        with store.child(node, constants.INSTALL_PROPERTIES_KEY) as props:
            if props is None:
                return False

            value = store.get_value(props, constants.DISPLAY_NAME_VALUE)

        return label_matches(value, prefixes, exacts)

    return predicate


def product_name_matches(prefixes=constants.PRODUCT_PREFIXES,
                         exacts=constants.PRODUCT_EXACTS):
    """Match class products by their own ProductName value"""

    def predicate(store, node, name):
        value = store.get_value(node, constants.PRODUCT_NAME_VALUE)
        return label_matches(value, prefixes, exacts)

    return predicate


def any_of(*predicates):
    """Combine predicates; evaluation stops at the first match"""

    def predicate(store, node, name):
        return any(p(store, node, name) for p in predicates)

    return predicate
