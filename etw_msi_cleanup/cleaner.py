import logging

from etw_msi_cleanup.logs import pad


logger = logging.getLogger('etw_msi_cleanup')


def clean_if(store, node, predicate, depth=0):
    """
    Delete every immediate child of node for which predicate holds

    The child names are captured before anything is deleted.  Each
    child is opened read-only for evaluation and closed again before
    its subtree is removed from node, which must be writable.  Every
    deleted name is reported at the given depth.  Only one level is
    examined; nothing below a kept child is touched.

    Returns the deleted names in the order they were removed.
    """

    if node is None:
        raise ValueError('No node given to clean')

    if predicate is None:
        raise ValueError('No predicate given to clean with')

    deleted = list()

    for name in store.list_children(node):
        with store.child(node, name, required=True) as sub_node:
            to_delete = predicate(store, sub_node, name)

        if to_delete:
            store.delete_subtree(node, name)
            logger.info(f'{pad(depth)}{name}')
            deleted.append(name)

    return deleted
