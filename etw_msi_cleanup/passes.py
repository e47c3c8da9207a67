"""
Cleanup passes over the Windows Installer registry tables

The machine-wide Installer key holds the UpgradeCodes table and, under
UserData, a Components and Products table per user identity (SID).
The Classes\\Installer key holds a second UpgradeCodes table and the
advertised Products table.  Each pass opens its table writable, prints
a header and hands the table to clean_if() with the right predicate.
Tables that don't exist are skipped silently.
"""

import logging

from etw_msi_cleanup import constants, predicates
from etw_msi_cleanup.cleaner import clean_if
from etw_msi_cleanup.logs import pad
from etw_msi_cleanup.packed_guid import encode


logger = logging.getLogger('etw_msi_cleanup')

# Computed once; the self-check guarantees these match the constants
MASTER_UPGRADE_CODE = encode(constants.MASTER_UPGRADE_CODE)
SERVICE_OLD_COMPONENT = encode(constants.SERVICE_OLD_COMPONENT)


def _clean_table(store, key, table, header, predicate, depth):
    with store.child(key, table, writable=True) as table_key:
        if table_key is None:
            logger.debug(f'{pad(depth)}({table} not present, skipping)')
            return []

        logger.info(f'{pad(depth)}{header}:')
        deleted = clean_if(store, table_key, predicate, depth + 1)

    logger.debug(f'{pad(depth)}({len(deleted)} deleted from {header})')
    return deleted


def clean_upgrade_codes(store, key, depth):
    return _clean_table(
        store, key, constants.UPGRADE_CODES_KEY, 'UpgradeCodes',
        predicates.name_equals(MASTER_UPGRADE_CODE), depth
    )


def clean_components(store, key, depth):
    return _clean_table(
        store, key, constants.COMPONENTS_KEY, 'Components',
        predicates.any_of(
            predicates.name_equals(SERVICE_OLD_COMPONENT),
            predicates.any_value_contains(constants.COMPONENT_MARKER)
        ),
        depth
    )


def clean_products(store, key, depth):
    return _clean_table(
        store, key, constants.PRODUCTS_KEY, 'Products',
        predicates.display_name_matches(), depth
    )


def clean_class_products(store, key, depth):
    return _clean_table(
        store, key, constants.PRODUCTS_KEY, 'ClassProducts',
        predicates.product_name_matches(), depth
    )


def clean_installer(store):
    """Machine-wide UpgradeCodes, then per-user Components and Products"""

    deleted = list()

    logger.info(f'{constants.INSTALLER_PATH}:')

    with store.root(constants.INSTALLER_PATH, required=True) as installer:
        deleted.extend(clean_upgrade_codes(store, installer, 1))

        with store.child(installer, constants.USER_DATA_KEY,
                         required=True) as user_data:
            for sid in store.list_children(user_data):
                logger.info(f'{pad(1)}{sid}:')

                with store.child(user_data, sid, required=True) as user:
                    deleted.extend(clean_components(store, user, 2))
                    deleted.extend(clean_products(store, user, 2))

    return deleted


def clean_classes_installer(store):
    """Classes UpgradeCodes, then the advertised class products"""

    deleted = list()

    logger.info(f'{constants.CLASSES_INSTALLER_PATH}:')

    with store.root(constants.CLASSES_INSTALLER_PATH,
                    required=True) as installer:
        deleted.extend(clean_upgrade_codes(store, installer, 1))
        deleted.extend(clean_class_products(store, installer, 1))

    return deleted


def clean_all(store):
    """Run every pass in order, returning all deleted key names"""

    return clean_installer(store) + clean_classes_installer(store)
