#!/usr/bin/env python3

"""
Program to remove stale Windows Installer registrations left behind by
the JetBrains ETW Host Service

It finds the service's upgrade code, components and products in the
Installer tables of HKEY_LOCAL_MACHINE and deletes those keys, echoing
each deleted key name as it goes.  Must be run from an elevated
administrator prompt.
"""

import argparse
import sys

from etw_msi_cleanup import constants, elevation, packed_guid, passes
from etw_msi_cleanup.exceptions import CleanupError, PreconditionError
from etw_msi_cleanup.logs import logger
from etw_msi_cleanup.version import __version__


def run(store=None):
    """
    Check preconditions, then run all cleanup passes against the given
    store (the registry when none is given).  Returns the exit code.
    """

    try:
        logger.info(f'{constants.TOOL_NAME} v{__version__}')

        if not elevation.is_admin():
            raise PreconditionError('Run under the elevated administrator.')

        packed_guid.self_check()

        if store is None:
            # Only importable on Windows
            from etw_msi_cleanup.registry import RegistryStore
            store = RegistryStore()

        deleted = passes.clean_all(store)
        logger.debug(f'{len(deleted)} key(s) deleted in total')
        logger.info('Done')
    except CleanupError as exc:
        logger.error(f'ERROR: {exc}')
        return 1
    except Exception as exc:
        logger.exception(f'ERROR: {exc}')
        return 1

    return 0


def main():
    """
    Parse the (empty) command line and run the cleanup against the
    local registry
    """

    parser = argparse.ArgumentParser(
        description='Remove JetBrains ETW Host Service leftovers from the '
                    'Windows Installer registry'
    )
    parser.parse_args()

    sys.exit(run())


if __name__ == '__main__':
    main()
