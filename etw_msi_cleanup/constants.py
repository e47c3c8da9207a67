import uuid

# Installer identifiers targeted for removal
MASTER_UPGRADE_CODE = uuid.UUID('25CB994F-CDCF-421B-9156-76528AAFC0E1')
SERVICE_OLD_COMPONENT = uuid.UUID('1D4FAF23-64A9-4B77-AACE-1AB92385D09C')

# Packed (registry key name) forms the identifiers above must encode to
MASTER_UPGRADE_CODE_PACKED = 'F499BC52FCDCB12419656725A8FA0C1E'
SERVICE_OLD_COMPONENT_PACKED = '32FAF4D19A4677B4AAECA19B32580DC9'

# Component values containing this are service leftovers
COMPONENT_MARKER = 'ETW Host'

# Product labels: prefix matches and exact matches
PRODUCT_PREFIXES = ('JetBrains ETW Host Service',)
PRODUCT_EXACTS = ('JetBrains ETW Service',)

# Registry locations under HKEY_LOCAL_MACHINE
INSTALLER_PATH = r'SOFTWARE\Microsoft\Windows\CurrentVersion\Installer'
CLASSES_INSTALLER_PATH = r'SOFTWARE\Classes\Installer'

USER_DATA_KEY = 'UserData'
UPGRADE_CODES_KEY = 'UpgradeCodes'
COMPONENTS_KEY = 'Components'
PRODUCTS_KEY = 'Products'
INSTALL_PROPERTIES_KEY = 'InstallProperties'

DISPLAY_NAME_VALUE = 'DisplayName'
PRODUCT_NAME_VALUE = 'ProductName'

TOOL_NAME = 'ETW Host Service MSI CleanUp Tool'
