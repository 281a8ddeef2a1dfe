"""
# Yapp: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

PREPROCESSOR_NAME = 'yapp-preprocessor'
UNSUPPORTED_RENDERER_NAME = 'not-supported'

SUPPORTED_MDBOOK_VERSIONS = '~=0.4.40'

CONFIG_FILE_NAMES = (
    'yapp.yaml',
    'yapp.yml',
    '.yapp.yaml',
)
