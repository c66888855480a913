"""Constant values used in the application."""

# application name
APP_NAME = "editpad"

# application author
APP_AUTHOR = "editpad"

# default window title when no document is open
UNTITLED_DOCUMENT = "Untitled"

# default encoding for reading and writing documents
DEFAULT_ENCODING = "UTF-8"

# wildcard used by the open and save file dialogs
FILE_DIALOG_WILDCARD = "Text files (*.txt)|*.txt|All files (*.*)|*.*"

# seconds to wait for a pending search when the application exits
SEARCH_JOIN_TIMEOUT = 1.0
