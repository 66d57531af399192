# Constants shared by the command handlers

# Fixed identity of the simulated machine
HOME_PATH = "/home/user"
DEFAULT_USER = "user"
DEFAULT_GROUP = "user"
HOSTNAME = "unix-course"

# Paths that rm refuses to remove regardless of flags
PROTECTED_PATHS = frozenset({"/", "/home", "/home/user", "/etc", "/var"})

# Display defaults for nodes without explicit metadata
DEFAULT_DIR_PERMISSIONS = "drwxr-xr-x"
DEFAULT_FILE_PERMISSIONS = "-rw-r--r--"
DIRECTORY_SIZE = 4096
LONG_FORMAT_DATE = "Jan 31 10:00"

# Defaults for head/tail
DEFAULT_LINE_COUNT = 10

# Lesson navigation range (inclusive)
MIN_LESSON = 0
MAX_LESSON = 5

# History entries kept when persisting
MAX_HISTORY_ENTRIES = 500

LINE_SEPARATOR = "\r\n"
