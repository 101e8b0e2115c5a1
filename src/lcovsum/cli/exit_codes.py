# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_THRESHOLD = 1  # A --fail-under-* threshold was not met (click uses 2 for usage errors)
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed LCOV record)
EXIT_NOINPUT = 66  # Input file could not be opened
EXIT_IOERR = 74  # Input stream failed while reading
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml)
