"""Process exit codes for the pysequent CLI."""

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_NOT_PROVABLE = 2
