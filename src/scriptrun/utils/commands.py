"""Host executable lookup."""

import shutil


def is_command_available(command: str) -> bool:
    """Check if a command is available in PATH.

    Only looks the name up; the program is never executed.
    """
    return shutil.which(command) is not None
