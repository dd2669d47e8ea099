"""Map file paths to runtime families."""

import os
from typing import Union

from ..errors import UnknownFileType
from .specs import FILE_EXTENSIONS
from .types import RuntimeFamily


def classify(path: Union[str, "os.PathLike[str]"]) -> RuntimeFamily:
    """Classify a file into a runtime family by its extension.

    Matching is an exact, case-sensitive suffix test on the path string.

    Args:
        path: Path of the script file

    Returns:
        The family whose extensions match the path

    Raises:
        UnknownFileType: If no known extension matches
    """
    path_str = os.fspath(path)

    for suffixes, family in FILE_EXTENSIONS:
        if path_str.endswith(suffixes):
            return family

    raise UnknownFileType(path_str)
