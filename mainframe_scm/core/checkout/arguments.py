# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Argument construction and escaping for the downloader CLI.

Arguments are handed to the process as a list, never through a shell
string. On Windows the CLI is a batch file which re-parses its arguments,
so values bound for a ``.bat`` target are quoted; POSIX targets receive
values unchanged.
"""

import ntpath
import posixpath
from typing import List, Optional, Set

DOUBLE_QUOTE = '"'
DOUBLE_QUOTE_ESCAPED = '""'

WINDOWS_INVALID_PATH_CHARS = '<>"|?*'


def convert_filter_pattern(filter_pattern: Optional[str]) -> Optional[str]:
    """Convert a multi-line dataset filter into a comma-delimited string.

    Runs of spaces, tabs and newlines become a single comma; leading and
    trailing whitespace is dropped.

    Args:
        filter_pattern: Filter text as entered by the user.

    Returns:
        Comma-delimited filters, or None for None input.

    Example:
        >>> convert_filter_pattern("\\n\\na.b.c\\n\\n\\nd.e.f\\n")
        'a.b.c,d.e.f'
    """
    if filter_pattern is None:
        return None
    return ",".join(filter_pattern.split())


def escape_for_script(value: Optional[str], is_shell: bool = False) -> Optional[str]:
    """Escape a value for the CLI launcher script.

    Embedded double quotes are doubled and the value wrapped in double
    quotes, unless the target is a POSIX shell script.

    Args:
        value: Argument value; None is returned unchanged.
        is_shell: True when the node runs the ``.sh`` launcher.

    Returns:
        Escaped value, or None for None input.
    """
    if value is None or is_shell:
        return value
    return DOUBLE_QUOTE + value.replace(DOUBLE_QUOTE, DOUBLE_QUOTE_ESCAPED) + DOUBLE_QUOTE


def resolve_path(path: str, base_directory: str, is_unix: bool) -> str:
    """Resolve a possibly relative path against a directory on the node.

    Args:
        path: Absolute or relative path.
        base_directory: Directory a relative path is resolved against.
        is_unix: Path conventions of the node.

    Returns:
        Normalized absolute path.
    """
    path_module = posixpath if is_unix else ntpath
    if path_module.isabs(path):
        return path_module.normpath(path)
    return path_module.normpath(path_module.join(base_directory, path))


def invalid_path_reason(path: str, is_unix: bool) -> Optional[str]:
    """Explain why a path name is invalid on the node, if it is.

    Returns:
        Reason text, or None if the path name is acceptable.
    """
    if "\0" in path:
        return "path contains a NUL character"
    if not is_unix:
        bad = sorted({char for char in path if char in WINDOWS_INVALID_PATH_CHARS})
        if bad:
            return f"path contains illegal characters: {''.join(bad)}"
    return None


class ArgumentList:
    """Ordered CLI arguments with masking for sensitive values."""

    MASK = "******"

    def __init__(self, program: Optional[str] = None) -> None:
        self._args: List[str] = []
        self._masked: Set[int] = set()
        if program is not None:
            self.add(program)

    def add(self, value: str, masked: bool = False) -> "ArgumentList":
        """Append a single argument."""
        if masked:
            self._masked.add(len(self._args))
        self._args.append(value)
        return self

    def add_pair(self, flag: str, value: Optional[str], masked: bool = False) -> "ArgumentList":
        """Append a required ``flag value`` pair; None becomes an empty value."""
        self.add(flag)
        return self.add("" if value is None else value, masked=masked)

    def to_list(self) -> List[str]:
        """Arguments as passed to the process."""
        return list(self._args)

    def to_masked_list(self) -> List[str]:
        """Arguments with sensitive values replaced, for logging."""
        return [
            self.MASK if index in self._masked else arg
            for index, arg in enumerate(self._args)
        ]

    def __len__(self) -> int:
        return len(self._args)

    def __str__(self) -> str:
        return " ".join(self.to_masked_list())
