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

"""Value objects for the checkout domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional


class ScmType(str, Enum):
    """Source-control flavors understood by the downloader CLI.

    The value is passed verbatim as the ``-scm`` argument.
    """

    PDS = "pds"
    ENDEVOR = "endevor"
    ISPW = "ispw"
    ISPW_CONTAINER = "ispwc"


@dataclass(frozen=True)
class CliVersion:
    """Dotted numeric version of the downloader CLI, e.g. ``19.4.1``.

    Attributes:
        value: Version string as found in the CLI directory.

    Raises:
        ValueError: If value is not a dotted numeric version.
    """

    value: str

    VERSION_PATTERN: ClassVar[str] = r'^\d+(\.\d+)*$'

    def __post_init__(self) -> None:
        """Validate the dotted numeric format."""
        if not re.match(self.VERSION_PATTERN, self.value):
            raise ValueError(f"Invalid CLI version format: {self.value}")

    @property
    def parts(self) -> tuple:
        """Numeric components, trailing zeros dropped so 19.4 == 19.4.0."""
        numbers = [int(part) for part in self.value.split(".")]
        while len(numbers) > 1 and numbers[-1] == 0:
            numbers.pop()
        return tuple(numbers)

    def at_least(self, minimum: "CliVersion") -> bool:
        """Check whether this version satisfies a minimum."""
        return self.parts >= minimum.parts

    @staticmethod
    def parse(text: Optional[str]) -> Optional["CliVersion"]:
        """Parse the first non-blank line of a version file.

        Returns:
            CliVersion, or None if the text holds no valid version.
        """
        if text is None:
            return None
        for line in text.splitlines():
            candidate = line.strip()
            if candidate:
                try:
                    return CliVersion(candidate)
                except ValueError:
                    return None
        return None

    def __str__(self) -> str:
        """Return string representation."""
        return self.value
