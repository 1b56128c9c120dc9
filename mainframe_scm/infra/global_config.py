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

"""Global checkout configuration: where the downloader CLI is installed."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class GlobalConfiguration:
    """CLI install directories per build-node OS.

    Attributes:
        cli_location_windows: CLI directory on Windows nodes.
        cli_location_linux: CLI directory on POSIX nodes.
    """

    cli_location_windows: Optional[str] = None
    cli_location_linux: Optional[str] = None

    def cli_location(self, is_unix: bool) -> Optional[str]:
        return self.cli_location_linux if is_unix else self.cli_location_windows

    @staticmethod
    def load(path: Path) -> "GlobalConfiguration":
        """Read the configuration; a missing file yields an empty one.

        Raises:
            yaml.YAMLError: If the file is not valid YAML.
        """
        if not path.exists():
            logger.warning("Global configuration %s not found; CLI locations unset", path)
            return GlobalConfiguration()
        with path.open("r", encoding="utf-8") as stream:
            data = yaml.safe_load(stream) or {}
        return GlobalConfiguration(
            cli_location_windows=data.get("cli_location_windows"),
            cli_location_linux=data.get("cli_location_linux"),
        )
