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

"""Process settings read from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_HOME = "~/.mainframe-scm"


@dataclass(frozen=True)
class Settings:
    """File locations for the global configuration stores.

    Attributes:
        home: Root directory for every store below.
        global_config_file: YAML file holding the CLI locations.
        connections_file: YAML file holding the host connection registry.
        credentials_file: YAML file holding login credentials.
        jobs_dir: Directory with one ``<job>/config.yaml`` per job.
    """

    home: Path
    global_config_file: Path
    connections_file: Path
    credentials_file: Path
    jobs_dir: Path


def _path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).expanduser() if value else default


def load_settings() -> Settings:
    """Build settings from ``MAINFRAME_SCM_*`` environment variables."""
    home = _path("MAINFRAME_SCM_HOME", Path(DEFAULT_HOME).expanduser())
    return Settings(
        home=home,
        global_config_file=_path("MAINFRAME_SCM_GLOBAL_CONFIG", home / "global.yaml"),
        connections_file=_path("MAINFRAME_SCM_CONNECTIONS_FILE", home / "connections.yaml"),
        credentials_file=_path("MAINFRAME_SCM_CREDENTIALS_FILE", home / "credentials.yaml"),
        jobs_dir=_path("MAINFRAME_SCM_JOBS_DIR", home / "jobs"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return load_settings()
