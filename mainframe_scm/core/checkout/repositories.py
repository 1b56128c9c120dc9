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

"""Port interfaces (Protocols) for the checkout domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import List, Mapping, Optional, Protocol, TextIO

from .configurations import JobConfiguration
from .credentials import Credentials


class CredentialsRepository(Protocol):
    """Repository port for the external credentials store."""

    def find_by_id(self, credentials_id: str) -> Optional[Credentials]:
        """Retrieve credentials by identifier.

        Args:
            credentials_id: Unique credentials identifier.

        Returns:
            Credentials if found, None otherwise.
        """
        ...


class GlobalSettingsRepository(Protocol):
    """Repository port for process-wide checkout settings."""

    def cli_location(self, is_unix: bool) -> Optional[str]:
        """Return the CLI install directory for a node's OS.

        Args:
            is_unix: True for POSIX build nodes, False for Windows.

        Returns:
            Directory path, or None if not configured.
        """
        ...


class JobConfigurationRepository(Protocol):
    """Repository port for persisted job configurations."""

    def list_jobs(self) -> List[str]:
        """Return the names of all stored jobs."""
        ...

    def load(self, job_name: str) -> JobConfiguration:
        """Read a job configuration, including any legacy fields.

        Raises:
            JobConfigurationFormatError: If the stored form is unreadable.
        """
        ...

    def save(self, job_name: str, configuration: JobConfiguration) -> None:
        """Persist a job configuration. Legacy fields are never written.

        Raises:
            OSError: If the configuration cannot be written.
        """
        ...


class BuildNode(Protocol):
    """Port for the machine a checkout runs on.

    The node may run a different OS than the process orchestrating the
    build, so path separators and script names are resolved from it.
    """

    @property
    def is_unix(self) -> bool:
        """True for POSIX nodes."""
        ...

    @property
    def file_separator(self) -> str:
        """Path separator used by the node."""
        ...

    def read_text(self, path: str) -> Optional[str]:
        """Read a text file on the node; None if it does not exist."""
        ...

    def make_dirs(self, path: str) -> None:
        """Create a directory and its parents on the node."""
        ...

    def remove_tree(self, path: str) -> None:
        """Delete a directory tree on the node; missing paths are ignored."""
        ...

    def launch(
        self,
        args: List[str],
        env: Optional[Mapping[str, str]],
        cwd: str,
        stdout: TextIO,
    ) -> int:
        """Run a process to completion, streaming its output.

        Args:
            args: Program and arguments, passed without a shell.
            env: Environment for the process; None inherits.
            cwd: Working directory.
            stdout: Stream receiving the process output line by line.

        Returns:
            Process exit code.

        Raises:
            OSError: If the process cannot be started.
        """
        ...
