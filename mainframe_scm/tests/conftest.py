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

"""Shared fixtures and in-memory fakes for checkout tests."""

import io
from collections import OrderedDict
from typing import Dict, List, Mapping, Optional, TextIO

import pytest

from mainframe_scm.core.checkout.configurations import (
    IspwConfiguration,
    IspwContainerConfiguration,
    PdsConfiguration,
)
from mainframe_scm.core.checkout.credentials import (
    CertificateCredentials,
    Credentials,
    UsernamePasswordCredentials,
)
from mainframe_scm.core.connections import HostConnection

CLI_LOCATION = "/opt/topaz/cli"
WORKSPACE = "/var/builds/payroll"
CONNECTION_ID = "7f1c2b9e-3a4d-4e5f-8a6b-1c2d3e4f5a6b"


class FakeConnectionRepository:
    """In-memory fake implementation of ConnectionRepository."""
    def __init__(self) -> None:
        """Initialize the fake repository."""
        self._connections: "OrderedDict[str, HostConnection]" = OrderedDict()
        self.add_calls = 0
        self.fail_adds = False

    def find_by_id(self, connection_id: str) -> Optional[HostConnection]:
        """Find a connection by its ID."""
        return self._connections.get(connection_id)

    def find_by_host_port_and_code_page(
        self,
        host_port: str,
        code_page: str
    ) -> Optional[HostConnection]:
        """Find a connection by endpoint."""
        for connection in self._connections.values():
            if connection.matches(host_port, code_page):
                return connection
        return None

    def add(self, connection: HostConnection) -> None:
        """Add a connection."""
        self.add_calls += 1
        if self.fail_adds:
            raise OSError("registry file is read-only")
        self._connections[connection.connection_id] = connection

    def list_all(self) -> List[HostConnection]:
        """List all connections in insertion order."""
        return list(self._connections.values())


class FakeCredentialsRepository:
    """In-memory fake implementation of CredentialsRepository."""
    def __init__(self) -> None:
        """Initialize the fake repository."""
        self._credentials: Dict[str, Credentials] = {}

    def add(self, credentials: Credentials) -> None:
        """Store credentials under their id."""
        self._credentials[credentials.credentials_id] = credentials

    def find_by_id(self, credentials_id: str) -> Optional[Credentials]:
        """Find credentials by id."""
        return self._credentials.get(credentials_id)


class FakeGlobalSettings:
    """Fake GlobalSettingsRepository with fixed CLI locations."""
    def __init__(
        self,
        linux: Optional[str] = CLI_LOCATION,
        windows: Optional[str] = "C:\\Topaz\\CLI",
    ) -> None:
        """Initialize the fake settings."""
        self.linux = linux
        self.windows = windows

    def cli_location(self, is_unix: bool) -> Optional[str]:
        """Return the CLI location for the node OS."""
        return self.linux if is_unix else self.windows


class FakeJobStore:
    """In-memory fake implementation of JobConfigurationRepository."""
    def __init__(self) -> None:
        """Initialize the fake store."""
        self.stored: Dict[str, object] = {}
        self.saved: Dict[str, object] = {}
        self.unreadable: Dict[str, Exception] = {}
        self.failing_saves: set = set()

    def list_jobs(self) -> List[str]:
        """List stored job names."""
        return sorted(set(self.stored) | set(self.unreadable))

    def load(self, job_name: str):
        """Load a stored configuration or raise its configured error."""
        if job_name in self.unreadable:
            raise self.unreadable[job_name]
        return self.stored[job_name]

    def save(self, job_name: str, configuration) -> None:
        """Record a save, failing for configured jobs."""
        if job_name in self.failing_saves:
            raise OSError(f"disk full while saving {job_name}")
        self.saved[job_name] = configuration


class SequenceIdGenerator:
    """Connection id generator producing predictable ids."""
    def __init__(self) -> None:
        """Initialize the generator."""
        self._counter = 0

    def generate(self) -> str:
        """Generate the next id."""
        self._counter += 1
        return f"connection-{self._counter:03d}"


class FakeBuildNode:
    """BuildNode fake recording launches instead of running processes."""
    def __init__(
        self,
        is_unix: bool = True,
        exit_code: int = 0,
        cli_version: Optional[str] = "20.1.1",
        output: str = "Downloading XDEVREG.XPED.COBOL(PAYROLL)\n",
    ) -> None:
        """Initialize the fake node."""
        self._is_unix = is_unix
        self.exit_code = exit_code
        self.output = output
        self.files: Dict[str, str] = {}
        self.created_dirs: List[str] = []
        self.removed_trees: List[str] = []
        self.launches: List[Dict[str, object]] = []
        if cli_version is not None:
            self.files[self._cli_path("VERSION")] = cli_version + "\n"

    def _cli_path(self, name: str) -> str:
        location = CLI_LOCATION if self._is_unix else "C:\\Topaz\\CLI"
        return location + self.file_separator + name

    @property
    def is_unix(self) -> bool:
        """True for POSIX nodes."""
        return self._is_unix

    @property
    def file_separator(self) -> str:
        """Path separator for the node."""
        return "/" if self._is_unix else "\\"

    def read_text(self, path: str) -> Optional[str]:
        """Read a fake file."""
        return self.files.get(path)

    def make_dirs(self, path: str) -> None:
        """Record directory creation."""
        self.created_dirs.append(path)

    def remove_tree(self, path: str) -> None:
        """Record tree removal."""
        self.removed_trees.append(path)

    def launch(
        self,
        args: List[str],
        env: Optional[Mapping[str, str]],
        cwd: str,
        stdout: TextIO,
    ) -> int:
        """Record the launch and write canned output."""
        self.launches.append({"args": list(args), "env": env, "cwd": cwd})
        stdout.write(self.output)
        return self.exit_code


@pytest.fixture
def connection() -> HostConnection:
    """Provide a plain host connection."""
    return HostConnection(
        connection_id=CONNECTION_ID,
        description="CW09 1047",
        host_port="cw09.example.com:30947",
        code_page="1047",
        timeout="5",
    )


@pytest.fixture
def registry(connection) -> FakeConnectionRepository:
    """Provide a registry holding the default connection."""
    repo = FakeConnectionRepository()
    repo.add(connection)
    repo.add_calls = 0
    return repo


@pytest.fixture
def empty_registry() -> FakeConnectionRepository:
    """Provide an empty registry."""
    return FakeConnectionRepository()


@pytest.fixture
def user_credentials() -> UsernamePasswordCredentials:
    """Provide username/password credentials."""
    return UsernamePasswordCredentials(
        credentials_id="mainframe-user",
        username="XDEVREG",
        password="s3cret",
    )


@pytest.fixture
def certificate_credentials() -> CertificateCredentials:
    """Provide certificate credentials."""
    return CertificateCredentials(
        credentials_id="mainframe-cert",
        certificate="MIICdzCCAeCgAwIBAgIJAL",
        password="keystore-pw",
        subject="CN=XDEVREG",
    )


@pytest.fixture
def credentials_repo(user_credentials, certificate_credentials) -> FakeCredentialsRepository:
    """Provide a credentials store with both credential kinds."""
    repo = FakeCredentialsRepository()
    repo.add(user_credentials)
    repo.add(certificate_credentials)
    return repo


@pytest.fixture
def global_settings() -> FakeGlobalSettings:
    """Provide settings with CLI locations for both OSes."""
    return FakeGlobalSettings()


@pytest.fixture
def unix_node() -> FakeBuildNode:
    """Provide a POSIX build node."""
    return FakeBuildNode(is_unix=True)


@pytest.fixture
def windows_node() -> FakeBuildNode:
    """Provide a Windows build node."""
    return FakeBuildNode(is_unix=False)


@pytest.fixture
def job_store() -> FakeJobStore:
    """Provide an empty fake job store."""
    return FakeJobStore()


@pytest.fixture
def id_generator() -> SequenceIdGenerator:
    """Provide a predictable connection id generator."""
    return SequenceIdGenerator()


@pytest.fixture
def build_log() -> io.StringIO:
    """Provide an in-memory build log."""
    return io.StringIO()


@pytest.fixture
def pds_config() -> PdsConfiguration:
    """Provide a complete PDS configuration."""
    return PdsConfiguration(
        connection_id=CONNECTION_ID,
        credentials_id="mainframe-user",
        filter_pattern="XDEVREG.XPED.COBOL\nXDEVREG.XPED.COPY",
        file_extension="cbl",
    )


@pytest.fixture
def ispw_config() -> IspwConfiguration:
    """Provide a complete ISPW repository configuration."""
    return IspwConfiguration(
        connection_id=CONNECTION_ID,
        credentials_id="mainframe-user",
        server_stream="PLAY",
        server_application="PLAY",
        server_level="DEV1",
        level_option="0",
    )


@pytest.fixture
def container_config() -> IspwContainerConfiguration:
    """Provide a complete ISPW container configuration."""
    return IspwContainerConfiguration(
        connection_id=CONNECTION_ID,
        credentials_id="mainframe-user",
        container_name="PLAY000123",
        container_type="0",
    )
