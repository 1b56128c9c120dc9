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

"""Per-job checkout configurations.

A job's configuration is one of four flavors. Each flavor carries only its
own fields; shared checks live in ``validation`` and operate on the common
``ConnectedConfiguration`` protocol.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Protocol, Union

from .value_objects import ScmType

TRUE = "true"
FALSE = "false"


def trim_to_empty(value: Optional[str]) -> str:
    """Return the stripped value, or an empty string for None."""
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class LegacyConnectionInfo:
    """Inline connection fields written by pre-2.0 job configurations.

    Only read to drive the one-time migration into the connection
    registry; never persisted again.

    Attributes:
        host_port: Legacy ``hostPort`` value.
        code_page: Legacy ``codePage`` value.
    """

    host_port: Optional[str] = None
    code_page: Optional[str] = None

    def is_complete(self) -> bool:
        """Both legacy fields are present."""
        return self.host_port is not None and self.code_page is not None


class ConnectedConfiguration(Protocol):
    """Fields every flavor shares."""

    scm_type: ClassVar[ScmType]
    connection_id: str
    credentials_id: str
    target_folder: str
    legacy: Optional[LegacyConnectionInfo]
    migrated: bool


@dataclass
class PdsConfiguration:
    """Check out members of partitioned datasets."""

    scm_type: ClassVar[ScmType] = ScmType.PDS

    connection_id: str = ""
    credentials_id: str = ""
    filter_pattern: str = ""
    file_extension: str = ""
    target_folder: str = ""
    legacy: Optional[LegacyConnectionInfo] = field(default=None, compare=False)
    migrated: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        self.connection_id = trim_to_empty(self.connection_id)
        self.credentials_id = trim_to_empty(self.credentials_id)
        self.filter_pattern = trim_to_empty(self.filter_pattern)
        self.file_extension = trim_to_empty(self.file_extension)
        self.target_folder = trim_to_empty(self.target_folder)


@dataclass
class EndevorConfiguration:
    """Check out Endevor elements."""

    scm_type: ClassVar[ScmType] = ScmType.ENDEVOR

    connection_id: str = ""
    credentials_id: str = ""
    filter_pattern: str = ""
    file_extension: str = ""
    target_folder: str = ""
    legacy: Optional[LegacyConnectionInfo] = field(default=None, compare=False)
    migrated: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        self.connection_id = trim_to_empty(self.connection_id)
        self.credentials_id = trim_to_empty(self.credentials_id)
        self.filter_pattern = trim_to_empty(self.filter_pattern)
        self.file_extension = trim_to_empty(self.file_extension)
        self.target_folder = trim_to_empty(self.target_folder)


@dataclass
class IspwConfiguration:
    """Check out components from an ISPW stream/application/level.

    Attributes:
        server_config: Optional runtime configuration name.
        server_stream: Stream name.
        server_application: Application name.
        server_level: Level to download from.
        level_option: ``0`` selected level only, ``1`` first found at or above.
        component_type: Optional component type filter.
        folder_name: Optional folder name filter.
        download_all: Remove files not present on the host.
        download_includes: Also download include members.
        categorize_on_component_type: Lay out downloads by component type.
    """

    scm_type: ClassVar[ScmType] = ScmType.ISPW

    connection_id: str = ""
    credentials_id: str = ""
    server_config: str = ""
    server_stream: str = ""
    server_application: str = ""
    server_level: str = ""
    level_option: str = ""
    component_type: str = ""
    folder_name: str = ""
    download_all: bool = False
    download_includes: bool = False
    categorize_on_component_type: bool = False
    target_folder: str = ""
    legacy: Optional[LegacyConnectionInfo] = field(default=None, compare=False)
    migrated: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        self.connection_id = trim_to_empty(self.connection_id)
        self.credentials_id = trim_to_empty(self.credentials_id)
        self.server_config = trim_to_empty(self.server_config)
        self.server_stream = trim_to_empty(self.server_stream)
        self.server_application = trim_to_empty(self.server_application)
        self.server_level = trim_to_empty(self.server_level)
        self.level_option = trim_to_empty(self.level_option)
        self.component_type = trim_to_empty(self.component_type)
        self.folder_name = trim_to_empty(self.folder_name)
        self.target_folder = trim_to_empty(self.target_folder)

    @property
    def filter_files(self) -> str:
        """``true`` when a component type filter is set."""
        return TRUE if self.component_type else FALSE

    @property
    def filter_folders(self) -> str:
        """``true`` when a folder name filter is set."""
        return TRUE if self.folder_name else FALSE


@dataclass
class IspwContainerConfiguration:
    """Check out the components of an ISPW container.

    Attributes:
        container_name: Assignment, release or set identifier.
        container_type: ``0`` assignment, ``1`` release, ``2`` set.
        server_level: Optional level filter.
        component_type: Optional component type filter.
        download_all: Remove files not present in the container.
    """

    scm_type: ClassVar[ScmType] = ScmType.ISPW_CONTAINER

    connection_id: str = ""
    credentials_id: str = ""
    server_config: str = ""
    container_name: str = ""
    container_type: str = ""
    server_level: str = ""
    component_type: str = ""
    download_all: bool = False
    target_folder: str = ""
    legacy: Optional[LegacyConnectionInfo] = field(default=None, compare=False)
    migrated: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        self.connection_id = trim_to_empty(self.connection_id)
        self.credentials_id = trim_to_empty(self.credentials_id)
        self.server_config = trim_to_empty(self.server_config)
        self.container_name = trim_to_empty(self.container_name)
        self.container_type = trim_to_empty(self.container_type)
        self.server_level = trim_to_empty(self.server_level)
        self.component_type = trim_to_empty(self.component_type)
        self.target_folder = trim_to_empty(self.target_folder)


JobConfiguration = Union[
    PdsConfiguration,
    EndevorConfiguration,
    IspwConfiguration,
    IspwContainerConfiguration,
]

CONFIGURATION_TYPES = {
    config_type.scm_type: config_type
    for config_type in (
        PdsConfiguration,
        EndevorConfiguration,
        IspwConfiguration,
        IspwContainerConfiguration,
    )
}
