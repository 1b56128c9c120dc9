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

"""Checkout parameter validation.

Every check echoes the accepted value to the build log and raises a
``ConfigurationError`` subclass on the first missing or invalid parameter,
so nothing is launched for an incomplete job.
"""

from dataclasses import dataclass
from typing import Callable, Dict, TextIO

from ..connections import ConnectionRepository, HostConnection
from ..exceptions import (
    ConfigurationError,
    ConnectionNotFoundError,
    CredentialsNotFoundError,
    InvalidTargetFolderError,
)
from . import constants
from .arguments import invalid_path_reason
from .configurations import (
    ConnectedConfiguration,
    EndevorConfiguration,
    IspwConfiguration,
    IspwContainerConfiguration,
    JobConfiguration,
    PdsConfiguration,
)
from .credentials import Credentials
from .repositories import CredentialsRepository, GlobalSettingsRepository


@dataclass(frozen=True)
class ValidatedCheckout:
    """Resolved collaborators for a configuration that passed validation.

    Attributes:
        connection: Host connection the job references.
        credentials: Login credentials the job references.
        cli_location: CLI install directory on the build node.
    """

    connection: HostConnection
    credentials: Credentials
    cli_location: str


def echo(build_log: TextIO, label: str, value: str) -> None:
    """Write a ``label = value`` line to the build log."""
    build_log.write(f"{label} = {value}\n")


def require(value: str, label: str, build_log: TextIO) -> str:
    """Check that a required field is non-empty.

    Raises:
        ConfigurationError: If the value is empty.
    """
    if not value:
        raise ConfigurationError(label)
    echo(build_log, label, value)
    return value


def validate_connection(
    configuration: ConnectedConfiguration,
    registry: ConnectionRepository,
    build_log: TextIO,
) -> HostConnection:
    """Resolve the job's host connection.

    Raises:
        ConnectionNotFoundError: If the id is empty or unknown.
    """
    connection = None
    if configuration.connection_id:
        connection = registry.find_by_id(configuration.connection_id)
    if connection is None:
        raise ConnectionNotFoundError(configuration.connection_id)
    echo(build_log, constants.LABEL_HOST_CONNECTION, connection.host_port)
    return connection


def validate_credentials(
    configuration: ConnectedConfiguration,
    credentials_repo: CredentialsRepository,
    build_log: TextIO,
) -> Credentials:
    """Resolve the job's login credentials.

    Raises:
        CredentialsNotFoundError: If the id is empty or unknown.
    """
    credentials = None
    if configuration.credentials_id:
        credentials = credentials_repo.find_by_id(configuration.credentials_id)
    if credentials is None:
        raise CredentialsNotFoundError(configuration.credentials_id)
    echo(build_log, constants.LABEL_USERNAME, credentials.display_user)
    return credentials


def validate_target_folder(target_folder: str, is_unix: bool, build_log: TextIO) -> None:
    """Check the optional source download location is a valid path name.

    Raises:
        InvalidTargetFolderError: If the path name is invalid on the node.
    """
    if not target_folder:
        return
    echo(build_log, constants.LABEL_TARGET_FOLDER, target_folder)
    reason = invalid_path_reason(target_folder, is_unix)
    if reason is not None:
        raise InvalidTargetFolderError(target_folder, reason)


def validate_cli_location(
    settings: GlobalSettingsRepository,
    is_unix: bool,
    build_log: TextIO,
) -> str:
    """Resolve the CLI install directory for the node's OS.

    Raises:
        ConfigurationError: If no location is configured.
    """
    location = settings.cli_location(is_unix)
    return require((location or "").strip(), constants.LABEL_CLI_LOCATION, build_log)


def _validate_dataset_filters(configuration, build_log: TextIO) -> None:
    require(configuration.filter_pattern, constants.LABEL_FILTER_PATTERN, build_log)
    require(configuration.file_extension, constants.LABEL_FILE_EXTENSION, build_log)


def _validate_ispw_filters(configuration: IspwConfiguration, build_log: TextIO) -> None:
    require(configuration.server_stream, constants.LABEL_SERVER_STREAM, build_log)
    require(configuration.server_application, constants.LABEL_SERVER_APP, build_log)
    require(configuration.server_level, constants.LABEL_SERVER_LEVEL, build_log)
    require(configuration.level_option, constants.LABEL_LEVEL_OPTION, build_log)
    if configuration.folder_name:
        echo(build_log, constants.LABEL_FOLDER_NAME, configuration.folder_name)
    if configuration.component_type:
        echo(build_log, constants.LABEL_COMPONENT_TYPE, configuration.component_type)


def _validate_container_filters(
    configuration: IspwContainerConfiguration,
    build_log: TextIO,
) -> None:
    require(configuration.container_name, constants.LABEL_CONTAINER_NAME, build_log)
    require(configuration.container_type, constants.LABEL_CONTAINER_TYPE, build_log)
    if configuration.server_level:
        echo(build_log, constants.LABEL_SERVER_LEVEL, configuration.server_level)
    if configuration.component_type:
        echo(build_log, constants.LABEL_COMPONENT_TYPE, configuration.component_type)


_FILTER_VALIDATORS: Dict[type, Callable[..., None]] = {
    PdsConfiguration: _validate_dataset_filters,
    EndevorConfiguration: _validate_dataset_filters,
    IspwConfiguration: _validate_ispw_filters,
    IspwContainerConfiguration: _validate_container_filters,
}


def validate_configuration(
    configuration: JobConfiguration,
    registry: ConnectionRepository,
    credentials_repo: CredentialsRepository,
    settings: GlobalSettingsRepository,
    is_unix: bool,
    build_log: TextIO,
) -> ValidatedCheckout:
    """Validate a job configuration before any process is launched.

    Dataset flavors check the connection first; ISPW flavors check the
    credentials first, matching the order users see in the build log.

    Args:
        configuration: Job configuration of any flavor.
        registry: Host connection registry.
        credentials_repo: Credentials store.
        settings: Global settings holding the CLI locations.
        is_unix: OS of the build node.
        build_log: Build log receiving the accepted values.

    Returns:
        ValidatedCheckout with the resolved connection, credentials and CLI
        location.

    Raises:
        ConfigurationError: On the first missing or invalid parameter.
    """
    filter_validator = _FILTER_VALIDATORS.get(type(configuration))
    if filter_validator is None:
        raise TypeError(f"Unsupported configuration type: {type(configuration).__name__}")

    if isinstance(configuration, (IspwConfiguration, IspwContainerConfiguration)):
        credentials = validate_credentials(configuration, credentials_repo, build_log)
        connection = validate_connection(configuration, registry, build_log)
        if configuration.server_config:
            echo(build_log, constants.LABEL_SERVER_CONFIG, configuration.server_config)
    else:
        connection = validate_connection(configuration, registry, build_log)
        credentials = validate_credentials(configuration, credentials_repo, build_log)

    filter_validator(configuration, build_log)
    validate_target_folder(configuration.target_folder, is_unix, build_log)
    cli_location = validate_cli_location(settings, is_unix, build_log)

    return ValidatedCheckout(
        connection=connection,
        credentials=credentials,
        cli_location=cli_location,
    )
