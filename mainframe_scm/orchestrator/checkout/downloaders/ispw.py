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

"""ISPW repository and container downloaders."""

from mainframe_scm.core.checkout import constants
from mainframe_scm.core.checkout.arguments import ArgumentList
from mainframe_scm.core.checkout.configurations import FALSE, TRUE
from mainframe_scm.core.checkout.value_objects import ScmType

from .base import Downloader


def _flag(value: bool) -> str:
    return TRUE if value else FALSE


class IspwDownloader(Downloader):
    """Downloads a stream/application/level slice of an ISPW repository."""

    scm_type = ScmType.ISPW

    def add_flavor_arguments(self, arguments: ArgumentList, configuration) -> None:
        arguments.add_pair(
            constants.ISPW_SERVER_STREAM_PARAM, self._escape(configuration.server_stream)
        )
        arguments.add_pair(
            constants.ISPW_SERVER_APP_PARAM, self._escape(configuration.server_application)
        )
        arguments.add_pair(
            constants.ISPW_SERVER_LEVEL_PARAM, self._escape(configuration.server_level)
        )
        arguments.add_pair(
            constants.ISPW_LEVEL_OPTION_PARAM, self._escape(configuration.level_option)
        )
        arguments.add_pair(
            constants.ISPW_FILTER_FILES_PARAM, self._escape(configuration.filter_files)
        )
        arguments.add_pair(
            constants.ISPW_FILTER_FOLDERS_PARAM, self._escape(configuration.filter_folders)
        )
        self._add_escaped_optional(
            arguments, constants.ISPW_SERVER_CONFIG_PARAM, configuration.server_config
        )
        self._add_escaped_optional(
            arguments, constants.ISPW_FOLDER_NAME_PARAM, configuration.folder_name
        )
        self._add_escaped_optional(
            arguments, constants.ISPW_COMPONENT_TYPE_PARAM, configuration.component_type
        )
        arguments.add_pair(
            constants.ISPW_DOWNLOAD_ALL_PARAM, _flag(configuration.download_all)
        )
        arguments.add_pair(
            constants.ISPW_DOWNLOAD_INCL_PARAM, _flag(configuration.download_includes)
        )
        if configuration.categorize_on_component_type:
            arguments.add(constants.CP_CATEGORIZE_ON_COMPONENT_TYPE_PARAM)


class IspwContainerDownloader(Downloader):
    """Downloads the components of an assignment, release or set."""

    scm_type = ScmType.ISPW_CONTAINER

    def add_flavor_arguments(self, arguments: ArgumentList, configuration) -> None:
        self._add_escaped_optional(
            arguments, constants.ISPW_SERVER_CONFIG_PARAM, configuration.server_config
        )
        arguments.add_pair(
            constants.ISPW_CONTAINER_NAME_PARAM, self._escape(configuration.container_name)
        )
        arguments.add_pair(
            constants.ISPW_CONTAINER_TYPE_PARAM, self._escape(configuration.container_type)
        )
        self._add_escaped_optional(
            arguments, constants.ISPW_SERVER_LEVEL_PARAM, configuration.server_level
        )
        self._add_escaped_optional(
            arguments, constants.ISPW_COMPONENT_TYPE_PARAM, configuration.component_type
        )
        arguments.add_pair(
            constants.ISPW_DOWNLOAD_ALL_PARAM, _flag(configuration.download_all)
        )
