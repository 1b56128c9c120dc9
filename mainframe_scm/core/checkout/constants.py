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

"""Downloader CLI flags, script names and version thresholds."""

DOWNLOADER_MINIMUM_CLI_VERSION = "18.2.3"
PROTOCOL_MINIMUM_CLI_VERSION = "19.4.1"

CLI_VERSION_FILE = "VERSION"
SCM_DOWNLOADER_CLI_BAT = "SCMDownloaderCLI.bat"
SCM_DOWNLOADER_CLI_SH = "SCMDownloaderCLI.sh"
TOPAZ_CLI_WORKSPACE = "TopazCliWkspc"

# Connection and login
HOST_PARM = "-host"
PORT_PARM = "-port"
USERID_PARM = "-id"
PW_PARM = "-pass"
CERT_PARM = "-cert"
PROTOCOL_PARM = "-protocol"
CODE_PAGE_PARM = "-code"
TIMEOUT_PARM = "-timeout"

# Download location
SCM_TYPE_PARM = "-scm"
TARGET_FOLDER_PARM = "-targetFolder"
DATA_PARM = "-data"

# PDS / Endevor
FILTER_PARM = "-filter"
FILE_EXT_PARM = "-ext"

# ISPW
ISPW_SERVER_CONFIG_PARAM = "-ispwServerConfig"
ISPW_SERVER_STREAM_PARAM = "-ispwServerStream"
ISPW_SERVER_APP_PARAM = "-ispwServerApp"
ISPW_SERVER_LEVEL_PARAM = "-ispwServerLevel"
ISPW_LEVEL_OPTION_PARAM = "-ispwLevelOption"
ISPW_FILTER_FILES_PARAM = "-ispwFilterFiles"
ISPW_FILTER_FOLDERS_PARAM = "-ispwFilterFolders"
ISPW_FOLDER_NAME_PARAM = "-ispwFolderName"
ISPW_COMPONENT_TYPE_PARAM = "-ispwComponentType"
ISPW_CONTAINER_NAME_PARAM = "-ispwContainerName"
ISPW_CONTAINER_TYPE_PARAM = "-ispwContainerType"
ISPW_DOWNLOAD_ALL_PARAM = "-ispwDownloadAll"
ISPW_DOWNLOAD_INCL_PARAM = "-ispwDownloadIncl"
CP_CATEGORIZE_ON_COMPONENT_TYPE_PARAM = "-cpCategorizeOnComponentType"

# Build log labels
LABEL_HOST_CONNECTION = "Host connection"
LABEL_USERNAME = "Username"
LABEL_FILTER_PATTERN = "Filter pattern"
LABEL_FILE_EXTENSION = "File extension"
LABEL_TARGET_FOLDER = "Source download location"
LABEL_CLI_LOCATION = "Topaz CLI location"
LABEL_SERVER_CONFIG = "Runtime configuration"
LABEL_SERVER_STREAM = "Stream"
LABEL_SERVER_APP = "Application"
LABEL_SERVER_LEVEL = "Level"
LABEL_LEVEL_OPTION = "Level option"
LABEL_FOLDER_NAME = "Folder name"
LABEL_COMPONENT_TYPE = "Component type"
LABEL_CONTAINER_NAME = "Container name"
LABEL_CONTAINER_TYPE = "Container type"
