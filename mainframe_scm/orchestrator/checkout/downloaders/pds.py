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

"""PDS and Endevor downloaders."""

from mainframe_scm.core.checkout import constants
from mainframe_scm.core.checkout.arguments import ArgumentList, convert_filter_pattern
from mainframe_scm.core.checkout.value_objects import ScmType

from .base import Downloader


class PdsDownloader(Downloader):
    """Downloads partitioned dataset members matching a filter.

    Each run gets its own CLI data directory, removed after success.
    """

    scm_type = ScmType.PDS
    unique_data_dir = True

    def add_flavor_arguments(self, arguments: ArgumentList, configuration) -> None:
        arguments.add_pair(
            constants.FILTER_PARM,
            self._escape(convert_filter_pattern(configuration.filter_pattern)),
        )
        arguments.add_pair(
            constants.FILE_EXT_PARM, self._escape(configuration.file_extension)
        )


class EndevorDownloader(PdsDownloader):
    """Downloads Endevor elements; same arguments as PDS."""

    scm_type = ScmType.ENDEVOR
    unique_data_dir = False
