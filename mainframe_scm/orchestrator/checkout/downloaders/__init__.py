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

"""Per-flavor downloaders."""

from typing import Dict, Type

from mainframe_scm.core.checkout.value_objects import ScmType

from .base import Downloader, DownloadPlan
from .ispw import IspwContainerDownloader, IspwDownloader
from .pds import EndevorDownloader, PdsDownloader

DOWNLOADERS: Dict[ScmType, Type[Downloader]] = {
    ScmType.PDS: PdsDownloader,
    ScmType.ENDEVOR: EndevorDownloader,
    ScmType.ISPW: IspwDownloader,
    ScmType.ISPW_CONTAINER: IspwContainerDownloader,
}

__all__ = [
    "DOWNLOADERS",
    "Downloader",
    "DownloadPlan",
    "EndevorDownloader",
    "IspwContainerDownloader",
    "IspwDownloader",
    "PdsDownloader",
]
