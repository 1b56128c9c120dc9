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

"""Checkout domain module."""

from .arguments import (
    ArgumentList,
    convert_filter_pattern,
    escape_for_script,
    resolve_path,
)
from .configurations import (
    CONFIGURATION_TYPES,
    EndevorConfiguration,
    IspwConfiguration,
    IspwContainerConfiguration,
    JobConfiguration,
    LegacyConnectionInfo,
    PdsConfiguration,
)
from .credentials import CertificateCredentials, Credentials, UsernamePasswordCredentials
from .repositories import (
    BuildNode,
    CredentialsRepository,
    GlobalSettingsRepository,
    JobConfigurationRepository,
)
from .validation import ValidatedCheckout, validate_configuration
from .value_objects import CliVersion, ScmType

__all__ = [
    "ArgumentList",
    "convert_filter_pattern",
    "escape_for_script",
    "resolve_path",
    "CONFIGURATION_TYPES",
    "EndevorConfiguration",
    "IspwConfiguration",
    "IspwContainerConfiguration",
    "JobConfiguration",
    "LegacyConnectionInfo",
    "PdsConfiguration",
    "CertificateCredentials",
    "Credentials",
    "UsernamePasswordCredentials",
    "BuildNode",
    "CredentialsRepository",
    "GlobalSettingsRepository",
    "JobConfigurationRepository",
    "ValidatedCheckout",
    "validate_configuration",
    "CliVersion",
    "ScmType",
]
