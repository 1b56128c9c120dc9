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

"""Domain exceptions for mainframe checkouts."""

from typing import Optional


class ScmDomainError(Exception):
    """Base exception for all checkout domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class ConfigurationError(ScmDomainError):
    """A required checkout parameter is missing or invalid.

    Raised during validation, before any subprocess is launched.
    """

    def __init__(
        self,
        parameter: str,
        message: Optional[str] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize configuration error.

        Args:
            parameter: Display name of the offending parameter.
            message: Optional message overriding the missing-parameter text.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            message or f"Checkout failed: missing required parameter '{parameter}'",
            correlation_id=correlation_id
        )
        self.parameter = parameter


class ConnectionNotFoundError(ConfigurationError):
    """Host connection id does not resolve in the connection registry."""

    def __init__(self, connection_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize connection not found error.

        Args:
            connection_id: The connection id that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__("Host connection", correlation_id=correlation_id)
        self.connection_id = connection_id


class CredentialsNotFoundError(ConfigurationError):
    """Credentials id does not resolve in the credentials store."""

    def __init__(self, credentials_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize credentials not found error.

        Args:
            credentials_id: The credentials id that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__("Login credentials", correlation_id=correlation_id)
        self.credentials_id = credentials_id


class InvalidTargetFolderError(ConfigurationError):
    """Source download location is not a valid path name."""

    def __init__(
        self,
        target_folder: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid target folder error.

        Args:
            target_folder: The rejected folder.
            reason: Why the folder was rejected.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            "Source download location",
            message=f"Invalid source download location '{target_folder}': {reason}",
            correlation_id=correlation_id
        )
        self.target_folder = target_folder
        self.reason = reason


class CliIncompatibleError(ScmDomainError):
    """Installed downloader CLI is too old for the requested operation."""

    def __init__(
        self,
        installed_version: Optional[str],
        minimum_version: str,
        feature: str = "the source downloader",
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize CLI incompatibility error.

        Args:
            installed_version: Version found in the CLI directory, if any.
            minimum_version: Lowest version that supports the feature.
            feature: What the minimum version is required for.
            correlation_id: Optional correlation ID for tracing.
        """
        found = installed_version or "unknown"
        super().__init__(
            f"The installed CLI version ({found}) does not support {feature}; "
            f"version {minimum_version} or later is required",
            correlation_id=correlation_id
        )
        self.installed_version = installed_version
        self.minimum_version = minimum_version
        self.feature = feature


class CheckoutAbortedError(ScmDomainError):
    """Downloader CLI exited with a non-zero exit code."""

    def __init__(
        self,
        script: str,
        exit_code: int,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize checkout aborted error.

        Args:
            script: Name of the CLI script that was run.
            exit_code: Exit code returned by the CLI process.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Call {script} exited with value = {exit_code}",
            correlation_id=correlation_id
        )
        self.script = script
        self.exit_code = exit_code


class JobConfigurationFormatError(ScmDomainError):
    """Persisted job configuration cannot be read."""

    def __init__(
        self,
        job_name: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize job configuration format error.

        Args:
            job_name: Name of the job whose configuration is unreadable.
            reason: Parse or schema failure description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Unreadable configuration for job {job_name}: {reason}",
            correlation_id=correlation_id
        )
        self.job_name = job_name
        self.reason = reason
