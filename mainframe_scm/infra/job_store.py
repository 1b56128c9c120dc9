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

"""Job configuration persistence.

Each job lives in ``<jobs_dir>/<job name>/config.yaml``::

    scm: pds
    connection_id: 2b1c...
    credentials_id: mainframe-user
    filter_pattern: |
      XDEVREG.XPED.COBOL
      XDEVREG.XPED.COPY
    file_extension: cbl

Pre-2.0 files carry ``hostPort`` and ``codePage`` instead of
``connection_id``; they are read into ``LegacyConnectionInfo`` and dropped
on the next save.
"""

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from mainframe_scm.core.checkout.configurations import (
    CONFIGURATION_TYPES,
    JobConfiguration,
    LegacyConnectionInfo,
)
from mainframe_scm.core.checkout.repositories import JobConfigurationRepository
from mainframe_scm.core.checkout.value_objects import ScmType
from mainframe_scm.core.exceptions import JobConfigurationFormatError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"
LEGACY_HOST_PORT_KEY = "hostPort"
LEGACY_CODE_PAGE_KEY = "codePage"
_TRANSIENT_FIELDS = {"legacy", "migrated"}
_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0", ""}


def configuration_to_dict(configuration: JobConfiguration) -> Dict[str, Any]:
    """Serialize a configuration; legacy and transient fields are left out."""
    document: Dict[str, Any] = {"scm": configuration.scm_type.value}
    for config_field in fields(configuration):
        if config_field.name not in _TRANSIENT_FIELDS:
            document[config_field.name] = getattr(configuration, config_field.name)
    return document


def configuration_from_dict(job_name: str, data: Any) -> JobConfiguration:
    """Rebuild a configuration from its persisted form.

    Args:
        job_name: Job the document belongs to, for error messages.
        data: Parsed YAML document.

    Returns:
        Configuration of the flavor named by the ``scm`` key.

    Raises:
        JobConfigurationFormatError: If the document is not a mapping, the
            flavor is unknown or a boolean field holds a non-boolean value.
    """
    if not isinstance(data, dict):
        raise JobConfigurationFormatError(job_name, "document is not a mapping")

    try:
        scm_type = ScmType(str(data.get("scm")))
    except ValueError:
        raise JobConfigurationFormatError(
            job_name, f"unknown scm type: {data.get('scm')}"
        ) from None

    config_type = CONFIGURATION_TYPES[scm_type]
    config_fields = {
        f.name: f for f in fields(config_type) if f.name not in _TRANSIENT_FIELDS
    }
    kwargs = {}
    for key, value in data.items():
        if key not in config_fields:
            continue
        if config_fields[key].type in (bool, "bool"):
            value = _to_bool(job_name, key, value)
        kwargs[key] = value

    legacy = None
    if LEGACY_HOST_PORT_KEY in data or LEGACY_CODE_PAGE_KEY in data:
        legacy = LegacyConnectionInfo(
            host_port=_optional_str(data.get(LEGACY_HOST_PORT_KEY)),
            code_page=_optional_str(data.get(LEGACY_CODE_PAGE_KEY)),
        )

    try:
        return config_type(legacy=legacy, **kwargs)
    except TypeError as exc:
        raise JobConfigurationFormatError(job_name, str(exc)) from exc


def _optional_str(value: Any):
    return None if value is None else str(value)


def _to_bool(job_name: str, key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise JobConfigurationFormatError(job_name, f"{key} is not a boolean: {value!r}")


class YamlJobStore(JobConfigurationRepository):
    """Directory of per-job YAML configuration files."""

    def __init__(self, jobs_dir: Path) -> None:
        self._jobs_dir = jobs_dir

    def list_jobs(self) -> List[str]:
        if not self._jobs_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self._jobs_dir.iterdir()
            if (entry / CONFIG_FILE_NAME).is_file()
        )

    def load(self, job_name: str) -> JobConfiguration:
        path = self._config_path(job_name)
        try:
            with path.open("r", encoding="utf-8") as stream:
                data = yaml.safe_load(stream)
        except FileNotFoundError:
            raise JobConfigurationFormatError(job_name, f"{path} does not exist") from None
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise JobConfigurationFormatError(job_name, str(exc)) from exc
        return configuration_from_dict(job_name, data)

    def save(self, job_name: str, configuration: JobConfiguration) -> None:
        path = self._config_path(job_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(".yaml.tmp")
        with temp_path.open("w", encoding="utf-8") as stream:
            yaml.safe_dump(
                configuration_to_dict(configuration),
                stream,
                default_flow_style=False,
                sort_keys=False,
            )
        os.replace(temp_path, path)
        logger.debug("Saved configuration for job %s to %s", job_name, path)

    def _config_path(self, job_name: str) -> Path:
        return self._jobs_dir / job_name / CONFIG_FILE_NAME
