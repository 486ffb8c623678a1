"""buildinfo – ingestion wrappers.

Helpers that turn external sources into the ``str -> str`` mappings
accepted by :meth:`ClientConfiguration.ingest`:

- Java ``.properties`` files, parsed with ``jproperties`` (``=``, ``:``
  or whitespace separators, ``#``/``!`` comment lines, backslash escapes
  and line continuations; quotes and inline ``#`` are kept as data);
- the process environment, filtered by a key prefix such as
  ``buildInfo.`` (configurable through ``BUILDINFO_ENV_PREFIX``).

External dependencies:
- jproperties: Java properties file parsing
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from jproperties import Properties

from buildinfo.client.configuration import ClientConfiguration
from buildinfo.core.config import get_config
from buildinfo.core.logging import get_logger

logger = get_logger(__name__)


def read_properties_file(path: Union[str, Path], encoding: str = "utf-8") -> Dict[str, str]:
    """Parse a Java properties file into a dict.

    Later duplicates of a key win, as with ``java.util.Properties``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    path = Path(path)
    if not path.exists():
        msg = f"Properties file not found: {path}"
        raise FileNotFoundError(msg)

    parsed = Properties()
    with path.open("rb") as handle:
        parsed.load(handle, encoding)

    props = {key: parsed[key].data for key in parsed}
    logger.debug("Read %d properties from %s", len(props), path)
    return props


def environment_properties(
    environ: Optional[Mapping[str, str]] = None,
    prefix: Optional[str] = None,
) -> Dict[str, str]:
    """Select variables starting with ``prefix`` and strip the prefix.

    Args:
        environ: Mapping to read; defaults to ``os.environ``.
        prefix: Key prefix to select; defaults to the ``env_prefix``
            package setting.
    """

    if environ is None:
        environ = os.environ
    if prefix is None:
        prefix = get_config().env_prefix

    props = {key[len(prefix):]: value for key, value in environ.items() if key.startswith(prefix)}
    # A bare prefix would map to an empty key.
    props.pop("", None)
    return props


def load_properties_file(configuration: ClientConfiguration, path: Union[str, Path]) -> int:
    """Ingest a properties file into ``configuration``; return the entry count."""

    return configuration.ingest(read_properties_file(path))


def load_environment(
    configuration: ClientConfiguration,
    environ: Optional[Mapping[str, str]] = None,
    prefix: Optional[str] = None,
) -> int:
    """Ingest prefixed environment variables into ``configuration``."""

    return configuration.ingest(environment_properties(environ, prefix))
