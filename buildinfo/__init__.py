"""buildinfo – top-level package exports.

This module re-exports the client configuration API for convenience.
"""

from buildinfo.client.configuration import ClientConfiguration
from buildinfo.client.errors import ConfigParseError
from buildinfo.client.store import PropertyStore
