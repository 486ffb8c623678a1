"""buildinfo – root client configuration.

:class:`ClientConfiguration` owns the single :class:`PropertyStore` and
builds every view against it::

    config = ClientConfiguration.from_properties({
        "resolve.repoKey": "libs-release",
        "publish.publishArtifacts": "false",
    })
    config.resolver.repo_key          # "libs-release"
    config.publisher.publish_artifacts  # False
    config.info.add_build_variables({"BRANCH": "main"})
    config.all_properties["build.info.env.BRANCH"]  # "main"

Thread safety: Not thread-safe. Assemble the configuration on one thread,
then treat it as read-only.
"""

from __future__ import annotations

from typing import Optional

from buildinfo.client.fields import PROP_CONTEXT_URL, PROP_TIMEOUT
from buildinfo.client.properties import IntegerField, PrefixedProperties, StringField
from buildinfo.client.store import PropertyStore
from buildinfo.client.views import (
    BuildInfoConfigView,
    BuildInfoView,
    ProxyView,
    PublisherView,
    ResolverView,
)
from buildinfo.core.logging import get_logger
from buildinfo.core.types import PropertyMap, PropertySource

logger = get_logger(__name__)


class ClientConfiguration:
    """Typed, prefix-scoped views over one shared property store.

    Attributes:
        properties: Unprefixed accessor used by the root-level fields.
        resolver: Resolution repository settings (``resolve.``).
        publisher: Deployment repository settings (``publish.``).
        info: Build metadata (``build.info.``), owning ``license_control``.
        proxy: Proxy settings (``proxy.``).
        build_info_config: Deprecated export settings
            (``buildInfoConfig.``), kept for key-name compatibility.
    """

    context_url = StringField(PROP_CONTEXT_URL)
    timeout = IntegerField(PROP_TIMEOUT)

    def __init__(self) -> None:
        self._store = PropertyStore()
        self.properties = PrefixedProperties(self._store)

        self.resolver = ResolverView(self._store)
        self.publisher = PublisherView(self._store)
        self.build_info_config = BuildInfoConfigView(self._store)
        self.info = BuildInfoView(self._store)
        self.proxy = ProxyView(self._store)

    @classmethod
    def from_properties(cls, source: Optional[PropertySource] = None) -> "ClientConfiguration":
        config = cls()
        if source is not None:
            config.ingest(source)
        return config

    @property
    def store(self) -> PropertyStore:
        return self._store

    def ingest(self, source: PropertySource) -> int:
        """Copy every entry of ``source`` into the store.

        ``source`` is a mapping or an iterable of ``(key, value)`` pairs.
        Existing keys are overwritten (last write wins). Key names are not
        validated; keys no view knows about are kept as-is.

        Returns:
            Number of entries copied.
        """

        count = self._store.update(source)
        logger.debug("Ingested %d properties (%d total)", count, len(self._store))
        return count

    def fill_from_properties(self, source: PropertySource) -> int:
        """Alias of :meth:`ingest`."""

        return self.ingest(source)

    @property
    def all_properties(self) -> PropertyMap:
        """The live backing mapping (not a copy)."""

        return self._store.all()

    def get_all_properties(self) -> PropertyMap:
        return self._store.all()

    def __repr__(self) -> str:
        return f"ClientConfiguration({len(self._store)} properties)"
