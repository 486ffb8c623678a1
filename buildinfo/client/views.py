"""buildinfo – prefix-scoped configuration views.

Each view composes a :class:`PrefixedProperties` accessor over the shared
:class:`PropertyStore` and declares its fields with descriptors. Views
never allocate a store of their own and know nothing about each other's
namespaces.

View hierarchy::

    PrefixedView
    ├── AuthenticationView          enabled / username / password
    │   ├── RepositoryView          repository identity, formats, matrix params
    │   │   ├── ResolverView        "resolve."
    │   │   └── PublisherView       "publish."  (matrix params under "deploy.")
    │   └── ProxyView               "proxy."
    ├── BuildInfoView               "build.info."  (+ build variables)
    │   └── .license_control        "build.info.licenseControl."
    └── BuildInfoConfigView         "buildInfoConfig."  (deprecated)

Thread safety: Not thread-safe; see :mod:`buildinfo.client.store`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from buildinfo.client.fields import (
    AUTO_DISCOVER,
    BUILD_AGENT_NAME,
    BUILD_AGENT_VERSION,
    BUILD_INFO_CONFIG_PREFIX,
    BUILD_INFO_LICENSE_CONTROL_PREFIX,
    BUILD_INFO_PREFIX,
    BUILD_NAME,
    BUILD_NUMBER,
    BUILD_PARENT_NAME,
    BUILD_PARENT_NUMBER,
    BUILD_RETENTION_DAYS,
    BUILD_RETENTION_MINIMUM_DATE,
    BUILD_STARTED,
    BUILD_TIMESTAMP,
    BUILD_URL,
    DEFAULT_IVY_PATTERN,
    ENABLED,
    ENVIRONMENT_PREFIX,
    EXCLUDE_PATTERNS,
    EXPORT_FILE,
    HOST,
    INCLUDE_ENV_VARS,
    INCLUDE_PATTERNS,
    INCLUDE_PUBLISHED_ARTIFACTS,
    IVY,
    IVY_ART_PATTERN,
    IVY_IVY_PATTERN,
    IVY_M2_COMPATIBLE,
    LEGACY_DOWNLOAD_URL,
    M2_PATTERN,
    MATRIX,
    MAVEN,
    NAME,
    PASSWORD,
    PORT,
    PRINCIPAL,
    PROP_DEPLOY_PARAM_PROP_PREFIX,
    PROP_PROXY_PREFIX,
    PROP_PUBLISH_PREFIX,
    PROP_RESOLVE_PREFIX,
    PROPERTIES_FILE,
    PUBLISH_ARTIFACTS,
    PUBLISH_BUILD_INFO,
    REPO_KEY,
    RUN_CHECKS,
    SCOPES,
    SNAPSHOT_REPO_KEY,
    URL,
    USERNAME,
    VCS_REVISION,
    VIOLATION_RECIPIENTS,
)
from buildinfo.client.properties import (
    BooleanField,
    IntegerField,
    PatternField,
    PrefixedProperties,
    StringField,
)
from buildinfo.client.store import PropertyStore
from buildinfo.core.logging import get_logger
from buildinfo.core.types import KeyPredicate, ReadonlyProperties

logger = get_logger(__name__)


def starts_with(prefix: str) -> KeyPredicate:
    """Return a predicate matching full keys that begin with ``prefix``."""

    def _predicate(key: str) -> bool:
        return key.startswith(prefix)

    return _predicate


PUBLISH_MATRIX_PARAMS_PREDICATE: KeyPredicate = starts_with(PROP_DEPLOY_PARAM_PROP_PREFIX)


@dataclass(frozen=True)
class MatrixParamPolicy:
    """How a repository view inserts and recognises its matrix params.

    Attributes:
        prefix: Namespace new entries are written under
            (``prefix + name``).
        predicate: Test over the *full* key deciding which entries of the
            whole store belong to the view.
    """

    prefix: str
    predicate: KeyPredicate

    @classmethod
    def for_prefix(cls, prefix: str) -> "MatrixParamPolicy":
        return cls(prefix=prefix, predicate=starts_with(prefix))


# ============================================================================
# Base views
# ============================================================================


class PrefixedView:
    """Base class for every view: owns a :class:`PrefixedProperties`."""

    def __init__(self, store: PropertyStore, prefix: str) -> None:
        self.properties = PrefixedProperties(store, prefix)

    @property
    def prefix(self) -> str:
        return self.properties.prefix

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r})"


class AuthenticationView(PrefixedView):
    """Prefixed view carrying credentials."""

    enabled = BooleanField(ENABLED)
    username = StringField(USERNAME)
    password = StringField(PASSWORD)


class RepositoryView(AuthenticationView):
    """Repository identity, packaging formats and matrix params.

    ``maven`` and ``ivy`` have no default: ``None`` means the value was
    never specified and callers decide what that implies. The two layout
    pattern fields fall back to the standard Maven 2 and Ivy patterns.

    Concrete subclasses pass a :class:`MatrixParamPolicy` that decides
    where matrix params are written and which store entries are read back.
    """

    name = StringField(NAME)
    url = StringField(URL)
    repo_key = StringField(REPO_KEY)
    maven = BooleanField(MAVEN)
    ivy = BooleanField(IVY)
    m2_compatible = BooleanField(IVY_M2_COMPATIBLE)
    ivy_artifact_pattern = PatternField(IVY_ART_PATTERN, M2_PATTERN)
    ivy_pattern = PatternField(IVY_IVY_PATTERN, DEFAULT_IVY_PATTERN)

    def __init__(self, store: PropertyStore, prefix: str, matrix_policy: MatrixParamPolicy) -> None:
        super().__init__(store, prefix)
        self.matrix_policy = matrix_policy

    @property
    def matrix_param_prefix(self) -> str:
        return self.matrix_policy.prefix

    @property
    def matrix_param_filter(self) -> KeyPredicate:
        return self.matrix_policy.predicate

    def add_matrix_param(self, name: str, value: Optional[str]) -> None:
        self.properties.store.set(self.matrix_param_prefix + name, value)

    def add_matrix_params(self, params: Mapping[str, str]) -> None:
        """Absorb the entries of ``params`` whose keys match this view's filter.

        Keys must already carry the matrix prefix; everything else is
        dropped.
        """

        store = self.properties.store
        matching = store.update(
            (key, value) for key, value in params.items() if self.matrix_param_filter(key)
        )
        dropped = len(params) - matching
        if dropped:
            logger.debug(
                "Ignored %d matrix param(s) outside %r for %s", dropped, self.matrix_param_prefix, self
            )

    def get_matrix_params(self) -> ReadonlyProperties:
        return self.properties.store.filter(self.matrix_param_filter)


# ============================================================================
# Concrete views
# ============================================================================


class ResolverView(RepositoryView):
    """Dependency resolution settings under ``resolve.``.

    Matrix params live under ``resolve.matrix.``.
    """

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(
            store,
            PROP_RESOLVE_PREFIX,
            MatrixParamPolicy.for_prefix(PROP_RESOLVE_PREFIX + MATRIX),
        )

    @property
    def download_url(self) -> Optional[str]:
        """Legacy download URL.

        Reads the unprefixed global key ``artifactory.downloadUrl`` from
        the older "apply from" plugin convention. This is the only field
        that reads outside its view's prefix; it is kept so existing
        property files keep working.
        """

        value = self.properties.store.get(LEGACY_DOWNLOAD_URL)
        if value is not None:
            logger.debug("Read legacy property %s", LEGACY_DOWNLOAD_URL)
        return value


class PublisherView(RepositoryView):
    """Deployment settings under ``publish.``.

    Matrix params are deployment properties attached by external tooling,
    so they live in the global ``deploy.`` namespace rather than under
    ``publish.``.
    """

    snapshot_repo_key = StringField(SNAPSHOT_REPO_KEY)
    publish_artifacts = BooleanField(PUBLISH_ARTIFACTS)
    publish_build_info = BooleanField(PUBLISH_BUILD_INFO)
    include_patterns = StringField(INCLUDE_PATTERNS)
    exclude_patterns = StringField(EXCLUDE_PATTERNS)

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(
            store,
            PROP_PUBLISH_PREFIX,
            MatrixParamPolicy(
                prefix=PROP_DEPLOY_PARAM_PROP_PREFIX,
                predicate=PUBLISH_MATRIX_PARAMS_PREDICATE,
            ),
        )


class ProxyView(AuthenticationView):
    """HTTP proxy settings under ``proxy.``."""

    host = StringField(HOST)
    port = IntegerField(PORT)

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(store, PROP_PROXY_PREFIX)


class LicenseControlView(PrefixedView):
    """License-check policy, nested under the build-info namespace."""

    run_checks = BooleanField(RUN_CHECKS)
    violation_recipients = StringField(VIOLATION_RECIPIENTS)
    include_published_artifacts = BooleanField(INCLUDE_PUBLISHED_ARTIFACTS)
    scopes = StringField(SCOPES)
    auto_discover = BooleanField(AUTO_DISCOVER)

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(store, BUILD_INFO_LICENSE_CONTROL_PREFIX)


class BuildInfoView(PrefixedView):
    """Build metadata under ``build.info.``.

    Besides the fixed fields, arbitrary build variables (environment or
    other context to attach to the build record) are stored under
    ``build.info.env.<name>``.

    Attributes:
        license_control: License-control view sharing the same store.
    """

    build_name = StringField(BUILD_NAME)
    build_number = StringField(BUILD_NUMBER)
    build_timestamp = StringField(BUILD_TIMESTAMP)
    build_started = StringField(BUILD_STARTED)
    principal = StringField(PRINCIPAL)
    build_url = StringField(BUILD_URL)
    vcs_revision = StringField(VCS_REVISION)
    build_agent_name = StringField(BUILD_AGENT_NAME)
    build_agent_version = StringField(BUILD_AGENT_VERSION)
    parent_build_name = StringField(BUILD_PARENT_NAME)
    parent_build_number = StringField(BUILD_PARENT_NUMBER)
    build_retention_days = IntegerField(BUILD_RETENTION_DAYS)
    build_retention_minimum_date = StringField(BUILD_RETENTION_MINIMUM_DATE)

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(store, BUILD_INFO_PREFIX)
        self.license_control = LicenseControlView(store)
        self._build_variables_filter = starts_with(self.properties.key_for(ENVIRONMENT_PREFIX))

    def add_build_variables(self, variables: Mapping[str, str]) -> None:
        for key, value in variables.items():
            self.properties.set_string(ENVIRONMENT_PREFIX + key, value)

    def get_build_variables(self) -> ReadonlyProperties:
        """Return build variables keyed by their full ``build.info.env.`` key."""

        return self.properties.store.filter(self._build_variables_filter)


class BuildInfoConfigView(PrefixedView):
    """Build-info export settings under ``buildInfoConfig.``.

    Deprecated: superseded by root-level settings. Kept only so that the
    key names of existing property files are still understood.
    """

    properties_file = StringField(PROPERTIES_FILE)
    export_file = StringField(EXPORT_FILE)
    include_env_vars = BooleanField(INCLUDE_ENV_VARS)

    def __init__(self, store: PropertyStore) -> None:
        super().__init__(store, BUILD_INFO_CONFIG_PREFIX)
