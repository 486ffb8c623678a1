"""buildinfo – client configuration package.

Typed, prefix-scoped views over one shared ``str -> str`` property store.
The entry point is :class:`ClientConfiguration`; the views it owns are
exported for type annotations and direct construction in tests.
"""

from buildinfo.client.errors import ConfigParseError
from buildinfo.client.store import PropertyStore, filter_keys
from buildinfo.client.properties import (
    BooleanField,
    IntegerField,
    PatternField,
    PrefixedProperties,
    StringField,
)
from buildinfo.client.views import (
    AuthenticationView,
    BuildInfoConfigView,
    BuildInfoView,
    LicenseControlView,
    MatrixParamPolicy,
    PrefixedView,
    ProxyView,
    PublisherView,
    RepositoryView,
    ResolverView,
)
from buildinfo.client.configuration import ClientConfiguration
