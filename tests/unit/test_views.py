"""
buildinfo: Tests for Configuration Views

Test suite for ``buildinfo.client.views``. Covers:
- Authentication and repository field key names
- Layout pattern defaults
- Matrix parameter insertion, filtering and isolation
- Proxy, build-info, license-control and legacy views
"""

from __future__ import annotations

import logging

import pytest

from buildinfo.client.errors import ConfigParseError
from buildinfo.client.fields import DEFAULT_IVY_PATTERN, M2_PATTERN
from buildinfo.client.store import PropertyStore
from buildinfo.client.views import (
    PUBLISH_MATRIX_PARAMS_PREDICATE,
    BuildInfoConfigView,
    BuildInfoView,
    MatrixParamPolicy,
    ProxyView,
    PublisherView,
    ResolverView,
)


@pytest.fixture
def store() -> PropertyStore:
    return PropertyStore()


class TestRepositoryFields:
    """Fields shared by resolver and publisher views."""

    def test_authentication_fields_use_view_prefix(self, store: PropertyStore) -> None:
        resolver = ResolverView(store)
        resolver.enabled = True
        resolver.username = "deployer"
        resolver.password = "secret"

        assert store.all() == {
            "resolve.enabled": "true",
            "resolve.username": "deployer",
            "resolve.password": "secret",
        }

    def test_repository_identity_fields(self, store: PropertyStore) -> None:
        publisher = PublisherView(store)
        publisher.name = "local"
        publisher.url = "http://repo.example.com/artifactory"
        publisher.repo_key = "libs-release-local"

        assert store.get("publish.name") == "local"
        assert store.get("publish.url") == "http://repo.example.com/artifactory"
        assert store.get("publish.repoKey") == "libs-release-local"

    def test_format_flags_have_no_default(self, store: PropertyStore) -> None:
        """Unset maven/ivy flags are reported as None, not False."""

        resolver = ResolverView(store)

        assert resolver.maven is None
        assert resolver.ivy is None
        assert resolver.m2_compatible is None

    def test_format_flags_round_trip(self, store: PropertyStore) -> None:
        resolver = ResolverView(store)
        resolver.maven = True
        resolver.ivy = False
        resolver.m2_compatible = True

        assert (resolver.maven, resolver.ivy, resolver.m2_compatible) == (True, False, True)
        assert store.get("resolve.ivy.m2compatible") == "true"

    def test_malformed_flag_propagates(self, store: PropertyStore) -> None:
        store.set("resolve.maven", "maybe")

        with pytest.raises(ConfigParseError):
            ResolverView(store).maven

    def test_string_flag_is_rejected(self, store: PropertyStore) -> None:
        """Assigning the text "false" must not store "true"."""

        resolver = ResolverView(store)

        with pytest.raises(TypeError):
            resolver.maven = "false"  # type: ignore[assignment]

        assert "resolve.maven" not in store

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_layout_patterns_default_when_blank(self, store: PropertyStore, raw: str | None) -> None:
        publisher = PublisherView(store)
        publisher.ivy_artifact_pattern = raw
        publisher.ivy_pattern = raw

        assert publisher.ivy_artifact_pattern == M2_PATTERN
        assert publisher.ivy_pattern == DEFAULT_IVY_PATTERN

    def test_layout_patterns_return_trimmed_value(self, store: PropertyStore) -> None:
        store.set("publish.ivy.artPattern", " [module]/[artifact].[ext] ")
        store.set("publish.ivy.ivyPattern", "[module]/ivy.xml\n")
        publisher = PublisherView(store)

        assert publisher.ivy_artifact_pattern == "[module]/[artifact].[ext]"
        assert publisher.ivy_pattern == "[module]/ivy.xml"


class TestMatrixParams:
    """Matrix parameter policies."""

    def test_resolver_policy(self, store: PropertyStore) -> None:
        resolver = ResolverView(store)

        assert resolver.matrix_param_prefix == "resolve.matrix."
        assert resolver.matrix_param_filter("resolve.matrix.a")
        assert not resolver.matrix_param_filter("resolve.repoKey")

    def test_publisher_policy_is_global(self, store: PropertyStore) -> None:
        publisher = PublisherView(store)

        assert publisher.matrix_param_prefix == "deploy."
        assert publisher.matrix_param_filter is PUBLISH_MATRIX_PARAMS_PREDICATE
        assert publisher.matrix_param_filter("deploy.build.name")
        assert not publisher.matrix_param_filter("publish.deploy.x")

    def test_isolation_between_views(self, store: PropertyStore) -> None:
        """Resolver and publisher params share one store but never mix."""

        resolver = ResolverView(store)
        publisher = PublisherView(store)

        resolver.add_matrix_param("a", "1")
        publisher.add_matrix_param("b", "2")

        assert dict(resolver.get_matrix_params()) == {"resolve.matrix.a": "1"}
        assert dict(publisher.get_matrix_params()) == {"deploy.b": "2"}
        assert store.all() == {"resolve.matrix.a": "1", "deploy.b": "2"}

    def test_add_matrix_params_drops_non_matching_keys(self, store: PropertyStore) -> None:
        resolver = ResolverView(store)

        resolver.add_matrix_params({"resolve.matrix.x": "1", "unrelated.key": "2"})

        assert store.all() == {"resolve.matrix.x": "1"}

    def test_add_matrix_params_logs_dropped_count(
        self, store: PropertyStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="buildinfo")
        publisher = PublisherView(store)

        publisher.add_matrix_params({"deploy.a": "1", "resolve.matrix.b": "2", "c": "3"})

        assert dict(publisher.get_matrix_params()) == {"deploy.a": "1"}
        assert "Ignored 2 matrix param(s)" in caplog.text

    def test_matrix_params_found_outside_own_prefix(self, store: PropertyStore) -> None:
        """Publisher params are read from the whole store, not from publish.*."""

        store.update({"deploy.vcs": "git", "publish.repoKey": "libs"})

        assert dict(PublisherView(store).get_matrix_params()) == {"deploy.vcs": "git"}

    def test_custom_policy(self) -> None:
        policy = MatrixParamPolicy.for_prefix("custom.")

        assert policy.prefix == "custom."
        assert policy.predicate("custom.x")
        assert not policy.predicate("other.x")


class TestResolverView:
    """Resolver-specific behaviour."""

    def test_download_url_reads_legacy_global_key(self, store: PropertyStore) -> None:
        store.set("artifactory.downloadUrl", "http://legacy/download")

        assert ResolverView(store).download_url == "http://legacy/download"

    def test_download_url_is_read_only(self, store: PropertyStore) -> None:
        with pytest.raises(AttributeError):
            ResolverView(store).download_url = "x"  # type: ignore[misc]

    def test_download_url_absent_is_none(self, store: PropertyStore) -> None:
        store.set("resolve.downloadUrl", "not-the-legacy-key")

        assert ResolverView(store).download_url is None


class TestPublisherView:
    """Publisher-specific fields."""

    def test_publisher_fields(self, store: PropertyStore) -> None:
        publisher = PublisherView(store)
        publisher.snapshot_repo_key = "libs-snapshot-local"
        publisher.publish_artifacts = False
        publisher.include_patterns = "*.jar"
        publisher.exclude_patterns = "*-sources.jar"

        assert store.all() == {
            "publish.snapshot.repoKey": "libs-snapshot-local",
            "publish.publishArtifacts": "false",
            "publish.includePatterns": "*.jar",
            "publish.excludePatterns": "*-sources.jar",
        }
        assert publisher.publish_build_info is None


class TestProxyView:
    """Proxy fields."""

    def test_host_port_and_credentials(self, store: PropertyStore) -> None:
        proxy = ProxyView(store)
        proxy.host = "proxy.example.com"
        proxy.port = 3128
        proxy.username = "user"

        assert proxy.port == 3128
        assert store.get("proxy.port") == "3128"
        assert store.get("proxy.host") == "proxy.example.com"
        assert store.get("proxy.username") == "user"

    def test_malformed_port_raises(self, store: PropertyStore) -> None:
        store.set("proxy.port", "eighty")

        with pytest.raises(ConfigParseError):
            ProxyView(store).port


class TestBuildInfoView:
    """Build metadata, build variables and nested license control."""

    def test_fixed_fields(self, store: PropertyStore) -> None:
        info = BuildInfoView(store)
        info.build_name = "my-build"
        info.build_number = "42"
        info.vcs_revision = "abc123"
        info.parent_build_name = "upstream"
        info.build_retention_days = 14

        assert store.all() == {
            "build.info.build.name": "my-build",
            "build.info.build.number": "42",
            "build.info.vcs.revision": "abc123",
            "build.info.build.parentName": "upstream",
            "build.info.buildRetention.daysToKeep": "14",
        }
        assert info.build_retention_days == 14
        assert info.build_agent_name is None

    def test_build_variables_namespace(self, store: PropertyStore) -> None:
        info = BuildInfoView(store)
        info.add_build_variables({"BRANCH": "main", "USER": "ci"})
        info.build_name = "not-a-variable"

        assert dict(info.get_build_variables()) == {
            "build.info.env.BRANCH": "main",
            "build.info.env.USER": "ci",
        }

    def test_license_control_is_nested_and_shares_store(self, store: PropertyStore) -> None:
        info = BuildInfoView(store)
        license_control = info.license_control
        license_control.run_checks = True
        license_control.violation_recipients = "a@example.com b@example.com"
        license_control.include_published_artifacts = False
        license_control.scopes = "compile,runtime"

        assert license_control.prefix == "build.info.licenseControl."
        assert license_control.prefix.startswith(info.prefix)
        assert store.get("build.info.licenseControl.runChecks") == "true"
        assert store.get("build.info.licenseControl.scopes") == "compile,runtime"
        assert license_control.auto_discover is None
        assert license_control.include_published_artifacts is False


class TestBuildInfoConfigView:
    """Deprecated build-info-config view."""

    def test_legacy_fields(self, store: PropertyStore) -> None:
        legacy = BuildInfoConfigView(store)
        legacy.properties_file = "/tmp/buildinfo.properties"
        legacy.include_env_vars = True

        assert store.get("buildInfoConfig.propertiesFile") == "/tmp/buildinfo.properties"
        assert legacy.include_env_vars is True
        assert legacy.export_file is None
