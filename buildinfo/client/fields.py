"""buildinfo – property key names.

Full keys are built by concatenating a view prefix with one of the local
key names below, e.g. ``PROP_RESOLVE_PREFIX + REPO_KEY`` gives
``"resolve.repoKey"``. These names are shared with existing property
files and CI integrations and must not change.
"""

from __future__ import annotations

# ============================================================================
# Root-level keys and view prefixes
# ============================================================================

PROP_CONTEXT_URL = "contextUrl"
PROP_TIMEOUT = "timeout"

PROP_RESOLVE_PREFIX = "resolve."
PROP_PUBLISH_PREFIX = "publish."
PROP_PROXY_PREFIX = "proxy."

# Publisher matrix params live outside the "publish." namespace.
PROP_DEPLOY_PARAM_PROP_PREFIX = "deploy."

BUILD_INFO_PREFIX = "build.info."
LICENSE_CONTROL_PREFIX = "licenseControl."
BUILD_INFO_LICENSE_CONTROL_PREFIX = BUILD_INFO_PREFIX + LICENSE_CONTROL_PREFIX
ENVIRONMENT_PREFIX = "env."

BUILD_INFO_CONFIG_PREFIX = "buildInfoConfig."

# Legacy, unprefixed key from the older "apply from" plugin convention.
LEGACY_DOWNLOAD_URL = "artifactory.downloadUrl"

# ============================================================================
# Authentication / repository fields
# ============================================================================

ENABLED = "enabled"
USERNAME = "username"
PASSWORD = "password"

NAME = "name"
URL = "url"
REPO_KEY = "repoKey"
SNAPSHOT_REPO_KEY = "snapshot.repoKey"
MAVEN = "maven"
IVY = "ivy"
IVY_M2_COMPATIBLE = "ivy.m2compatible"
IVY_ART_PATTERN = "ivy.artPattern"
IVY_IVY_PATTERN = "ivy.ivyPattern"
MATRIX = "matrix."

PUBLISH_ARTIFACTS = "publishArtifacts"
PUBLISH_BUILD_INFO = "publishBuildInfo"
INCLUDE_PATTERNS = "includePatterns"
EXCLUDE_PATTERNS = "excludePatterns"

HOST = "host"
PORT = "port"

# ============================================================================
# Build info fields
# ============================================================================

BUILD_NAME = "build.name"
BUILD_NUMBER = "build.number"
BUILD_TIMESTAMP = "build.timestamp"
BUILD_STARTED = "build.started"
PRINCIPAL = "principal"
BUILD_URL = "build.url"
VCS_REVISION = "vcs.revision"
BUILD_AGENT_NAME = "agent.name"
BUILD_AGENT_VERSION = "agent.version"
BUILD_PARENT_NAME = "build.parentName"
BUILD_PARENT_NUMBER = "build.parentNumber"
BUILD_RETENTION_DAYS = "buildRetention.daysToKeep"
BUILD_RETENTION_MINIMUM_DATE = "buildRetention.minimumDate"

# License control
RUN_CHECKS = "runChecks"
VIOLATION_RECIPIENTS = "violationRecipients"
INCLUDE_PUBLISHED_ARTIFACTS = "includePublishedArtifacts"
SCOPES = "scopes"
AUTO_DISCOVER = "autoDiscover"

# Legacy build-info-config
PROPERTIES_FILE = "propertiesFile"
EXPORT_FILE = "exportFile"
INCLUDE_ENV_VARS = "includeEnvVars"

# ============================================================================
# Layout patterns
# ============================================================================

M2_PATTERN = "[organisation]/[module]/[revision]/[artifact]-[revision](-[classifier]).[ext]"
DEFAULT_IVY_PATTERN = "[organisation]/[module]/ivy-[revision].xml"
