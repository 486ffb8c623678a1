"""
buildinfo: Core Type Definitions

This module defines common type aliases shared across the buildinfo
codebase so that signatures in the client modules stay readable.

External dependencies:
- typing: Standard library typing primitives only

Thread safety: Thread-safe (no mutable global state)

Status: Development
Version: v0.1.0
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Tuple, TypeAlias, Union

# ============================================================================
# Type Aliases
# ============================================================================

# Live, mutable key/value mapping backing every configuration view
PropertyMap: TypeAlias = Dict[str, str]

# Read-only view over some or all of the properties
ReadonlyProperties: TypeAlias = Mapping[str, str]

# Predicate over a full (prefixed) property key
KeyPredicate: TypeAlias = Callable[[str], bool]

# Anything ``ClientConfiguration.ingest`` accepts
PropertySource: TypeAlias = Union[Mapping[str, str], Iterable[Tuple[str, str]]]
