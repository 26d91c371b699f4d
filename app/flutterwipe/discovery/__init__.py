"""Flutter project discovery.

This module provides exclusion pattern construction, path matching,
manifest classification and the directory walker that ties them
together.
"""

from flutterwipe.discovery.classifier import classify_manifest, is_project_root
from flutterwipe.discovery.matcher import ALWAYS_EXCLUDED_SUBSTRINGS, should_exclude
from flutterwipe.discovery.models import ManifestStatus, PubspecManifest
from flutterwipe.discovery.patterns import DEFAULT_EXCLUDE_PATTERNS, build_pattern_set
from flutterwipe.discovery.walker import ProjectWalker, discover_projects, iter_projects

__all__ = [
    "ALWAYS_EXCLUDED_SUBSTRINGS",
    "DEFAULT_EXCLUDE_PATTERNS",
    "ManifestStatus",
    "ProjectWalker",
    "PubspecManifest",
    "build_pattern_set",
    "classify_manifest",
    "discover_projects",
    "is_project_root",
    "iter_projects",
    "should_exclude",
]
