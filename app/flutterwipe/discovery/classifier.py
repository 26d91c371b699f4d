"""Flutter project root classification.

A directory is a project root when its ``pubspec.yaml`` parses and the
``dependencies`` mapping contains a ``flutter`` key. Every failure along
the way (no manifest, unreadable file, invalid YAML, wrong shape) means
"not a project"; nothing is raised and nothing is shown to the user.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from flutterwipe.discovery.models import (
    FLUTTER_DEPENDENCY,
    MANIFEST_FILENAME,
    ManifestStatus,
    PubspecManifest,
)

logger = logging.getLogger(__name__)


def classify_manifest(directory: Path) -> ManifestStatus:
    """Inspect the manifest in a directory.

    Args:
        directory: Candidate project root.

    Returns:
        ManifestStatus describing what was found.
    """
    manifest_path = directory / MANIFEST_FILENAME
    try:
        if not manifest_path.exists():
            return ManifestStatus.MISSING
    except OSError as e:
        logger.debug("Cannot stat %s: %s", manifest_path, e)
        return ManifestStatus.UNREADABLE

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", manifest_path, e)
        return ManifestStatus.UNREADABLE

    try:
        data = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        # Scalar constructors raise plain ValueError, e.g. for an impossible date
        logger.debug("Invalid YAML in %s: %s", manifest_path, e)
        return ManifestStatus.MALFORMED

    try:
        manifest = PubspecManifest.model_validate(data)
    except ValidationError as e:
        logger.debug("No dependencies mapping in %s: %s", manifest_path, e.errors())
        return ManifestStatus.MALFORMED

    if manifest.depends_on(FLUTTER_DEPENDENCY):
        return ManifestStatus.FLUTTER
    return ManifestStatus.NOT_FLUTTER


def is_project_root(directory: Path) -> bool:
    """Check whether a directory is a Flutter project root."""
    return classify_manifest(directory).qualifies
