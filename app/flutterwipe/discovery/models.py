"""Discovery domain models.

Defines the parsed form of a project manifest and the classification
outcome used internally by the project classifier.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

# Dependency key that marks a Dart package as a Flutter project
FLUTTER_DEPENDENCY = "flutter"

# Manifest file expected at every project root
MANIFEST_FILENAME = "pubspec.yaml"


class ManifestStatus(str, Enum):
    """Outcome of inspecting a directory's manifest.

    Attributes:
        FLUTTER: Manifest parsed and declares the flutter dependency.
        NOT_FLUTTER: Manifest parsed but has no flutter dependency.
        MISSING: No manifest file in the directory.
        UNREADABLE: Manifest exists but could not be read as text.
        MALFORMED: Manifest is not valid YAML or lacks a dependencies mapping.
    """

    FLUTTER = "flutter"
    NOT_FLUTTER = "not_flutter"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"

    @property
    def qualifies(self) -> bool:
        """Whether this status marks a project root."""
        return self is ManifestStatus.FLUTTER


class PubspecManifest(BaseModel):
    """The parts of a pubspec.yaml that discovery cares about.

    Only the keys of ``dependencies`` are ever inspected; their values
    (version constraints, sdk references, git sources) are opaque.
    """

    model_config = ConfigDict(extra="ignore")

    dependencies: Annotated[
        dict[str, Any],
        Field(description="Dependency name to version constraint or source"),
    ]

    def depends_on(self, name: str) -> bool:
        """Check whether a dependency is declared, regardless of its value."""
        return name in self.dependencies
