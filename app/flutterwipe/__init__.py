"""flutter-wipe: find Flutter projects and reclaim their build output."""

__version__ = "0.3.0"
