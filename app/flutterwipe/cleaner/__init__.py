"""Cleanup of discovered Flutter projects."""

from flutterwipe.cleaner.orchestrator import (
    CleanResult,
    CleanupOrchestrator,
    CleanupSummary,
    measure_dir_size,
)

__all__ = ["CleanResult", "CleanupOrchestrator", "CleanupSummary", "measure_dir_size"]
