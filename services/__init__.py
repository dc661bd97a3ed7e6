"""Service modules for the disk space alert runtime."""

from services.diskspace import DiskSpaceOrchestrator, SlackClient

__all__ = ["DiskSpaceOrchestrator", "SlackClient"]
