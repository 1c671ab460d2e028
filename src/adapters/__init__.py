"""Adapters — bindings for processes, the archive cache and the workflow runner.

Public re-exports for convenient access.
"""

from src.adapters.base import CacheStore, CommandRunner, WorkflowReporter
from src.adapters.cache.directory import DirectoryCacheStore
from src.adapters.github.workflow import GitHubWorkflow
from src.adapters.mock import MemoryCacheStore, MockCommandRunner, RecordingWorkflow
from src.adapters.shell.command import SubprocessCommandRunner

__all__ = [
    "CacheStore",
    "CommandRunner",
    "DirectoryCacheStore",
    "GitHubWorkflow",
    "MemoryCacheStore",
    "MockCommandRunner",
    "RecordingWorkflow",
    "SubprocessCommandRunner",
    "WorkflowReporter",
]
