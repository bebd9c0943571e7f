"""Background workers for Qt presentation layers."""

from .command_worker import CommandWorker

__all__ = ['CommandWorker']
