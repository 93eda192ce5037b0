"""Polling trigger for newly created entities."""

from .poller import EVENTS, Poller, PollStateStore

__all__ = ["EVENTS", "Poller", "PollStateStore"]
