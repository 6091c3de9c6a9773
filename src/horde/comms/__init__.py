"""In-process messaging: event bus and state channels."""

from horde.comms.channel import StateChannel
from horde.comms.event_bus import EventBus

__all__ = ["EventBus", "StateChannel"]
