"""Agent platform client."""

from .agent import AgentClient, AgentService

__all__ = ["AgentClient", "AgentService"]
