"""Conversation view: client-side state machine over the askweb API."""
from core.view.api_client import QAApiClient
from core.view.conversation_view import ConversationView
from core.view.rendering import SourceCard, render_paragraphs, render_sources
from core.view.round_trip import QABackend, RetrievedContext, retrieve, synthesize
from core.view.state import Answered, ConversationState, Failed, Idle, Loading, Tab

__all__ = [
    "QAApiClient",
    "ConversationView",
    "SourceCard",
    "render_paragraphs",
    "render_sources",
    "QABackend",
    "RetrievedContext",
    "retrieve",
    "synthesize",
    "Answered",
    "ConversationState",
    "Failed",
    "Idle",
    "Loading",
    "Tab",
]
