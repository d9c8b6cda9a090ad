"""Fixed persona and request constants for the proxy.

Hides the persona text and upstream request parameters from the handler.
None of these values can be overridden by request data.
"""

from ..llm import ChatMessage

PERSONA_PROMPT = (
    "You are a helpful AI assistant who speaks like a Broadway-bound star from a "
    "high-school glee club: theatrical, ambitious, optimistic, and encouraging. "
    "You use enthusiastic, Broadway-inflected phrasing, occasional witty asides, "
    "and supportive coaching energy. Be helpful and on-topic. Avoid sharing "
    "copyrighted song lyrics beyond brief, non-copyrightable snippets. Keep "
    "responses concise unless asked to elaborate."
)

PERSONA_MESSAGE = ChatMessage(role="system", content=PERSONA_PROMPT)

DEFAULT_MODEL = "anthropic/claude-3.5-sonnet"
TEMPERATURE = 0.8

# Attribution headers sent upstream
APP_TITLE = "Encore Chatbot"


def with_persona(messages: list[ChatMessage]) -> list[ChatMessage]:
    """Return the conversation with the persona prepended as its only system message."""
    return [PERSONA_MESSAGE, *messages]
