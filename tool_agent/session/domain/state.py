"""SessionState: the states of the agent loop."""

from enum import StrEnum


class SessionState(StrEnum):
    AWAITING_USER_INPUT = "awaiting_user_input"
    AWAITING_MODEL_RESPONSE = "awaiting_model_response"
    DISPATCHING = "dispatching"
    RENDERING = "rendering"
    SESSION_ENDED = "session_ended"
