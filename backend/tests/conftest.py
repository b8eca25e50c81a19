import copy

import pytest
import structlog

VALID_CONFIG = {
    "tts": {
        "voice_id": "voice-main",
        "model_id": "eleven_turbo_v2",
        "supported_voices": [
            {"voice_id": "voice-en", "language": "en", "label": "English"},
            {"voice_id": "voice-fr", "language": "fr", "label": "French"},
        ],
    },
    "languages": ["en", "fr"],
    "agent": {
        "first_message": "Hello! How can I help you today?",
        "prompt": {"prompt": "You are a helpful booking assistant.", "llm": "gpt-4o"},
        "tools": [
            {"name": "end_call", "description": "Ends the call once the caller's request is resolved"},
            {"name": "language_detection", "description": "Switches the conversation language"},
        ],
        "knowledge_base": [
            {"name": "FAQ", "usage_mode": "prompt"},
            {"name": "Pricing"},
        ],
    },
    "data_collection": [
        {"id": "intent", "type": "string", "description": "Why the caller got in touch"},
    ],
    "evaluation": {"criteria": [{"name": "resolved", "type": "prompt"}]},
    "workflow": {"nodes": {"start": {"edge_order": ["to_end"]}, "end": {}}},
}


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep logging configured by one test (e.g. bound to a CliRunner stream) from leaking into the next."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def valid_config() -> dict:
    """A complete document that produces no errors and no warnings."""
    return copy.deepcopy(VALID_CONFIG)


def messages(findings) -> list[str]:
    return [f.message for f in findings]


def by_severity(findings, severity: str) -> list[str]:
    return [f.message for f in findings if f.severity == severity]
