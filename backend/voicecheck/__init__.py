"""voicecheck — validator for conversational voice agent configuration files."""

__version__ = "1.0.0"
