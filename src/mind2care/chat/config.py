"""Chat configuration constants.

Centralizes fixed strings and limits used by the chat dispatcher and CLI.
"""

# Reply recorded whenever a dispatch fails, whatever the cause
FALLBACK_REPLY = "Sorry, there was an error getting a response."

# Input configuration
MAX_INPUT_CHARS = 500  # Characters accepted per chat turn

QUICK_REPLIES = (
    "I'm feeling anxious",
    "I need motivation",
    "Help with stress",
    "Feeling overwhelmed",
    "I'm grateful for...",
    "Sleep troubles",
)

DISCLAIMER = (
    "This AI companion provides emotional support and wellness tips, "
    "but is not a substitute for professional mental health care. If you're "
    "experiencing a crisis, please contact emergency services or a mental "
    "health professional."
)

# (label, contact) pairs shown with the disclaimer
CRISIS_RESOURCES = (
    ("Crisis Lifeline", "Call or text 988"),
    ("Crisis Text Line", "Text HOME to 741741 (https://www.crisistextline.org)"),
)

# Log configuration
LOG_LEVEL_ENV = "MIND2CARE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
