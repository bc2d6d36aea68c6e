from .base import LLMProvider
from .errors import LLMError, PayloadError, TransportError
from .factory import create_llm_provider
from .models import LLMResponse
from .providers import GeminiProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "LLMResponse",
    "LLMError",
    "PayloadError",
    "TransportError",
    "GeminiProvider",
]
