"""Generation adapters - Implementations of ItineraryGeneratorPort.

Available implementations:
- HttpItineraryGenerator: JSON over HTTP with httpx
"""

from .http_generator import HttpItineraryGenerator
from .schemas import GenerationRequest, GenerationResponse

__all__ = ["HttpItineraryGenerator", "GenerationRequest", "GenerationResponse"]
