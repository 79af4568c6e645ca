import logging
from typing import Optional

from wordstack_app.core.error_handlers import GenerationError
from .schemas import AIResponseDTO
from .services.ai_manager import get_ai_service

logger = logging.getLogger(__name__)


def generate_content(
    prompt: str,
    feature: str = "general",
    context_ref: Optional[str] = None
) -> AIResponseDTO:
    """
    Core function to generate content.
    Never raises; failures come back as ``success=False``.
    """
    try:
        service = get_ai_service()
        if not service:
            return AIResponseDTO(
                success=False,
                error="AI Service not configured or available."
            )

        success, result = service.generate_content(prompt, feature=feature, context_ref=context_ref or 'N/A')

        if success:
            return AIResponseDTO(success=True, content=result)
        else:
            return AIResponseDTO(success=False, error=result)

    except Exception as e:
        logger.error(f"AI generation for {feature} crashed: {e}", exc_info=True)
        return AIResponseDTO(success=False, error=str(e))


class AIInterface:
    @staticmethod
    def generate_text(prompt: str, feature: str = "general", context_ref: Optional[str] = None,
                      message: str = "Text generation failed.") -> str:
        """Generate text or raise GenerationError carrying ``message``."""
        result = generate_content(prompt, feature, context_ref)
        if not result.success:
            raise GenerationError(message, error=result.error)
        return result.content or ""
