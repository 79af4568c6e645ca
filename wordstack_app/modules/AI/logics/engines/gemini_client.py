import time
import logging
from typing import Tuple, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Stateless worker for Gemini API interactions.
    Does not depend on DB or Flask Context directly.

    ``model_name`` may hold several comma-separated models; they are tried in
    order and the first successful answer wins. There is no retry of a failed
    model.
    """

    def __init__(self, api_key: str, model_name: str = 'gemini-2.0-flash-lite-001'):
        if not api_key:
            raise ValueError("GEMINI_API_KEY is not configured.")

        self.api_key = api_key
        self.model_name = model_name
        genai.configure(api_key=api_key)

    def generate_content(self, prompt: str, feature: str = 'default', context_ref: str = 'N/A') -> Tuple[bool, str]:
        """
        Generates content using the configured model fallback logic.
        Returns (success, text_or_error_message).
        """
        raw_models = self.model_name.split(',')
        models_to_try = [m.strip() for m in raw_models if m.strip()]

        last_error = "No models configured"

        for index, model_chk in enumerate(models_to_try):
            success, result = self._try_model(model_chk, prompt, feature, context_ref)
            if success:
                if index > 0:
                    logger.info(f"GeminiClient: fell back to model '{model_chk}' for {feature}.")
                return True, result
            last_error = result
            logger.warning(f"GeminiClient: model '{model_chk}' failed for {feature} ({context_ref}): {result}")

        return False, f"All models failed. Last error: {last_error}"

    def _try_model(self, model_target: str, prompt: str, feature: str, context_ref: str) -> Tuple[bool, str]:
        start_time = time.time()
        try:
            model = genai.GenerativeModel(model_target)
            response = model.generate_content(prompt)

            if response.parts:
                duration = int((time.time() - start_time) * 1000)
                logger.info(
                    f"GeminiClient: {feature} ({context_ref}) answered by '{model_target}' in {duration} ms."
                )
                return True, response.text

            return False, f"Empty response. Feedback: {response.prompt_feedback}"

        except google_exceptions.ResourceExhausted:
            return False, "Quota exhausted (ResourceExhausted)."

        except google_exceptions.PermissionDenied:
            logger.error("GeminiClient: API key rejected (PermissionDenied).")
            return False, "API key rejected (PermissionDenied)."

        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Gemini API error: {e}")
            return False, str(e)
