# llm/structured.py
"""
Structured Generator
Sends a prompt plus a target Pydantic schema to the LLM and returns a
validated instance of that schema.
"""

import json
from typing import Optional, Type, TypeVar

from loguru import logger
from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from ..config import settings
from .prompts import STRUCTURED_SYSTEM_PROMPT

ModelT = TypeVar("ModelT", bound=BaseModel)


class GenerationError(RuntimeError):
    """LLM call failed or returned data that does not fit the schema"""


class StructuredGenerator:
    """
    Schema-constrained generation over the OpenAI chat completions API.
    The client is created lazily from settings unless one is injected.
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None
    ):
        self._client = client
        self.model = model or settings.OPENAI_MODEL
        self.temperature = settings.OPENAI_TEMPERATURE if temperature is None else temperature

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not settings.use_openai:
                raise GenerationError("OPENAI_API_KEY is not configured")
            self._client = OpenAI(api_key=settings.OPENAI_API_KEY)
            logger.info(f"StructuredGenerator: OpenAI client initialized ({self.model})")
        return self._client

    def generate(self, prompt: str, schema: Type[ModelT]) -> ModelT:
        """
        Generate an object conforming to schema.

        Args:
            prompt: Natural language request
            schema: Pydantic model describing the expected output

        Returns:
            Validated schema instance

        Raises:
            GenerationError: API failure, empty reply or schema mismatch
        """
        system_prompt = STRUCTURED_SYSTEM_PROMPT.format(
            json_schema=json.dumps(schema.model_json_schema(), indent=2)
        )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt}
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature
            )
        except OpenAIError as e:
            logger.error(f"OpenAI error: {e}")
            raise GenerationError(f"LLM request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError("LLM returned an empty response")

        try:
            return schema.model_validate_json(content)
        except ValidationError as e:
            logger.warning(f"{schema.__name__} validation failed: {e.error_count()} errors")
            raise GenerationError(f"LLM output does not match {schema.__name__}") from e


# ============================================
# Global Instance
# ============================================

structured_generator = StructuredGenerator()
