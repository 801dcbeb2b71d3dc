"""
Abstract AI provider interface.

Defines the contract that all AI/LLM providers must implement.
This allows swapping between different AI services (Claude, OpenAI, etc.)
without changing application code.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "openai":
            return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

import json
import re
from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class StructuredOutputError(Exception):
    """Raised when a model response cannot be turned into the requested schema."""


def extract_json_object(text: str) -> Optional[str]:
    """
    Extract the first complete top-level JSON object using brace counting.

    Braces inside JSON strings are skipped. Returns the balanced { ... }
    substring, or None if not found.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def parse_structured(text: Optional[str], schema: Type[SchemaT]) -> SchemaT:
    """
    Validate raw model text against a Pydantic schema.

    Accepts bare JSON, fenced JSON, or JSON embedded in prose.

    Raises:
        StructuredOutputError: If no JSON object is found or validation fails
    """
    if not text or not text.strip():
        raise StructuredOutputError("The AI model did not return any output.")

    candidate = _CODE_FENCE.sub("", text.strip())
    try:
        return schema.model_validate_json(candidate)
    except ValidationError as e:
        last_err: Exception = e

    extracted = extract_json_object(candidate)
    if extracted:
        try:
            return schema.model_validate_json(extracted)
        except ValidationError as e:
            last_err = e

    raise StructuredOutputError(
        f"The AI model did not return a valid {schema.__name__}: {last_err}"
    )


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    Supports plain chat completions and schema-constrained output.
    """

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """
        Send a message and get a response.

        Args:
            message: The user's message
            system_prompt: Optional system instructions
            conversation_history: Previous messages in the conversation
                Format: [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            **kwargs: Provider-specific options

        Returns:
            The AI's response text
        """
        pass

    async def generate_structured(
        self,
        message: str,
        schema: Type[SchemaT],
        system_prompt: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> SchemaT:
        """
        Get a response that conforms to a Pydantic schema.

        Default strategy: ask the model for JSON only, then validate.
        Concrete providers override this when they support a native
        structured output mode.

        Args:
            message: The rendered prompt
            schema: Pydantic model describing the expected output
            system_prompt: Optional system instructions
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)

        Returns:
            A validated instance of ``schema``

        Raises:
            StructuredOutputError: If the output cannot be parsed or validated
        """
        schema_json = json.dumps(schema.model_json_schema())
        json_instructions = (
            "Respond with a single JSON object only (no markdown, no code fences, "
            f"no commentary) that matches this JSON schema:\n{schema_json}"
        )
        system = f"{system_prompt}\n\n{json_instructions}" if system_prompt else json_instructions

        text = await self.chat(
            message,
            system_prompt=system,
            max_tokens=max_tokens,
            temperature=temperature,
            **kwargs,
        )
        return parse_structured(text, schema)
