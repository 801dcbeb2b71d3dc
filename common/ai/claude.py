"""
Anthropic Claude AI provider implementation.

Provides chat completions and schema-constrained output using the
Anthropic API. Supports all Claude models.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.chat(
        message="Hello, how are you?",
        system_prompt="You are a helpful assistant."
    )
    print(response)

    # Structured output
    plan = await claude.generate_structured("Plan my week", schema=WeekPlan)
"""

from typing import Optional, List, Dict, Any, Type

from pydantic import ValidationError

from common.ai.base import AIProvider, SchemaT, StructuredOutputError


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude AI provider.

    Uses the Anthropic SDK for API calls.
    Structured output is produced through forced tool use.
    """

    STRUCTURED_TOOL_NAME = "emit_structured_output"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 0,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use (default: claude-sonnet-4-5-20250929)
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
        """
        try:
            from anthropic import AsyncAnthropic
        except ImportError:
            raise ImportError(
                "anthropic package is required for Claude. "
                "Install with: pip install anthropic"
            )

        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
        )
        self.model = model

    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """Send message and get response from Claude."""
        messages = list(conversation_history) if conversation_history else []
        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }

        if system_prompt:
            params["system"] = system_prompt

        # Add any extra parameters
        for key in ["stop_sequences", "top_p", "top_k", "metadata"]:
            if key in kwargs:
                params[key] = kwargs[key]

        response = await self.client.messages.create(**params)
        return "".join(block.text for block in response.content if block.type == "text")

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
        Generate output matching ``schema`` via a forced tool call.

        The tool's input_schema is the Pydantic JSON schema, so the model's
        tool input is the structured result.
        """
        tool = {
            "name": self.STRUCTURED_TOOL_NAME,
            "description": schema.__doc__ or f"Return a {schema.__name__} object.",
            "input_schema": schema.model_json_schema(),
        }

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": message}],
            "tools": [tool],
            "tool_choice": {"type": "tool", "name": self.STRUCTURED_TOOL_NAME},
        }

        if system_prompt:
            params["system"] = system_prompt

        response = await self.client.messages.create(**params)

        for block in response.content:
            if block.type == "tool_use" and block.name == self.STRUCTURED_TOOL_NAME:
                try:
                    return schema.model_validate(block.input)
                except ValidationError as e:
                    raise StructuredOutputError(
                        f"The AI model did not return a valid {schema.__name__}: {e}"
                    )

        raise StructuredOutputError(
            f"The AI model did not return any output (stop_reason={response.stop_reason})."
        )
