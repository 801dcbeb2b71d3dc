"""
OpenAI GPT provider implementation.

Provides chat completions and schema-constrained output using the OpenAI API.
Supports GPT-4o and other OpenAI models with JSON schema response formats.

Example:
    from common.ai import OpenAIProvider

    openai = OpenAIProvider(api_key="your-api-key")
    response = await openai.chat(
        message="Hello, how are you?",
        system_prompt="You are a helpful assistant."
    )
    print(response)
"""

from typing import Optional, List, Dict, Any, Type

from common.ai.base import AIProvider, SchemaT, parse_structured


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider.

    Uses the OpenAI async client for API calls.
    Structured output is requested through ``response_format=json_schema``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        max_retries: int = 0,
        timeout: float = 60.0,
        organization: Optional[str] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Chat model to use (default: gpt-4o)
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
            organization: Optional OpenAI organization ID
        """
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai package is required for OpenAI. "
                "Install with: pip install openai"
            )

        self.client = AsyncOpenAI(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
            organization=organization,
        )
        self.model = model

    def _build_messages(
        self,
        message: str,
        system_prompt: Optional[str],
        conversation_history: Optional[List[Dict[str, str]]] = None,
    ) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []

        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})

        if conversation_history:
            messages.extend(conversation_history)

        messages.append({"role": "user", "content": message})
        return messages

    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """Send message and get response from OpenAI."""
        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": self._build_messages(message, system_prompt, conversation_history),
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        # Add optional parameters
        for key in ["stop", "presence_penalty", "frequency_penalty", "top_p", "seed"]:
            if key in kwargs:
                params[key] = kwargs[key]

        response = await self.client.chat.completions.create(**params)
        return response.choices[0].message.content or ""

    async def generate_structured(
        self,
        message: str,
        schema: Type[SchemaT],
        system_prompt: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> SchemaT:
        """Generate output matching ``schema`` using a JSON schema response format."""
        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "messages": self._build_messages(message, system_prompt),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__,
                    "schema": schema.model_json_schema(),
                },
            },
        }

        response = await self.client.chat.completions.create(**params)
        return parse_structured(response.choices[0].message.content, schema)
