# catalog_gateway/integrations/gemini/classifier.py
"""Gemini function-calling intent classifier."""

import logging
from typing import Any, Dict, Optional, Sequence
from google import genai
from google.genai import types
from google.genai.types import HttpOptions
from ...config import Config
from ...errors import ClassifierError
from ...tools.registry import OPERATIONS, NoOp, Operation, OperationDescriptor, parse_operation

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """
You are a shopping assistant for an online clothing and footwear store.
When the shopper looks for products, call search_products.
When the shopper asks whether a product is available in a size, call check_stock.
Call at most one function. If neither applies, answer briefly in the shopper's language.
"""


def to_schema(schema: Dict[str, Any]) -> types.Schema:
    """Convert a JSON-schema fragment to a Gemini Schema."""
    properties = schema.get("properties") or {}
    return types.Schema(
        type=schema["type"].upper(),
        description=schema.get("description"),
        properties={name: to_schema(value) for name, value in properties.items()} or None,
        required=schema.get("required"),
    )


def function_declarations(operations: Sequence[OperationDescriptor]) -> list:
    return [
        types.FunctionDeclaration(
            name=operation.name,
            description=operation.description,
            parameters=to_schema(operation.parameter_schema),
        )
        for operation in operations
    ]


class GeminiIntentClassifier:
    """Asks Gemini to pick at most one catalog operation for a message."""

    def __init__(self, config: Config, client: Optional[genai.Client] = None,
                 operations: Sequence[OperationDescriptor] = OPERATIONS):
        self.config = config
        self.operations = tuple(operations)
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> genai.Client:
        if self.config.GENAI_USE_VERTEXAI.lower() in {"1", "true", "yes"}:
            logger.info(f"Using Vertex AI project {self.config.CLOUD_PROJECT} in {self.config.CLOUD_LOCATION}")
            return genai.Client(
                vertexai=True,
                project=self.config.CLOUD_PROJECT,
                location=self.config.CLOUD_LOCATION,
                http_options=HttpOptions(api_version="v1")
            )
        return genai.Client(api_key=self.config.API_KEY or None)

    def generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            tools=[types.Tool(function_declarations=function_declarations(self.operations))],
            tool_config=types.ToolConfig(
                function_calling_config=types.FunctionCallingConfig(mode="AUTO")
            ),
            automatic_function_calling=types.AutomaticFunctionCallingConfig(disable=True),
        )

    def classify(self, message: Optional[str]) -> Operation:
        """
        Classify a shopper message.

        Args:
            message: Free-text shopper message

        Returns:
            The chosen operation, or NoOp carrying the model's text reply
        """
        if not message or not message.strip():
            logger.info("Empty message, nothing to classify")
            return NoOp(text="")

        try:
            response = self.client.models.generate_content(
                model=self.config.agent_settings.model,
                contents=message,
                config=self.generation_config(),
            )
        except Exception as e:
            logger.error(f"Intent classification failed: {e}")
            raise ClassifierError("Intent classification failed") from e

        text = getattr(response, "text", None) or ""
        function_calls = getattr(response, "function_calls", None) or []
        if not function_calls:
            logger.info("Classifier chose no operation")
            return NoOp(text=text)

        call = function_calls[0]
        logger.info(f"Classifier chose {call.name} with {call.args}")
        return parse_operation(call.name, call.args, text=text)
