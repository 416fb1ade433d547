import json
import logging
from typing import Optional

import requests
from pydantic import ValidationError
from rich.console import Console

from .config import Config
from .exceptions import ConfigurationError, FormatError, RemoteError, TransportError
from .models import InvokeRequest, InvokeResponse
from .ui import display_raw_response

# Configure logging
logger = logging.getLogger(__name__)

BEDROCK_ENDPOINT = "https://bedrock-runtime.us-east-1.amazonaws.com"


class BedrockClient:
    """A client for the Amazon Bedrock invoke API, authenticated with a bearer token."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """
        Initializes the BedrockClient.

        Args:
            config: The startup configuration (credential, model, verbose flag).
            console: Where raw responses are echoed in verbose mode.
        """
        self.config = config
        self.console = console or Console()

    @property
    def url(self) -> str:
        return f"{BEDROCK_ENDPOINT}/model/{self.config.model}/invoke"

    def translate(self, prompt: str) -> str:
        """
        Sends a prompt to the model and returns the suggested command text.

        Args:
            prompt: The fully built prompt.

        Returns:
            The text of the first content block, stripped of surrounding whitespace.

        Raises:
            ConfigurationError: The bearer token is not set. No request is made.
            TransportError: The endpoint could not be reached.
            RemoteError: The endpoint answered with a non-2xx status.
            FormatError: The body is not JSON or has no content[0].text.
        """
        if not self.config.api_key:
            raise ConfigurationError(
                "missing AWS_BEARER_TOKEN_BEDROCK env var",
                missing_key="AWS_BEARER_TOKEN_BEDROCK",
            )

        payload = InvokeRequest.for_prompt(prompt)
        logger.info(f"Invoking model {self.config.model}")

        try:
            response = requests.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.config.api_key}",
                    "Content-Type": "application/json",
                },
                data=payload.model_dump_json(),
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"request to {self.url} failed: {e}") from e

        body = response.text
        if not 200 <= response.status_code < 300:
            logger.warning(f"Model invocation failed with status {response.status_code}")
            raise RemoteError(f"API error: {body}", status_code=response.status_code, body=body)

        if self.config.verbose:
            display_raw_response(self.console, body)

        return self._parse_response(body)

    def _parse_response(self, body: str) -> str:
        """Extracts content[0].text from a raw response body."""
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise FormatError(f"AI response is not valid JSON: {e}", payload=body) from e

        try:
            result = InvokeResponse.model_validate(data)
            text = result.first_block.text
        except ValidationError as e:
            logger.debug(f"Response validation errors: {e}")
            raise FormatError(f"unexpected AI response format: {data!r}", payload=data) from e

        usage = result.token_usage
        if usage is not None:
            logger.info(f"Token usage: {usage.input_tokens} in, {usage.output_tokens} out")
        return text.strip()
