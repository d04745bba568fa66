"""OpenAI-compatible chat completion client for the DeepSeek API."""

import logging
import threading
import time
from openai import OpenAI
from openai import APIConnectionError, APIStatusError, OpenAIError
from tqdm import tqdm

from yt2clips.config import Config
from yt2clips.errors import ConfigurationError, UpstreamError
from yt2clips.prompts import CLIPS_SYSTEM_PROMPT, TOPICS_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

CLIPS_MODE = "clips"
TOPICS_MODE = "topics"

# Fixed decoding parameters per mode; not user-configurable
DECODING_PARAMS = {
    CLIPS_MODE: {
        "temperature": 0.4,
        "max_tokens": 4000,
        "top_p": 0.95,
        "frequency_penalty": 0.0,
        "presence_penalty": 0.0,
    },
    TOPICS_MODE: {
        "temperature": 0.3,
        "max_tokens": 4000,
        "top_p": 0.95,
    },
}

SYSTEM_PROMPTS = {
    CLIPS_MODE: CLIPS_SYSTEM_PROMPT,
    TOPICS_MODE: TOPICS_SYSTEM_PROMPT,
}


def _upstream_message(error: APIStatusError) -> str:
    """Pull the service's own error message out of a status error, if any."""
    body = error.body
    if isinstance(body, dict):
        detail = body.get("error", body)
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
        if isinstance(detail, str) and detail:
            return detail
    return error.message or "Failed to get response from DeepSeek AI"


class ModelClient:
    """Sends one chat completion per call and returns the raw text."""

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-coder",
        base_url: str = "https://api.deepseek.com/v1",
        timeout: float = 300.0,
        sdk_client=None,
        show_progress: bool = False,
    ):
        if not api_key:
            raise ConfigurationError("DeepSeek API key is not configured")
        self.model = model
        self.show_progress = show_progress
        # SDK retries are disabled: a failed call goes straight to the caller
        self._client = sdk_client or OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    @classmethod
    def from_config(cls, config=Config, **kwargs) -> "ModelClient":
        """Build a client from application configuration."""
        config.validate()
        return cls(
            api_key=config.DEEPSEEK_API_KEY,
            model=config.LLM_MODEL,
            base_url=config.LLM_BASE_URL,
            timeout=config.LLM_TIMEOUT,
            **kwargs,
        )

    def build_request(self, prompt: str, mode: str) -> dict:
        """Assemble the chat completion parameters for a mode."""
        if mode not in DECODING_PARAMS:
            raise ValueError(f"Unknown extraction mode: {mode}")
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPTS[mode]},
                {"role": "user", "content": prompt},
            ],
            **DECODING_PARAMS[mode],
        }

    def complete(self, prompt: str, mode: str) -> str:
        """
        Send the prompt and return the first choice's text.

        Args:
            prompt: User message built by the prompt builder
            mode: "clips" or "topics"

        Returns:
            Raw model text

        Raises:
            UpstreamError: On a non-success response, transport or other SDK failure, or empty content
        """
        request_params = self.build_request(prompt, mode)

        try:
            if self.show_progress:
                response = self._create_with_progress(request_params)
            else:
                response = self._client.chat.completions.create(**request_params)
        except APIStatusError as e:
            message = _upstream_message(e)
            logger.error("Model service returned %s: %s", e.status_code, message)
            raise UpstreamError(message, status_code=e.status_code) from e
        except APIConnectionError as e:
            logger.error("Could not reach model service: %s", e)
            raise UpstreamError(f"Connection error: {e}") from e
        except OpenAIError as e:
            logger.error("Model request failed: %s", e)
            raise UpstreamError(f"Model request failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise UpstreamError("Malformed response from DeepSeek AI") from e

        if not content:
            raise UpstreamError("Empty response from DeepSeek AI")

        logger.debug("Model response content: %s", content)
        return content

    def _create_with_progress(self, request_params: dict):
        """Run the request while a progress bar ticks along in the terminal."""
        with tqdm(
            total=100,
            desc="Analyzing",
            unit="%",
            bar_format="{desc}: {percentage:3.0f}%|{bar}| {elapsed}",
            ncols=80,
            leave=False
        ) as pbar:
            progress_complete = False

            def update_progress():
                """Simulate progress since the API doesn't provide real-time updates."""
                current = 0
                while not progress_complete and current < 95:
                    time.sleep(0.2)
                    current = min(current + 2, 95)
                    pbar.n = int(current)
                    pbar.refresh()

            progress_thread = threading.Thread(target=update_progress, daemon=True)
            progress_thread.start()

            try:
                response = self._client.chat.completions.create(**request_params)
                progress_complete = True
                progress_thread.join(timeout=0.5)
                pbar.n = 100
                pbar.refresh()
                return response
            finally:
                progress_complete = True
                progress_thread.join(timeout=0.5)

