"""
Anthropic client access and structured (JSON) generation with retries.

Typed calls go through an instructor-wrapped client; untyped calls use the raw
client and pull JSON out of the reply text.
"""

import json
import re
import time
from typing import Any, Dict, Optional, Type

import anthropic
import instructor
from anthropic import Anthropic
from instructor.exceptions import InstructorRetryException
from pydantic import BaseModel, ValidationError

from agents.config import (
    BRAND_GENERATION_MODEL,
    GENERATION_MAX_TOKENS,
    GENERATION_MAX_RETRIES,
    GENERATION_RETRY_BASE_DELAY,
    GENERATION_VALIDATION_ATTEMPTS,
)
from agents.exceptions import AIGenerationError, AIInvalidResponseError, AIRateLimitError
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

_CODE_BLOCK = re.compile(r'```(?:json)?\s*([\s\S]*?)```')
_JSON_OBJECT = re.compile(r'\{[\s\S]*\}')
_JSON_ARRAY = re.compile(r'\[[\s\S]*\]')

_clients: Dict[str, Any] = {}


def get_client(wrap_with_instructor: bool = True):
    """Shared Anthropic client. Reads ANTHROPIC_API_KEY from the environment.

    If wrap_with_instructor is False the raw client is returned, which is what
    free-form calls without a response_model need.
    """
    if 'raw' not in _clients:
        _clients['raw'] = Anthropic()
    if not wrap_with_instructor:
        return _clients['raw']
    if 'instructor' not in _clients:
        _clients['instructor'] = instructor.from_anthropic(
            _clients['raw'], mode=instructor.Mode.ANTHROPIC_JSON
        )
    return _clients['instructor']


def parse_json_response(content: str) -> Any:
    """Parse JSON out of a model reply.

    Tries, in order: a fenced code block, the outermost {...}, the outermost
    [...], then the whole trimmed text.
    """
    for pattern, group in ((_CODE_BLOCK, 1), (_JSON_OBJECT, 0), (_JSON_ARRAY, 0)):
        match = pattern.search(content)
        if match:
            try:
                return json.loads(match.group(group).strip())
            except ValueError:
                pass

    try:
        return json.loads(content.strip())
    except ValueError as e:
        logger.error(f"Failed to parse JSON response ({len(content)} chars). Preview: {content[:500]}")
        raise AIInvalidResponseError(
            f'Failed to parse AI response as JSON. Response started with: "{content[:100]}..."',
            cause=e,
        )


def _response_text(response) -> str:
    for block in getattr(response, 'content', None) or []:
        if getattr(block, 'type', None) == 'text':
            return block.text
    raise AIInvalidResponseError("No text content in response")


def _map_api_error(e: anthropic.APIError, model: str) -> AIGenerationError:
    status = getattr(e, 'status_code', None)
    if status == 429:
        logger.warning(f"Rate limit exceeded (429): {e}")
        return AIRateLimitError("Rate limit exceeded", cause=e, context={'model': model})
    return AIGenerationError(
        f"AI generation failed: {e}",
        cause=e,
        context={'model': model, 'error_code': status},
    )


def _invalid_response(e: Exception, response_model: Type[BaseModel], model: str) -> AIGenerationError:
    # instructor wraps whatever stopped its last attempt, API errors included
    last = e.args[0] if e.args else None
    if isinstance(last, anthropic.APIError):
        return _map_api_error(last, model)
    return AIInvalidResponseError(
        f"AI response did not match {response_model.__name__}",
        cause=e,
        context={'model': model},
    )


def _create(system_prompt, user_prompt, response_model, model, max_tokens):
    request = dict(
        model=model,
        max_tokens=max_tokens,
        system=system_prompt,
        messages=[{"role": "user", "content": user_prompt}],
    )
    if response_model is None:
        response = get_client(wrap_with_instructor=False).messages.create(**request)
        return parse_json_response(_response_text(response))
    return get_client().messages.create(
        response_model=response_model,
        max_retries=GENERATION_VALIDATION_ATTEMPTS,
        **request,
    )


def generate_structured_content(
    system_prompt: str,
    user_prompt: str,
    response_model: Optional[Type[BaseModel]] = None,
    max_retries: int = GENERATION_MAX_RETRIES,
    model: str = BRAND_GENERATION_MODEL,
    max_tokens: int = GENERATION_MAX_TOKENS,
) -> Any:
    """Ask the model for JSON and return it parsed.

    With a `response_model` the reply is an instance of it, produced by
    instructor. Every failure is retried up to `max_retries` times with
    exponential backoff; the last error is raised once attempts run out.
    """
    last_error: Optional[AIGenerationError] = None

    for attempt in range(max_retries + 1):
        try:
            return _create(system_prompt, user_prompt, response_model, model, max_tokens)
        except (InstructorRetryException, ValidationError) as e:
            last_error = _invalid_response(e, response_model, model)
        except AIGenerationError as e:
            last_error = e
        except anthropic.APIError as e:
            last_error = _map_api_error(e, model)

        if attempt < max_retries:
            delay = GENERATION_RETRY_BASE_DELAY * (2 ** attempt)
            logger.warning(
                f"Generation attempt {attempt + 1}/{max_retries + 1} failed: {last_error.message}; "
                f"retrying in {delay:.1f}s"
            )
            time.sleep(delay)

    raise last_error
