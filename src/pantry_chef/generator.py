from __future__ import annotations
import json
import logging
import anthropic
from pydantic import ValidationError
from pantry_chef.config import Config
from pantry_chef.models import MealPlanDraft, MealPlanRequest, RecipeDraft, RecipeRequest, normalize_ingredients
from pantry_chef.prompts import render_plan_prompt, render_prompt

logger = logging.getLogger(__name__)

MIN_INGREDIENTS = 2


class GenerationError(Exception):
    pass


class InputValidationError(GenerationError):
    pass


class ConfigurationError(GenerationError):
    pass


class ProviderError(GenerationError):
    pass


class MalformedResponseError(GenerationError):
    pass


def validate_request(request: RecipeRequest) -> list[str]:
    """Return the normalized ingredient list, or raise if there are too few to cook with."""
    ingredients = normalize_ingredients(request.ingredients)
    if len(ingredients) < MIN_INGREDIENTS:
        raise InputValidationError(f"Please add at least {MIN_INGREDIENTS} ingredients")
    return ingredients


def request_completion(prompt: str, config: Config) -> str:
    if not config.anthropic_api_key:
        raise ConfigurationError("ANTHROPIC_API_KEY is not configured")

    client = anthropic.Anthropic(
        api_key=config.anthropic_api_key,
        max_retries=0,
        timeout=config.request_timeout,
    )
    logger.debug("Requesting recipe from %s (%d prompt chars)", config.anthropic_model, len(prompt))
    try:
        response = client.messages.create(
            model=config.anthropic_model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            system=config.system_prompt,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        raise ProviderError(f"Recipe provider request failed: {e}") from e

    text = "".join(
        block.text for block in response.content or [] if isinstance(getattr(block, "text", None), str)
    )
    if not text.strip():
        raise ProviderError("No response from recipe provider")
    logger.debug("Received %d chars from provider", len(text))
    return text


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name}")


def _load_object(raw_text: str) -> dict:
    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedResponseError(f"Malformed provider response: not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MalformedResponseError("Malformed provider response: expected a JSON object")
    return data


def parse_recipe(raw_text: str) -> RecipeDraft:
    data = _load_object(raw_text)
    try:
        return RecipeDraft.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Malformed provider response: {e}") from e


def parse_meal_plan(raw_text: str) -> MealPlanDraft:
    data = _load_object(raw_text)
    try:
        return MealPlanDraft.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Malformed provider response: {e}") from e


def generate_recipe(request: RecipeRequest, config: Config) -> RecipeDraft:
    ingredients = validate_request(request)
    spices = [s.strip() for s in request.spices if s.strip()]
    prompt = render_prompt(ingredients, spices, request.constraints)
    return parse_recipe(request_completion(prompt, config))


def generate_meal_plan(request: MealPlanRequest, config: Config) -> MealPlanDraft:
    ingredients = normalize_ingredients(request.ingredients)
    prompt = render_plan_prompt(request, ingredients)
    return parse_meal_plan(request_completion(prompt, config))
