"""Run configuration.

Values are taken from command line flags, then from GitHub Action inputs
(``INPUT_<NAME>`` environment variables), then from defaults. The result is a
frozen ``SummaryConfig`` validated before anything touches git or the model.
"""

import argparse
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from commit_ticker.core.errors import ValidationError
from commit_ticker.git.domain.value_objects import PathFilter
from commit_ticker.summarization.domain.value_objects import PromptSpec
from commit_ticker.summarization.prompts import DEFAULT_SYSTEM_PROMPT

DEFAULT_END_REF = "HEAD"
DEFAULT_MAX_DIFF_CHARS = 6000
DEFAULT_MAX_OUTPUT_TOKENS = 800
DEFAULT_TEMPERATURE = 0.2
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0
DEFAULT_PROVIDER = "github"

PROVIDER_ALIASES = {
    "github": "github",
    "github-models": "github",
    "openai": "openai",
    "gpt": "openai",
    "anthropic": "anthropic",
    "claude": "anthropic",
}

DEFAULT_MODELS = {
    "github": "openai/gpt-4o-mini",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-latest",
}

API_KEY_ENV_VARS = {
    "github": "GITHUB_TOKEN",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}

TRUE_LITERALS = ("true", "True", "TRUE")
FALSE_LITERALS = ("false", "False", "FALSE")


def normalize_provider(provider: str) -> str:
    """Map a provider name or alias to its canonical name."""
    canonical = PROVIDER_ALIASES.get(provider.strip().lower())
    if canonical is None:
        raise ValidationError(
            f'"provider" must be one of {", ".join(sorted(set(PROVIDER_ALIASES)))}. '
            f'Received "{provider}".'
        )
    return canonical


def parse_positive_int(name: str, raw: str | int) -> int:
    """Parse a strictly positive integer setting."""
    try:
        value = int(str(raw).strip())
    except ValueError:
        value = 0
    if value <= 0:
        raise ValidationError(f'"{name}" must be a positive integer. Received "{raw}".')
    return value


def parse_temperature(raw: str | float) -> float:
    """Parse a sampling temperature between 0 and 2."""
    try:
        value = float(str(raw).strip())
    except ValueError:
        value = math.nan
    if math.isnan(value) or not MIN_TEMPERATURE <= value <= MAX_TEMPERATURE:
        raise ValidationError(
            f'"temperature" must be a number between 0 and 2. Received "{raw}".'
        )
    return value


def parse_bool(name: str, raw: str | None, default: bool) -> bool:
    """Parse a boolean using the GitHub Actions literal rules."""
    if raw is None or raw == "":
        return default
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise ValidationError(
        f'"{name}" must be one of true, True, TRUE, false, False, FALSE. Received "{raw}".'
    )


def get_action_input(environ: Mapping[str, str], name: str) -> str:
    """Read a GitHub Action input the way the runner exposes it."""
    return environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


@dataclass(frozen=True)
class ModelSettings:
    """Inference parameters."""

    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    api_key: str = field(default="", repr=False)
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate the settings."""
        if self.provider not in DEFAULT_MODELS:
            raise ValidationError(f'Unknown provider "{self.provider}".')
        if not self.model:
            raise ValidationError('"model" cannot be empty.')
        if not MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE:
            raise ValidationError(
                f'"temperature" must be a number between 0 and 2. Received "{self.temperature}".'
            )
        if self.max_output_tokens <= 0:
            raise ValidationError(
                '"max_output_tokens" must be a positive integer. '
                f'Received "{self.max_output_tokens}".'
            )


@dataclass(frozen=True)
class SummaryConfig:
    """Everything a summarization run needs, validated at construction."""

    start_ref: str
    end_ref: str = DEFAULT_END_REF
    include_start_commit: bool = True
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS
    path_filter: PathFilter = field(default_factory=PathFilter)
    prompt: PromptSpec = field(default_factory=PromptSpec)
    model: ModelSettings = field(default_factory=ModelSettings)
    repo_path: Path = Path(".")
    prompt_only: bool = False

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not self.start_ref:
            raise ValidationError('"from" is required.')
        if not self.end_ref:
            raise ValidationError('"to" cannot be empty.')
        if self.max_diff_chars <= 0:
            raise ValidationError(
                f'"max_diff_chars" must be a positive integer. Received "{self.max_diff_chars}".'
            )


def _pick(cli_value: str | None, environ: Mapping[str, str], input_name: str) -> str:
    """Return the flag value when given, the action input otherwise."""
    if cli_value is not None:
        return cli_value.strip()
    return get_action_input(environ, input_name)


def load_config(args: argparse.Namespace, environ: Mapping[str, str]) -> SummaryConfig:
    """
    Build and validate the run configuration.

    Args:
        args: Parsed command line arguments
        environ: Process environment (action inputs and API keys)

    Returns:
        Validated SummaryConfig

    Raises:
        ValidationError: If any value is malformed or a required value is missing
    """
    start_ref = _pick(args.from_ref, environ, "from")
    if not start_ref:
        raise ValidationError('"from" is required. Pass it as an argument or as the "from" input.')

    end_ref = _pick(args.to_ref, environ, "to") or DEFAULT_END_REF

    if args.include_start_commit is not None:
        include_start_commit = args.include_start_commit
    else:
        include_start_commit = parse_bool(
            "include_start_commit",
            get_action_input(environ, "include_start_commit"),
            default=True,
        )

    max_diff_chars = parse_positive_int(
        "max_diff_chars",
        _pick(args.max_diff_chars, environ, "max_diff_chars") or DEFAULT_MAX_DIFF_CHARS,
    )
    max_output_tokens = parse_positive_int(
        "max_output_tokens",
        _pick(args.max_output_tokens, environ, "max_output_tokens") or DEFAULT_MAX_OUTPUT_TOKENS,
    )
    temperature = parse_temperature(
        _pick(args.temperature, environ, "temperature") or DEFAULT_TEMPERATURE
    )

    provider = normalize_provider(_pick(args.provider, environ, "provider") or DEFAULT_PROVIDER)
    model = _pick(args.model, environ, "model") or DEFAULT_MODELS[provider]

    api_key_var = API_KEY_ENV_VARS[provider]
    api_key = environ.get(api_key_var, "")
    if not api_key and not args.prompt_only:
        raise ValidationError(
            f"{api_key_var} environment variable is required to call the {provider} provider."
        )

    if args.paths:
        path_filter = PathFilter(tuple(path.strip() for path in args.paths if path.strip()))
    else:
        path_filter = PathFilter.from_lines(get_action_input(environ, "paths"))

    return SummaryConfig(
        start_ref=start_ref,
        end_ref=end_ref,
        include_start_commit=include_start_commit,
        max_diff_chars=max_diff_chars,
        path_filter=path_filter,
        prompt=PromptSpec(
            base_instructions=_pick(args.prompt, environ, "prompt") or None,
            extra_guidance=_pick(args.extra_instructions, environ, "extra_instructions")
            or None,
        ),
        model=ModelSettings(
            provider=provider,
            model=model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            system_prompt=_pick(args.system_prompt, environ, "system_prompt")
            or DEFAULT_SYSTEM_PROMPT,
            api_key=api_key,
            timeout=args.timeout,
        ),
        repo_path=Path(args.repo),
        prompt_only=args.prompt_only,
    )
