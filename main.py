#!/usr/bin/env python3
"""
Prompt Template Builder - configuration and command line entry point.

Loads the service configuration (optional INI file plus environment
credential), wires the completion gateway, and offers a small CLI to run the
task analyzer or preview the instruction pair for a prompt request without
calling the completion API.
"""

import os
import sys
import json
import argparse
import configparser
from pathlib import Path
from typing import Dict, Any, Mapping, Optional

from catalogs import create_guidance_catalog, create_tone_catalog
from core.data_models import PromptRequest
from gateway.completion_gateway import CompletionGateway
from llm_providers.factory import ProviderFactory
from prompting.request_builder import PromptRequestBuilder, PromptRequestError
from routers.task_analyzer import TaskAnalyzer


# Environment variables holding the completion API key, highest priority first
API_KEY_ENV_VARS = ("OPENAI_API_KEY", "OPENAI_KEY", "API_KEY")

# Configuration schema for the [COMPLETION] section
CONFIG_SCHEMA = {
    'provider': {
        'type': str,
        'default': 'openai',
        'description': 'Completion API provider'
    },
    'model': {
        'type': str,
        'default': 'gpt-4o',
        'description': 'Model used to generate prompt templates'
    },
    'temperature': {
        'type': float,
        'default': 0.3,
        'description': 'Sampling temperature (0.0-2.0)',
        'validation': lambda x: 0.0 <= x <= 2.0
    },
    'max_tokens': {
        'type': int,
        'default': 2000,
        'description': 'Maximum tokens for the reply',
        'validation': lambda x: 1 <= x <= 16384
    },
    'timeout': {
        'type': float,
        'default': 30.0,
        'description': 'Request timeout in seconds',
        'validation': lambda x: 1 <= x <= 300
    },
    'max_retries': {
        'type': int,
        'default': 0,
        'description': 'Client-level retries for failed calls',
        'validation': lambda x: 0 <= x <= 5
    },
    'base_url': {
        'type': str,
        'default': None,
        'description': 'Optional API base URL override'
    }
}


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the first non-empty credential from API_KEY_ENV_VARS, or None."""
    environ = os.environ if environ is None else environ
    for name in API_KEY_ENV_VARS:
        value = environ.get(name, "").strip()
        if value:
            return value
    return None


def _parse_completion_section(section: Mapping[str, str]) -> Dict[str, Any]:
    """Validate and convert the [COMPLETION] section using CONFIG_SCHEMA.

    Raises:
        ValueError: If any value has the wrong type or is out of range
    """
    settings = {}
    errors = []

    for field_name, schema in CONFIG_SCHEMA.items():
        raw_value = section.get(field_name)
        if raw_value is None or not str(raw_value).strip():
            settings[field_name] = schema['default']
            continue

        try:
            value = schema['type'](str(raw_value).strip())
        except (ValueError, TypeError):
            errors.append(f"Invalid {schema['type'].__name__} value for {field_name}: {raw_value}")
            continue

        if 'validation' in schema and not schema['validation'](value):
            errors.append(f"Invalid value for {field_name}: {raw_value} ({schema['description']})")
            continue

        settings[field_name] = value

    if errors:
        raise ValueError("Configuration errors in [COMPLETION]:\n" + "\n".join(errors))

    return settings


def load_config(config_file: str = "config.ini", environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load configuration from an optional INI file and the environment.

    Args:
        config_file: Path to configuration file; a missing file means defaults
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configuration dictionary with "api_key" and "completion" settings
    """
    config = configparser.ConfigParser()
    config_path = Path(config_file)

    if config_path.exists():
        config.read(config_path)

    section = config['COMPLETION'] if 'COMPLETION' in config else {}
    completion = _parse_completion_section(section)

    return {
        "api_key": resolve_api_key(environ),
        "completion": completion,
        "config_file": str(config_path) if config_path.exists() else None
    }


def create_gateway(config: Dict[str, Any]) -> CompletionGateway:
    """
    Create the completion gateway from loaded configuration.

    Args:
        config: Output of load_config

    Returns:
        CompletionGateway: Gateway bound to the configured provider and model
    """
    completion = config["completion"]
    provider = ProviderFactory.create_provider(
        completion["provider"],
        api_key=config.get("api_key"),
        model_name=completion["model"],
        timeout=completion["timeout"],
        max_retries=completion["max_retries"],
        base_url=completion["base_url"]
    )
    return CompletionGateway(
        provider,
        temperature=completion["temperature"],
        max_tokens=completion["max_tokens"]
    )


def create_builder() -> PromptRequestBuilder:
    """Create a prompt request builder over the default catalogs."""
    return PromptRequestBuilder(create_guidance_catalog(), create_tone_catalog())


def main(argv=None):
    """Command line entry point"""
    parser = argparse.ArgumentParser(description="Prompt template builder utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Recommend a model for a task description")
    analyze_parser.add_argument("task_description", help="Free-text description of the task")

    build_parser = subparsers.add_parser("build", help="Preview the instructions sent to the completion API")
    build_parser.add_argument("--model", required=True, help="Target model identifier")
    build_parser.add_argument("--task-type", required=True, help="Task type (use 'other' with --custom-prompt)")
    build_parser.add_argument("--tone", required=True, help="Tone identifier")
    build_parser.add_argument("--custom-prompt", default=None, help="Existing prompt or free-text task")

    args = parser.parse_args(argv)

    if args.command == "analyze":
        recommendation = TaskAnalyzer().analyze(args.task_description)
        print(json.dumps(recommendation.to_dict(), indent=2))
        return 0

    request = PromptRequest(
        model=args.model,
        task_type=args.task_type,
        tone=args.tone,
        custom_prompt=args.custom_prompt
    )
    try:
        instructions = create_builder().build(request)
    except PromptRequestError as e:
        print(f"Error: {e.field}: {e}", file=sys.stderr)
        return 2

    print("=== System instruction ===")
    print(instructions.system_instruction)
    print("\n=== User instruction ===")
    print(instructions.user_instruction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
