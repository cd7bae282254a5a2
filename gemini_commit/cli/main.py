"""CLI Main Entry Point"""

import asyncio
import os
import sys
import time

from gemini_commit.config import API_KEY_ENV, MODEL_ENV, STYLE_ENV, load_api_key, load_config
from gemini_commit.generator import build_prompt, generate_commit_message
from gemini_commit.llm import LLMError, get_client
from gemini_commit.output import dim, print_error, print_message, Spinner

from gemini_commit.cli.args import parse_args
from gemini_commit.cli.commands import display_config, run_setup


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _resolve_settings(args, config):
    """Resolve model, style and timeout.

    Precedence: CLI args > environment variables > config file
    """
    model = args.model or os.environ.get(MODEL_ENV) or config.model
    style = args.style or os.environ.get(STYLE_ENV) or config.style
    timeout = args.timeout or config.timeout
    return model, style, timeout


def _generate_message(client, description, style, timings):
    """Run generation with spinner and return the message."""
    t_gen = time.time()
    with Spinner("Generating commit message..."):
        message = asyncio.run(generate_commit_message(client, description, style))
    timings['generate'] = time.time() - t_gen
    return message


def _print_verbose_stats(args, client, prompt, timings):
    """Print verbose timing and prompt statistics."""
    if not args.verbose:
        return
    print(dim(f"  Model: {client.name}"))
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    print(dim(f"  Timings: generate={timings.get('generate', 0):.2f}s"))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    model, style, timeout = _resolve_settings(args, config)

    api_key = load_api_key()
    if not api_key:
        print_error(f"{API_KEY_ENV} must be set in the environment or a .env file")
        return 1

    client = get_client(api_key, model=model, timeout=timeout)
    timings = {}

    try:
        message = _generate_message(client, args.description, style, timings)
    except LLMError as e:
        print_error(str(e))
        return 1

    print_message(message)
    _print_verbose_stats(args, client, build_prompt(args.description, style), timings)
    return 0


def run() -> None:
    sys.exit(main())
