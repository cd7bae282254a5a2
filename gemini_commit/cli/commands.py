"""CLI Commands"""

import os
import sys

from gemini_commit.config import (
    API_KEY_ENV, MODEL_ENV, STYLE_ENV, Config, load_api_key, load_config, save_config, get_config_path,
)
from gemini_commit.output import bold, dim, info, print_error, print_success


def display_config() -> int:
    """Display current configuration. The API key itself is never shown."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gcmrc found)")

    env_overrides = [(name, os.environ.get(name)) for name in (MODEL_ENV, STYLE_ENV)]
    env_overrides = [(name, value) for name, value in env_overrides if value]
    if env_overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in env_overrides:
            print(f"    {name}={value}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    model:   {info(config.model)}")
    print(f"    style:   {info(config.style)}")
    print(f"    timeout: {info(f'{config.timeout:g}s')}")
    print(f"    {API_KEY_ENV}: {info('set') if load_api_key() else dim('not set')}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gcmrc (in current directory)")
    print(f"    Global: ~/.gcmrc")
    print(f"\n  {dim('Run')} gcm --setup {dim('to configure')}\n")

    return 0


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    current = load_config()
    print(f"{bold('Setup Wizard')}\n")

    try:
        print("Recommended styles: conventional commit, simple, detailed\n")
        style = input(f"Default style (Enter for '{current.style}'): ").strip() or current.style
        model = input(f"Gemini model (Enter for '{current.model}'): ").strip() or current.model
        timeout_input = input(f"Request timeout in seconds (Enter for {current.timeout:g}): ").strip()
    except (KeyboardInterrupt, EOFError):
        print()
        print_error("Setup cancelled, nothing saved.")
        return 1

    try:
        timeout = float(timeout_input) if timeout_input else current.timeout
    except ValueError:
        timeout = current.timeout

    config = Config(model=model, style=style, timeout=timeout)
    for warning in config.validate():
        print(f"Config warning: {warning}", file=sys.stderr)
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0
