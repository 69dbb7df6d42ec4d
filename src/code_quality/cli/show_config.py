"""``--show-config``: print the effective configuration."""

import json
from pathlib import Path
from typing import Optional

import typer

from ._common import resolve_config


def show_config(config: Optional[Path] = None) -> None:
    """Print the merged configuration as JSON.

    Shows the result of defaults, ~/.code-quality.toml, ./code-quality.toml,
    --config and CODE_QUALITY_* environment variables. Configuration errors
    propagate to the caller.
    """
    settings = resolve_config(config=config)
    typer.echo(json.dumps(settings.to_dict(), indent=2))
