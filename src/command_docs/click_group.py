"""Custom Click group with automatic help display on errors.

This module provides a custom Click Group class that displays the help of
the failing command right after a usage error.
"""

from typing import Any

import click


class DocsGroup(click.Group):
    """Custom Click group that auto-displays contextual help on usage errors."""

    def invoke(self, ctx: click.Context) -> Any:
        """Show the error and the most specific help on usage errors."""
        try:
            return super().invoke(ctx)
        except click.exceptions.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)

            # Subcommand context if available
            error_ctx = e.ctx if e.ctx else ctx

            click.echo("", err=True)
            click.echo(error_ctx.get_help(), err=True)
            error_ctx.exit(e.exit_code)
            return None  # Explicit return for code clarity (never reached)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Override to show help when command is not found."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            # Let parameter errors propagate to invoke()
            if isinstance(e, click.exceptions.MissingParameter | click.exceptions.BadParameter):
                raise
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo("", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)
            return None, None, []  # Explicit return for code clarity (never reached)
