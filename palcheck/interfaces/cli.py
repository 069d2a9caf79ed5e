"""
PalCheck CLI Interface
Launches the TUI and provides one-shot palindrome checks
"""
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from ..core.checker import check_palindrome
from ..core.config import Config
from ..core.logger import PalCheckLogger
from ..core.session import EXAMPLE_INPUTS


# Initialize rich console for pretty output
console = Console()


@click.group(invoke_without_command=True)
@click.option('--base-dir', type=click.Path(file_okay=False), default=None,
              help='Directory for settings and logs (default: ~/.palcheck)')
@click.pass_context
def cli(ctx, base_dir):
    """PalCheck - check whether text reads the same forwards and backwards"""
    ctx.ensure_object(dict)

    config = Config(base_dir=base_dir)
    ctx.obj['config'] = config
    ctx.obj['logger'] = PalCheckLogger(log_dir=str(config.get_log_dir()), console_output=False)

    # No subcommand: start the interactive checker
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@cli.command()
@click.pass_context
def tui(ctx):
    """Start the interactive checker"""
    from .tui.run import run
    run(ctx.obj['config'])


@cli.command()
@click.argument('text', nargs=-1, required=True)
@click.option('--exit-code', is_flag=True, help='Exit with status 1 when the text is not a palindrome')
@click.pass_context
def check(ctx, text, exit_code):
    """Check TEXT once and print the verdict"""
    logger = ctx.obj['logger']
    original = " ".join(text)

    result = check_palindrome(original)
    logger.log_check_completed(original, result)

    if result.is_palindrome:
        verdict = "[bold green]✓ This is a palindrome![/bold green]"
        border = "green"
    else:
        verdict = "[bold red]✗ Not a palindrome[/bold red]"
        border = "red"

    body = f"[yellow]Input:[/yellow] {escape(original)}\n\n{verdict}"
    if result.normalized_text:
        body += (
            f"\n\n[dim]Processed: \"{escape(result.normalized_text)}\" "
            f"({result.length} characters)[/dim]"
        )
    else:
        body += "\n\n[dim]Nothing left to compare after removing punctuation and spaces[/dim]"

    console.print(Panel.fit(body, title="Palindrome Check", border_style=border))

    if exit_code and not result.is_palindrome:
        ctx.exit(1)


@cli.command()
def examples():
    """List the built-in examples with their verdicts"""
    table = Table(title="Examples", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Example")
    table.add_column("Processed", style="dim")
    table.add_column("Palindrome?", justify="center")

    for number, example in enumerate(EXAMPLE_INPUTS, start=1):
        result = check_palindrome(example)
        mark = "[green]yes[/green]" if result.is_palindrome else "[red]no[/red]"
        table.add_row(str(number), escape(example), result.normalized_text, mark)

    console.print("\n")
    console.print(table)
    console.print("\n")


@cli.command()
@click.option('--debounce-ms', type=click.IntRange(min=0), default=None,
              help='Quiet period before a typed check runs, in milliseconds')
@click.pass_context
def config(ctx, debounce_ms):
    """Show or update settings"""
    cfg = ctx.obj['config']

    if debounce_ms is not None:
        cfg.set_debounce_ms(debounce_ms)
        ctx.obj['logger'].info(f"Debounce set to {debounce_ms}ms")
        console.print(f"\n[bold green]✓ Debounce set to {debounce_ms}ms[/bold green]")

    table = Table(title="Settings", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in cfg.get_settings().items():
        table.add_row(key, str(value))

    console.print("\n")
    console.print(table)
    console.print("\n")


def main():
    """Entry point"""
    cli(obj={})


if __name__ == '__main__':
    main()
