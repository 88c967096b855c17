#!/usr/bin/env python3
"""
Param Permuter - URL parameter permutation generator

Main CLI entry point for the application.
"""

import sys
from pathlib import Path

import click
from rich.panel import Panel
from rich.table import Table

from param_permuter import __version__
from param_permuter.core.config import GenerationConfig, STRATEGY_ORDER, ValueStrategy, get_settings
from param_permuter.core.exceptions import (
    ConfigurationError, ErrorCode, InputOutputError, ProcessingError
)
from param_permuter.core.file_io import (
    ensure_output_available, load_urls, load_wordlist, write_output
)
from param_permuter.core.logger import configure_logging, get_logger, stderr_console
from param_permuter.generation.generator import PermutationGenerator

console = stderr_console
logger = get_logger()

GENERATE_STRATEGY_HELP = """Generation strategy, repeatable or comma separated:
normal: overwrite existing parameters and add wordlist parameters;
combine: pitchfork over the existing parameters;
ignore: keep the URL and append wordlist parameters"""

VALUE_STRATEGY_HELP = """How combine treats existing values:
replace: replace the value; suffix: append to the value"""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
              default=None, help='Set logging level')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Path to log file')
@click.option('--silent', is_flag=True, help='Only show errors and hide the banner')
@click.pass_context
def cli(ctx, debug, log_level, log_file, silent):
    """Param Permuter - generate URL permutations by injecting parameters"""

    ctx.ensure_object(dict)

    settings = get_settings()
    level = log_level or settings.log_level
    if debug or settings.debug:
        level = 'DEBUG'
    elif silent:
        level = 'ERROR'

    ctx.obj['debug'] = debug or settings.debug
    ctx.obj['silent'] = silent

    configure_logging(
        level=level,
        log_file=Path(log_file) if log_file else None,
        rich_console=True,
        show_time=debug,
        show_path=debug
    )

    if not silent:
        display_banner()


def display_banner():
    """Display the Param Permuter banner."""
    banner = f"""
[bold cyan]Param Permuter[/bold cyan] v{__version__}
[dim]URL parameter permutation generator[/dim]

[yellow]Use responsibly and only on systems you own or have permission to test[/yellow]
"""
    console.print(Panel(banner, title="Welcome", border_style="blue"))


@cli.command()
@click.option('--list', '-l', 'list_path', help='List of URLs to edit (stdin could be used alternatively)')
@click.option('--parameters', '-p', 'parameters_path', help='Parameter wordlist')
@click.option('--chunk', '-c', type=int, default=None, help='Number of parameters in each URL [default: 15]')
@click.option('--value', '-v', 'values', multiple=True, help='Value for the parameters (repeatable)')
@click.option('--generate-strategy', '-gs', 'strategies', multiple=True, help=GENERATE_STRATEGY_HELP)
@click.option('--value-strategy', '-vs',
              type=click.Choice([s.value for s in ValueStrategy]),
              default=None, help=VALUE_STRATEGY_HELP + ' [default: suffix]')
@click.option('--output', '-o', help='File to write output results')
@click.option('--double-encode', '-de', is_flag=True, help='Double encode the values')
@click.option('--skip-invalid', is_flag=True, help='Skip invalid URLs instead of aborting')
@click.pass_context
def generate(ctx, list_path, parameters_path, chunk, values, strategies, value_strategy,
             output, double_encode, skip_invalid):
    """Generate URL permutations from a URL list and a parameter wordlist."""

    settings = get_settings()

    try:
        stdin = sys.stdin
        validate_inputs(list_path, parameters_path, output, stdin)

        if not strategies:
            raise ConfigurationError("Generation strategy is not given", ErrorCode.CONFIG_MISSING_REQUIRED)
        if not values:
            raise ConfigurationError("No values are given", ErrorCode.CONFIG_MISSING_REQUIRED)

        config = GenerationConfig.build(
            chunk=chunk if chunk is not None else settings.chunk,
            values=list(values),
            value_strategy=value_strategy or settings.value_strategy,
            double_encode=double_encode,
            strategies=list(strategies),
            skip_invalid=skip_invalid or settings.skip_invalid,
        )

        urls = load_urls(list_path, stdin)
        wordlist = load_wordlist(parameters_path)
        logger.info(
            f"Loaded {len(urls)} URLs and {len(wordlist)} parameters "
            f"(strategies: {', '.join(s.value for s in config.strategies)})"
        )

        generator = PermutationGenerator(config)
        generated = generator.generate(urls, wordlist)

        write_output(generated, output, sys.stdout)

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        sys.exit(1)
    except ProcessingError as e:
        logger.error(f"Processing error: {e.message}")
        sys.exit(1)
    except InputOutputError as e:
        logger.error(f"I/O error: {e.message}")
        if ctx.obj.get('debug'):
            console.print_exception()
        sys.exit(1)


def validate_inputs(list_path, parameters_path, output, stdin):
    """Check the file options before anything is read."""
    if not list_path and (stdin is None or stdin.isatty()):
        raise ConfigurationError("No URLs were given", ErrorCode.CONFIG_MISSING_REQUIRED)

    ensure_output_available(output)

    if list_path and not Path(list_path).is_file():
        raise ConfigurationError("URL list does not exist", ErrorCode.CONFIG_FILE_NOT_FOUND, path=list_path)

    if not parameters_path:
        raise ConfigurationError("Parameter wordlist file is not given", ErrorCode.CONFIG_MISSING_REQUIRED)

    if not Path(parameters_path).is_file():
        raise ConfigurationError(
            "Parameter wordlist file does not exist", ErrorCode.CONFIG_FILE_NOT_FOUND, path=parameters_path
        )


@cli.command()
def config():
    """Show current configuration."""
    settings = get_settings()

    table = Table(title="Param Permuter Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("App Name", settings.app_name)
    table.add_row("Version", settings.version)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Default Chunk", str(settings.chunk))
    table.add_row("Default Value Strategy", settings.value_strategy.value)
    table.add_row("Skip Invalid URLs", str(settings.skip_invalid))
    table.add_row("Strategy Order", ", ".join(s.value for s in STRATEGY_ORDER))

    console.print(table)


@cli.command()
def version():
    """Show version information."""
    info = f"""
[bold]Param Permuter[/bold] v{__version__}

[cyan]Strategies:[/cyan]
• normal  - overwrite existing parameters, inject wordlist parameters
• combine - modify one existing parameter per URL
• ignore  - keep existing parameters, inject wordlist parameters
"""
    console.print(Panel(info, title="Version Information", border_style="blue"))


if __name__ == '__main__':
    cli()
