"""Māorihanga CLI - Main entry point."""

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from maorihanga.phonemes import PHONEME_TABLE
from maorihanga.qc.coverage import check_coverage
from maorihanga.translate import BatchSummary, analyze, translate_lines, translate_to_maorihanga
from maorihanga.utils.io import read_lines, write_jsonl
from maorihanga.utils.log import log_with_context, setup_from_settings


# Root directory
ROOT_DIR = Path(__file__).parent.parent

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {"level": "WARNING", "format": "pretty", "file": None},
    "demo": {"text": "Aotearoa, tau, wai, koe, rua"},
}


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml over the built-in defaults.

    Args:
        settings_path: Settings file (default: etc/settings.yaml)

    Returns:
        Settings with every section present
    """
    explicit = settings_path is not None
    settings_path = settings_path or ROOT_DIR / "etc" / "settings.yaml"
    settings = {section: dict(values) for section, values in DEFAULT_SETTINGS.items()}

    # etc/ only exists in a source checkout; installed copies run on defaults
    if not settings_path.exists():
        if explicit:
            click.echo(f"Warning: settings.yaml not found at {settings_path}, using defaults", err=True)
        return settings

    with settings_path.open(encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        click.echo(f"Warning: {settings_path} is not a mapping, using defaults", err=True)
        return settings

    for section, values in loaded.items():
        # Empty sections and keys keep their defaults
        if values is None:
            continue
        if isinstance(values, dict):
            settings.setdefault(section, {}).update(
                {key: value for key, value in values.items() if value is not None}
            )
        elif section in DEFAULT_SETTINGS:
            click.echo(f"Warning: section '{section}' is not a mapping, using defaults", err=True)
        else:
            settings[section] = values
    return settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Alternative settings.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Transliterate Māori text into Māorihanga syllable blocks."""
    settings = load_settings(settings_path)
    logger = setup_from_settings(settings["logging"], ROOT_DIR, verbose=verbose)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
@click.argument("text", nargs=-1)
@click.pass_context
def translate(ctx: click.Context, text: tuple[str, ...]) -> None:
    """Transliterate TEXT (or stdin when no TEXT is given)."""
    logger = ctx.obj["logger"]
    source = " ".join(text) if text else click.get_text_stream("stdin").read()

    try:
        click.echo(translate_to_maorihanga(source))
    except Exception as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Transliterate the sample sentence from settings.yaml."""
    sample = ctx.obj["settings"]["demo"]["text"]

    click.echo(f"Original Māori: {sample}")
    click.echo("---")
    click.echo("Māorihanga:")
    click.echo(translate_to_maorihanga(sample))


@cli.command()
@click.argument("text")
def syllables(text: str) -> None:
    """Show how TEXT is split into syllables."""
    result = analyze(text)

    if not result.matches:
        click.echo("No syllables found")
        return

    for match, block in zip(result.matches, result.blocks):
        length = "long" if match.long1 else "short"
        if match.vowel2 is not None:
            length += "+long" if match.long2 else "+short"
        click.echo(
            f"{match.text:8s}  onset={match.consonant or '-':3s}  "
            f"vowels={match.vowel1}{match.vowel2 or ''} ({length})  "
            f"layout={block.layout.value}"
        )


@cli.command()
def table() -> None:
    """Print the phoneme table."""
    for key, glyph in PHONEME_TABLE.items():
        click.echo(f"{key:10s} {glyph}")


@cli.command()
@click.argument("text")
@click.pass_context
def check(ctx: click.Context, text: str) -> None:
    """Report characters of TEXT that produce no syllable."""
    logger = ctx.obj["logger"]
    result = check_coverage([text], logger)

    if result.ok:
        click.echo("All characters covered")
        return

    dropped = ", ".join(sorted(result.unexpected_chars))
    click.echo(f"Dropped characters: {dropped}")


@cli.command("file")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSONL records instead of printing",
)
@click.pass_context
def file_command(ctx: click.Context, input_path: Path, output: Path | None) -> None:
    """Transliterate INPUT_PATH line by line."""
    logger = ctx.obj["logger"]

    try:
        lines = read_lines(input_path)

        if output is None:
            for rendered in translate_lines(lines):
                click.echo(rendered)
            return

        summary = BatchSummary()

        def records() -> Iterator[dict[str, Any]]:
            progress = tqdm(lines, desc="Transliterating", unit="line")
            for line_no, line in enumerate(progress, start=1):
                result = analyze(line)
                summary.add(result)
                yield {
                    "line": line_no,
                    "source": line,
                    "maorihanga": result.output,
                    "skipped": "".join(char for _pos, char in result.skipped),
                }

        count = write_jsonl(output, records())
        log_with_context(
            logger,
            "info",
            "Wrote transliterations",
            input=str(input_path),
            output=str(output),
            records=count,
            summary=summary,
        )
        click.echo(f"Wrote {count} lines to {output}")

    except Exception as e:
        logger.error(f"File transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
