"""Command-line interface for the configurable base64 codec."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.traceback import install as install_rich_traceback

from .alphabet import PRESETS, AlphabetConfig, Padding
from .errors import ConfigError, DecodeError
from .logging_setup import configure_logging
from .settings import CodecSettings, parse_padding_mode, parse_preset
from .transcoder import decode_to_bytes, encode_to_bytes

install_rich_traceback(suppress=[typer])

app = typer.Typer(
    help="Encode and decode base64 with configurable alphabets and padding.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

DEMO_ENCODED = "SGVsbG8sIFdvcmxkIQ"
DEMO_TEXT = "Hello, World!"


def _print_data(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _current_config(ctx: typer.Context) -> AlphabetConfig:
    return ctx.obj["config"]


def _read_input(text: Optional[str], input_file: Optional[Path]) -> bytes:
    """Take the payload from the positional argument or from a file, not both."""
    if text is not None and input_file is not None:
        raise typer.BadParameter("Provide either TEXT or --input-file, not both.")
    if input_file is not None:
        return input_file.read_bytes()
    if text is None:
        raise typer.BadParameter("Provide TEXT or --input-file.")
    return text.encode("utf-8")


@app.callback()
def main_callback(
    ctx: typer.Context,
    preset: Optional[str] = typer.Option(
        None,
        "--preset",
        "-p",
        help="Alphabet preset: standard, url or mime. Defaults to RANGED_B64_PRESET or 'standard'.",
    ),
    padding: Optional[str] = typer.Option(
        None,
        "--padding",
        help="Override the preset's padding policy: required, optional or none.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level. Defaults to RANGED_B64_LOG_LEVEL or WARNING.",
    ),
    dotenv_path: Optional[Path] = typer.Option(
        None,
        "--dotenv-path",
        help="Optional path to a .env file with RANGED_B64_* settings.",
    ),
) -> None:
    """Resolve settings from the environment and command-line overrides."""
    try:
        settings = CodecSettings.from_env(dotenv_path=str(dotenv_path) if dotenv_path else None)
        settings = CodecSettings(
            preset=parse_preset(preset) if preset else settings.preset,
            padding_mode=parse_padding_mode(padding) if padding else settings.padding_mode,
            log_level=(log_level or settings.log_level).upper(),
        )
        configure_logging(settings.log_level)
        config = settings.build_config()
    except (RuntimeError, ConfigError) as exc:
        err_console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=2) from exc

    logger.info("Using preset %s with padding %s", settings.preset, config.padding)
    ctx.obj = {"config": config}


@app.command()
def encode(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to encode (UTF-8)."),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input-file",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Encode the raw bytes of this file instead of TEXT.",
    ),
) -> None:
    """Encode text or a file."""
    raw = _read_input(text, input_file)
    encoded = encode_to_bytes(_current_config(ctx), raw)
    _print_data(encoded.decode("latin-1"))


@app.command()
def decode(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Encoded text to decode."),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input-file",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Decode the contents of this file instead of TEXT. Trailing whitespace is ignored.",
    ),
    hex_output: bool = typer.Option(
        False,
        "--hex",
        help="Print decoded bytes as hex instead of UTF-8 text.",
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output-file",
        "-o",
        dir_okay=False,
        writable=True,
        help="Write decoded bytes to this file.",
    ),
) -> None:
    """Decode text or a file."""
    encoded = _read_input(text, input_file).rstrip()
    try:
        decoded = decode_to_bytes(_current_config(ctx), encoded)
    except DecodeError as exc:
        err_console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from exc

    if output_file is not None:
        output_file.write_bytes(decoded)
        err_console.print(f"[green]Wrote {len(decoded)} bytes to {output_file}[/green]")
        return
    if hex_output:
        _print_data(decoded.hex())
        return
    try:
        _print_data(decoded.decode("utf-8"))
    except UnicodeDecodeError:
        err_console.print("[yellow]Decoded bytes are not valid UTF-8; printing hex.[/yellow]")
        _print_data(decoded.hex())


@app.command()
def presets() -> None:
    """List the built-in alphabet presets."""
    table = Table(title="Alphabet presets")
    table.add_column("Name", style="bold cyan")
    table.add_column("Alphabet")
    table.add_column("Padding")
    for name in PRESETS:
        config = AlphabetConfig.preset(name)
        table.add_row(name, config.alphabet.decode("ascii"), str(config.padding))
    console.print(table)


@app.command()
def demo() -> None:
    """Decode and encode the 'Hello, World!' sample."""
    unpadded = AlphabetConfig.standard().with_padding(Padding.none())
    output = decode_to_bytes(unpadded, DEMO_ENCODED).decode("utf-8")
    _print_data(f"Output: {output}")

    encoded = encode_to_bytes(AlphabetConfig.standard(), DEMO_TEXT.encode("utf-8"))
    _print_data(f"Base64: {encoded.decode('ascii')}")


def main() -> None:  # pragma: no cover - entrypoint wrapper
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
