"""
Command Line Interface
======================

Drives the font manager against an in-memory rendering context and prints the
resulting fallback chains. Useful for checking what a machine would install.
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import SettingsError

from .core.config import AppConfig
from .core.exceptions import ConfigurationError, SysFontsError
from .fonts.context import InMemoryContext
from .fonts.manager import FontManager
from .fonts.models import FontDefinitions, FontRegion
from .fonts.presets import parse_preset, parse_region, parse_style, presets_for_region
from .fonts.resolver import SystemFontResolver
from .fonts.utils import log_locale_environment, summarize_definitions

logger = logging.getLogger(__name__)

AUTO = "auto"


def _load_config(config_path: Path | None) -> AppConfig:
    if config_path is not None:
        return AppConfig.from_yaml(config_path)
    try:
        return AppConfig.load_from_env()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e
    except SettingsError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _selection(config: AppConfig, region: str | None, presets: tuple[str, ...], style: str | None):
    """Turn CLI options into (region or None for auto, presets or None, style)."""
    style_value = parse_style(style or config.fonts.default_style)
    if presets:
        return None, [parse_preset(p) for p in presets], style_value

    region_name = region or config.fonts.default_region or AUTO
    if region_name.lower() == AUTO:
        return None, None, style_value
    return parse_region(region_name), None, style_value


def _describe(region: FontRegion | None, presets) -> str:
    if presets:
        return "Presets=" + ",".join(p.name for p in presets)
    if region is None:
        return "Region=Auto (System Locale)"
    return f"Region={region.name}"


def _build_manager(config: AppConfig, ctx: InMemoryContext) -> FontManager:
    return FontManager(ctx, resolver=SystemFontResolver.from_config(config.fonts))


def _echo_context(ctx: InMemoryContext) -> None:
    for line in summarize_definitions(ctx.fonts):
        click.echo(line)


selection_options = [
    click.option("--region", "-r", help="Region name, or 'auto' for the system locale"),
    click.option(
        "--preset",
        "-p",
        "presets",
        multiple=True,
        help="Preset name; repeat for a priority chain (overrides --region)",
    ),
    click.option("--style", "-s", type=click.Choice(["sans", "serif"], case_sensitive=False)),
]


def with_selection_options(func):
    for option in reversed(selection_options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to YAML configuration file",
)
@click.pass_context
def cli(click_ctx, verbose, config_path):
    """System font fallback CLI."""
    try:
        config = _load_config(config_path)
    except SysFontsError as e:
        raise click.ClickException(str(e)) from e

    config.configure_logging()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    click_ctx.obj = config


@cli.command(name="set")
@with_selection_options
@click.pass_obj
def set_fonts(config, region, presets, style):
    """Replace all fonts with system fonts (Set)."""
    try:
        log_locale_environment(config.fonts.locale_env_vars)
        region_value, preset_values, style_value = _selection(config, region, presets, style)

        ctx = InMemoryContext()
        manager = _build_manager(config, ctx)
        if preset_values:
            installed = manager.set_with_presets(preset_values, style_value)
        elif region_value is None:
            installed = manager.set_auto(style_value)
        else:
            installed = manager.set_with_region(region_value, style_value)
    except SysFontsError as e:
        logger.exception(f"Set fonts failed: {e}")
        sys.exit(1)

    click.echo(
        f"Set Fonts: {_describe(region_value, preset_values)}, "
        f"Style={style_value.name}, Installed={len(installed)}"
    )
    for name in installed:
        click.echo(f"  {name}")
    _echo_context(ctx)


@cli.command(name="extend")
@with_selection_options
@click.pass_obj
def extend_fonts(config, region, presets, style):
    """Add system fonts as fallbacks after the defaults (Extend)."""
    try:
        log_locale_environment(config.fonts.locale_env_vars)
        region_value, preset_values, style_value = _selection(config, region, presets, style)

        ctx = InMemoryContext()
        manager = _build_manager(config, ctx)
        definitions = FontDefinitions.default()
        if preset_values:
            installed = manager.extend_with_presets(definitions, preset_values, style_value)
        elif region_value is None:
            installed = manager.extend_auto(definitions, style_value)
        else:
            installed = manager.extend_with_region(definitions, region_value, style_value)
    except SysFontsError as e:
        logger.exception(f"Extend fonts failed: {e}")
        sys.exit(1)

    click.echo(
        f"Extend Fonts: {_describe(region_value, preset_values)}, "
        f"Style={style_value.name}, Added={len(installed)}"
    )
    for name in installed:
        click.echo(f"  {name}")
    _echo_context(ctx)


@cli.command()
@click.pass_obj
def reset(config):
    """Restore the default font definitions (Reset)."""
    ctx = InMemoryContext()
    _build_manager(config, ctx).reset()
    click.echo("Reset to defaults.")
    _echo_context(ctx)


@cli.command()
@with_selection_options
@click.pass_obj
def find(config, region, presets, style):
    """List font candidates without loading them."""
    try:
        region_value, preset_values, style_value = _selection(config, region, presets, style)
        resolver = SystemFontResolver.from_config(config.fonts)
        if preset_values:
            fonts = resolver.find_from_presets(preset_values, style_value)
        elif region_value is None:
            locale_name, region_value, fonts = resolver.find_for_system_locale(style_value)
            click.echo(f"Locale: {locale_name or 'unknown'}")
        else:
            fonts = resolver.find_for_region(region_value, style_value)
    except SysFontsError as e:
        logger.exception(f"Font lookup failed: {e}")
        sys.exit(1)

    click.echo(f"{_describe(region_value, preset_values)}, Style={style_value.name}")
    if not fonts:
        click.echo("No fonts found.")
        return
    for font in fonts:
        click.echo(f"{font.key}\t{font.family}\t{font.source}")


@cli.command()
@click.option("--list", "list_files", is_flag=True, help="Also print every indexed font file")
@click.pass_obj
def info(config, list_files):
    """Show the font directories searched and how many fonts they hold."""
    provider = SystemFontResolver.from_config(config.fonts).provider
    font_info = provider.get_system_font_info()
    existing = set(font_info["existing_directories"])

    click.echo(f"System: {font_info['system']}")
    click.echo("Font directories:")
    for directory in font_info["font_directories"]:
        marker = "ok" if directory in existing else "missing"
        click.echo(f"  [{marker}] {directory}")
    click.echo(f"Indexed fonts: {font_info['total_system_fonts']}")

    if list_files:
        for path in provider.list_fonts():
            click.echo(f"  {path}")


@cli.command()
def presets():
    """List regions and the preset chains they expand to."""
    for region in FontRegion:
        chain = ", ".join(p.value for p in presets_for_region(region))
        click.echo(f"{region.value}: {chain}")


def main():
    cli()


if __name__ == "__main__":
    main()
