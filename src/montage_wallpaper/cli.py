"""CLI argument parsing and main entry point."""

import argparse
import sys
from pathlib import Path

import montage_wallpaper.config as mw_config
from montage_wallpaper.app import WallpaperApp
from montage_wallpaper.errors import ConfigError
from montage_wallpaper.logging_utils import logger, set_verbosity
from montage_wallpaper.runtime import resolve_project_version


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="montage-wallpaper",
        description="Compose source images into wallpaper montages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "montage-wallpaper --config wallpaper.toml "
            "--image cam/front=front.jpg --image cam/back=back.jpg\n"
            "montage-wallpaper --config wallpaper.toml --wallpaper screen1 "
            "--image cam/front=front.jpg\n"
            "montage-wallpaper --config wallpaper.toml "
            "--validate-config-only"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str, required=True,
        help="Path to wallpaper.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and layouts, then exit")

    inputs = p.add_argument_group("inputs")
    inputs.add_argument(
        "--image", action="append", default=[], metavar="SOURCE=PATH",
        help=(
            "Feed the image file at PATH as the latest image of SOURCE. "
            "May be repeated."
        ))
    inputs.add_argument(
        "--wallpaper", type=str, default=None, metavar="ID",
        help="Only update this wallpaper (default: all wallpapers)")

    codec = p.add_argument_group("codec")
    codec.add_argument(
        "--codec", choices=["pillow", "opencv"], default=argparse.SUPPRESS,
        help="Override the codec from the config file")

    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging")
    return p


def parse_image_arg(value: str) -> tuple[str, Path]:
    """
    Split a SOURCE=PATH argument.

    The split happens at the last '=' so sources may contain '='.
    """
    source, sep, path = value.rpartition("=")
    if not sep or not source or not path:
        msg = f"Expected SOURCE=PATH, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return source, Path(path)


def run_from_args(args: argparse.Namespace) -> int:
    """Build the montages, feed the images and export what changed."""
    set_verbosity(verbose=args.verbose)
    app_cfg = mw_config.ConfigLoader.load(args.config)
    if "codec" in args:
        app_cfg = app_cfg.model_copy(update={"codec": args.codec})

    try:
        app = WallpaperApp.from_config(app_cfg)
    except ConfigError as exc:
        logger.error("Invalid montage layout: %s", exc)
        return 1

    if args.validate_config_only:
        logger.info("Config %s validated successfully.", args.config)
        return 0

    targets = app.wallpaper_ids
    if args.wallpaper is not None:
        if app.get_wallpaper(args.wallpaper) is None:
            logger.error("Unknown wallpaper: %s", args.wallpaper)
            return 1
        targets = [args.wallpaper]

    failures = 0
    for raw in args.image:
        source, path = parse_image_arg(raw)
        data = path.read_bytes()
        for wallpaper_id in targets:
            result = app.handle_input_image(wallpaper_id, source, data)
            if result is not None and not result.ok:
                failures += 1

    exported = app.check_update_wallpapers()
    for wallpaper_id in exported:
        logger.info("Wallpaper %s exported", wallpaper_id)
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> None:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    for raw in args.image:
        try:
            parse_image_arg(raw)
        except argparse.ArgumentTypeError as exc:
            arg_parser.error(str(exc))

    try:
        code = run_from_args(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        code = 1
    sys.exit(code)


if __name__ == "__main__":  # pragma: no cover
    main()
