"""
cvdemo CLI
==========

Command-line interface for cvdemo.
"""

from __future__ import annotations

import click

from cvdemo import __version__
from cvdemo.utils.config import LOG_LEVELS


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """cvdemo - OpenCV face detection, contours and warp demo."""
    pass


@main.command()
@click.argument("classifier", required=False)
@click.option("--config", "-f", default=None, help="Path to config file")
@click.option("--source", "-s", default=None, help="Camera index or video file")
@click.option("--output", "-o", default=None, help="Output video path")
@click.option(
    "--max-frames", type=click.IntRange(min=1), default=None, help="Stop after this many frames"
)
@click.option("--headless", is_flag=True, help="Do not open a preview window")
@click.option("--seed", type=int, default=None, help="Seed for the random warp")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity",
)
def run(
    classifier: str | None,
    config: str | None,
    source: str | None,
    output: str | None,
    max_frames: int | None,
    headless: bool,
    seed: int | None,
    log_level: str | None,
) -> None:
    """Run the demo loop. CLASSIFIER is an optional cascade model file."""
    from cvdemo.app import Demo
    from cvdemo.exceptions import CVDemoError
    from cvdemo.utils import get_logger, load_config, log_runtime_info, setup_logging

    cfg = load_config(config)
    if source is not None:
        cfg.camera.source = source
    if output is not None:
        cfg.recorder.path = output
    if max_frames is not None:
        cfg.run.max_frames = max_frames
    if headless:
        cfg.display.enabled = False
    if seed is not None:
        cfg.warp.seed = seed
    if log_level is not None:
        cfg.logging.level = log_level

    setup_logging(level=cfg.logging.level, log_file=cfg.logging.file)
    logger = get_logger("cvdemo.cli")
    log_runtime_info(logger)

    try:
        stats = Demo(cfg, classifier_path=classifier).run()
    except CVDemoError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Recorded {stats.frames} frames to {stats.output}")


@main.command("fetch-model")
@click.option("--config", "-f", default=None, help="Path to config file")
def fetch_model(config: str | None) -> None:
    """Download the default face cascade into the cache."""
    from cvdemo.exceptions import CVDemoError
    from cvdemo.utils import load_config, setup_logging
    from cvdemo.vision import resolve_classifier_path

    cfg = load_config(config)
    setup_logging(level=cfg.logging.level, log_file=cfg.logging.file)

    try:
        path = resolve_classifier_path(
            None,
            cache_dir=cfg.classifier.cache_dir,
            url=cfg.classifier.url,
            timeout=cfg.classifier.timeout,
        )
    except CVDemoError as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(path))


@main.command()
@click.option("--config", "-f", default=None, help="Path to config file")
def info(config: str | None) -> None:
    """Show configuration and system information."""
    import sys

    import cv2

    from cvdemo.utils import load_config

    cfg = load_config(config)

    click.echo("📷 cvdemo Configuration")
    click.echo("=" * 40)
    click.echo(f"Version: {__version__}")
    click.echo(f"OpenCV: {cv2.__version__}")
    click.echo(f"Python: {sys.version}")
    click.echo(f"Platform: {sys.platform}")
    click.echo()
    click.echo("Capture:")
    click.echo(f"  Source: {cfg.camera.source}")
    click.echo(f"  Gamma: {cfg.camera.gamma}")
    click.echo()
    click.echo("Classifier:")
    click.echo(f"  URL: {cfg.classifier.url}")
    click.echo(f"  Cache: {cfg.classifier.cache_dir}")
    click.echo(f"  Scale Factor: {cfg.classifier.scale_factor}")
    click.echo(f"  Min Neighbors: {cfg.classifier.min_neighbors}")
    click.echo()
    click.echo("Output:")
    click.echo(f"  Video: {cfg.recorder.path} ({cfg.recorder.fourcc} @ {cfg.recorder.fps} FPS)")
    click.echo(f"  Window: {cfg.display.title if cfg.display.enabled else 'disabled'}")


if __name__ == "__main__":
    main()
