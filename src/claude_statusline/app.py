"""Application entry point: one-shot statusline or a long-lived watcher."""

import argparse
import logging
import signal
import sys

from PySide6.QtCore import QCoreApplication

from claude_statusline.services.config_manager import ConfigManager
from claude_statusline.services.git_resolver import resolve_git_branch
from claude_statusline.services.input_parser import parse_status_input
from claude_statusline.services.statusline import build_statusline
from claude_statusline.services.transcript_cache import TranscriptCache
from claude_statusline.services.transcript_watcher import TranscriptWatcher
from claude_statusline.types.status_input import StatusInput

logger = logging.getLogger(__name__)

PARSE_ERROR_LINE = "Parse Error"


def _setup_application_identity():
    QCoreApplication.setApplicationName("claude-statusline")
    QCoreApplication.setOrganizationName("claude-statusline")


def _configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claude-statusline",
        description="Render a one-line status summary for a Claude Code session.",
    )
    parser.add_argument(
        "--watch",
        metavar="TRANSCRIPT",
        help="keep running and print a new line whenever the transcript changes",
    )
    parser.add_argument("--debug", action="store_true", help="log diagnostics to stderr")
    return parser


def render_once(raw_input: str, config: ConfigManager, cache: TranscriptCache | None = None) -> str:
    """Render the statusline for one hook payload."""
    try:
        status_input = parse_status_input(raw_input)
    except ValueError as e:
        logger.warning("%s", e)
        return PARSE_ERROR_LINE

    if cache is None:
        cache = TranscriptCache(config.engine_config())
    snapshot = cache.get_snapshot(status_input.transcript_path)
    return build_statusline(
        status_input,
        snapshot,
        branch=resolve_git_branch(status_input.project_dir),
        separator=config.get_string("display/separator"),
        show_recent_errors=config.get_bool("status/showRecentErrors"),
    )


def _run_watch(transcript_path: str, config: ConfigManager) -> int:
    app = QCoreApplication(sys.argv[:1])

    # Allow Ctrl+C to stop the event loop
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    status_input = StatusInput(transcript_path=transcript_path)
    separator = config.get_string("display/separator")
    show_recent_errors = config.get_bool("status/showRecentErrors")

    watcher = TranscriptWatcher(config.engine_config())
    watcher.snapshot_changed.connect(
        lambda snapshot: print(
            build_statusline(
                status_input,
                snapshot,
                separator=separator,
                show_recent_errors=show_recent_errors,
            ),
            flush=True,
        )
    )
    config.settings_changed.connect(lambda _key: watcher.set_config(config.engine_config()))
    watcher.start(transcript_path)

    ret = app.exec()
    watcher.stop()
    return ret


def run(argv: list[str] | None = None) -> int:
    """Launch the statusline."""
    args = _build_parser().parse_args(argv)
    _setup_application_identity()
    config = ConfigManager()
    _configure_logging(args.debug or config.get_bool("advanced/debugLogging"))

    if args.watch:
        return _run_watch(args.watch, config)

    print(render_once(sys.stdin.read(), config))
    return 0
