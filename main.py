import logging
import sys
from pathlib import Path
from typing import Optional

import click
from textual.app import App, ComposeResult
from textual.binding import Binding

from config import MuseConfig, SPLIT_MAX, SPLIT_MIN, VALID_LOG_LEVELS
from models import Catalog, RunState, ViewState
from services import ActivationHandler, MusicLibrary, SelectionRecorder
from services.errors import ConfigurationError, MetadataError
from views import DetailPane, LibraryView

__version__ = "0.1.0"

LOG_DIR = Path.home() / '.local' / 'share' / 'muse'
LOG_FILE = LOG_DIR / 'muse.log'

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Path = LOG_FILE) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file)
        ]
    )


class MuseApp(App, inherit_bindings=False):
    """Terminal browser for the tracks found under a directory."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("down,j", "next_row", "Down", priority=True),
        Binding("up,k", "previous_row", "Up", priority=True),
        Binding("enter", "activate", "Select", priority=True),
    ]

    def __init__(
        self,
        catalog: Catalog,
        split_percent: int = 50,
        activation_handler: Optional[ActivationHandler] = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.catalog = catalog
        self.split_percent = split_percent
        self.activation_handler = activation_handler or SelectionRecorder()
        self.view_state = ViewState(row_count=len(catalog))
        self.run_state = RunState.RUNNING
        logger.info(f"Loaded {len(catalog)} tracks from {catalog.root}")

    def compose(self) -> ComposeResult:
        """Compose the library table above the detail pane."""
        yield LibraryView(self.catalog, id="library")
        yield DetailPane(id="detail")

    def on_mount(self) -> None:
        library_view = self.query_one("#library", LibraryView)
        library_view.styles.height = f"{self.split_percent}%"

        if self.catalog.skipped:
            count = len(self.catalog.skipped)
            self.notify(
                f"Skipped {count} unreadable file{'s' if count != 1 else ''}\n\n"
                f"Check {LOG_FILE} for details.",
                severity="warning",
                timeout=8
            )

    def action_quit(self) -> None:
        """Leave the loop with a clean exit code."""
        self.run_state = RunState.EXITING
        logger.info("Quit requested")
        self.exit(return_code=0)

    def action_next_row(self) -> None:
        """Move selection down, wrapping to the first row (j key)."""
        if not self.catalog:
            return
        self.view_state.next()
        self._sync_selection()

    def action_previous_row(self) -> None:
        """Move selection up, wrapping to the last row (k key)."""
        if not self.catalog:
            return
        self.view_state.previous()
        self._sync_selection()

    def action_activate(self) -> None:
        """Hand the selected entry to the activation handler."""
        if not self.catalog:
            return
        entry = self.catalog.get(self.view_state.activate())
        if entry is None:
            logger.debug("Activate pressed with no selection")
            return
        self.activation_handler(entry)

    def _sync_selection(self) -> None:
        library_view = self.query_one("#library", LibraryView)
        library_view.selected_index = self.view_state.selected_index
        logger.debug(f"Selected row {self.view_state.selected_index}")


@click.command()
@click.argument("root", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--split",
    type=click.IntRange(SPLIT_MIN, SPLIT_MAX),
    default=None,
    help="Height of the library table as a percentage of the screen"
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Abort on the first file whose tags cannot be read (default: skip it)"
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Level for the log file"
)
@click.version_option(version=__version__)
def main(root: Optional[Path], split: Optional[int], strict: Optional[bool], log_level: Optional[str]):
    """Browse the mp3 files under ROOT (default: test_dir, or $MUSE_ROOT).

    Keys: j/Down and k/Up move the selection, Enter selects, q quits.
    """
    try:
        config = MuseConfig.from_env()
    except ConfigurationError as e:
        click.echo(f"\n❌ muse cannot start\n\n{e}\n", err=True)
        sys.exit(1)

    if root is not None:
        config.root_path = str(root)
    if split is not None:
        config.split_percent = split
    if strict is not None:
        config.strict = strict
    if log_level is not None:
        config.log_level = log_level.upper()

    setup_logging(config.log_level)

    try:
        logger.info("=" * 60)
        logger.info("muse starting up")
        logger.info("=" * 60)

        catalog = MusicLibrary(Path(config.root_path), strict=config.strict).scan()
        if catalog.skipped:
            logger.warning(f"{len(catalog.skipped)} files skipped, see warnings above")

        app = MuseApp(catalog, split_percent=config.split_percent)
        app.run()

        logger.info(f"muse shut down with return code {app.return_code}")

    except MetadataError as e:
        logger.critical(f"Fatal error during startup: {e}")
        click.echo(f"\n❌ muse cannot start\n\n{e}\n", err=True)
        click.echo(f"Check {LOG_FILE} for more details.\n", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("muse interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        click.echo("\n❌ muse encountered an unexpected error\n", err=True)
        click.echo(f"{type(e).__name__}: {e}\n", err=True)
        click.echo(f"Check {LOG_FILE} for more details.\n", err=True)
        sys.exit(1)

    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
