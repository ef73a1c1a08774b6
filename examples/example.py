"""Example host for the Public Transport widget.

Usage:
    python examples/example.py config.json          # render once
    python examples/example.py config.json --watch  # re-render every update cycle
    python examples/example.py --schema             # print the config schema
"""

import logging
import sys
import time
from pathlib import Path

# Add src to path so we can import transportwidget
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from transportwidget import PublicTransportWidget

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_departures(widget: PublicTransportWidget, raw_config: str) -> bool:
    """
    Run the widget once and print its output.

    Returns:
        False if the configuration could not be decoded.
    """
    result = widget.run(raw_config)

    print(f"\n{'='*70}")
    print(f"{widget.get_name()} v{widget.get_version()}")
    print(f"{'='*70}\n")
    print(result.data)
    print()

    return result.ok


def watch(widget: PublicTransportWidget, raw_config: str) -> None:
    """Re-run the widget on its update cycle until interrupted."""
    interval = widget.get_run_update_cycle_seconds()
    logger.info(f"Refreshing every {interval} seconds (Ctrl+C to stop)")

    while True:
        try:
            if not print_departures(widget, raw_config):
                sys.exit(1)
            time.sleep(interval)
        except KeyboardInterrupt:
            print("\nGoodbye!")
            break


if __name__ == "__main__":
    args = sys.argv[1:]
    widget = PublicTransportWidget()

    if "--schema" in args:
        print(widget.get_config_schema())
        sys.exit(0)

    paths = [arg for arg in args if not arg.startswith("--")]
    if not paths:
        print(__doc__)
        sys.exit(1)

    try:
        raw_config = Path(paths[0]).read_text(encoding="utf-8").strip()
    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if "--watch" in args:
        watch(widget, raw_config)
    elif not print_departures(widget, raw_config):
        sys.exit(1)
