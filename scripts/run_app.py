"""
Launch the Streamlit preview for the highlighting engine.

Usage:
    python scripts/run_app.py                  # Default port 8501
    python scripts/run_app.py --port 8502      # Custom port
    python scripts/run_app.py --check-config   # Validate config/config.json and exit
"""

import argparse
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Launch the search highlighting preview interface"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port to run the application on (default: 8501)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Host to bind to (default: localhost)"
    )

    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically"
    )

    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Load config/config.json, print the highlighting limits and exit"
    )

    return parser.parse_args()


def check_config(project_root: Path) -> int:
    """Validate the configuration file used by the preview."""
    from search_highlighting.core import ConfigurationError, get_config

    try:
        config = get_config(project_root / "config" / "config.json")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
        return 1

    hl = config.highlighting
    print(f"max_text_length={hl.max_text_length} max_query_length={hl.max_query_length} "
          f"max_terms={hl.max_terms} min_term_length={hl.min_term_length} "
          f"trailing_context={hl.trailing_context}")
    return 0


def main():
    """Main entry point for launching the app."""
    args = parse_args()

    project_root = Path(__file__).parent.parent

    if args.check_config:
        sys.exit(check_config(project_root))

    app_path = project_root / "search_highlighting" / "gui" / "app.py"

    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(app_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
    ]

    if args.no_browser:
        cmd.extend(["--server.headless", "true"])

    print(f"Search highlighting preview on http://{args.host}:{args.port} (Ctrl+C to stop)")

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nShutting down...")
    except FileNotFoundError:
        print("Error: Streamlit not found. Install with: pip install streamlit")
        sys.exit(1)


if __name__ == "__main__":
    main()
