"""Standalone launcher for Unicode Cleaner Web.

Starts uvicorn on a free port, waits for the server to answer, then opens the
default browser.

Usage :
    python -m unicode_cleaner
    python -m unicode_cleaner --port 8000 --no-browser
"""

from __future__ import annotations

import argparse
import logging
import signal
import socket
import subprocess
import sys
import time
import urllib.error
import urllib.request
import webbrowser
from pathlib import Path
from subprocess import DEVNULL

_log = logging.getLogger(__name__)

# Directory holding the unicode_cleaner package, so uvicorn finds it from a checkout
_SRC_DIR = Path(__file__).resolve().parents[2]


def find_free_port(start: int = 8400, end: int = 8500) -> int:
    """Return the first free TCP port in [start, end)."""
    for port in range(start, end):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind(("127.0.0.1", port))
                return port
            except OSError:
                continue
    raise RuntimeError(f"No free port between {start} and {end}.")


def wait_for_health(url: str, timeout: float = 15.0) -> bool:
    """Poll *url* every 200 ms until it returns HTTP 200 or *timeout* elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            with urllib.request.urlopen(url, timeout=1) as resp:
                if resp.status == 200:
                    return True
        except (urllib.error.URLError, OSError):
            pass
        time.sleep(0.2)
    return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unicode Cleaner — web server")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="TCP port to use (a free one is picked when omitted)",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the browser once the server is ready",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    port = args.port if args.port is not None else find_free_port()

    health_url = f"http://127.0.0.1:{port}/health"
    app_url = f"http://127.0.0.1:{port}"

    print(f"Unicode Cleaner — starting server on port {port}…")

    proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "unicode_cleaner.web.app:app",
            "--port",
            str(port),
            "--host",
            "127.0.0.1",
            "--app-dir",
            str(_SRC_DIR),
        ],
        stdout=DEVNULL,
        # stderr stays on the terminal to surface startup errors
    )

    def stop(signum=None, frame=None) -> None:
        print("\nStopping Unicode Cleaner…")
        proc.terminate()
        sys.exit(0)

    signal.signal(signal.SIGINT, stop)
    signal.signal(signal.SIGTERM, stop)

    ready = wait_for_health(health_url)
    if not ready:
        if proc.poll() is not None:
            print("Error: the server exited unexpectedly.", file=sys.stderr)
        else:
            print("Error: the server did not start in time.", file=sys.stderr)
            proc.terminate()
        sys.exit(1)

    print(f"Server ready → {app_url}")
    if not args.no_browser:
        _log.debug("opening %s", app_url)
        webbrowser.open(app_url)
    print("Press Ctrl+C to stop Unicode Cleaner.")
    proc.wait()
