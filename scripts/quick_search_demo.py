# Path: scripts/quick_search_demo.py
# Purpose: Simple CLI to run a directory search against the configured user source.
# Layer: scripts.
# Details: Loads the registry once, applies the query, and prints the revealed page after N scroll signals.

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings, configure_logging
from core.datasource import build_source
from core.registry import RegistryLoader, UserRegistry
from gui.view_models import DirectoryViewModel


def main() -> int:
    """Execute a quick search from the command line."""

    parser = argparse.ArgumentParser(description="Search the user directory")
    parser.add_argument("--query", type=str, default="", help="Text matched against names, ids, and friend names")
    parser.add_argument("--file", type=Path, default=None, help="Read users from a local JSON file instead of the URL")
    parser.add_argument("--url", type=str, default=None, help="Override the remote users URL")
    parser.add_argument("--pages", type=int, default=0, help="Number of near-bottom signals to simulate")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    if args.file is not None:
        settings.data_source.path = args.file
    if args.url is not None:
        settings.data_source.url = args.url
    configure_logging(settings.log_level)

    registry = UserRegistry()
    loader = RegistryLoader(build_source(settings.data_source), registry)
    if not loader.load():
        print("Could not load users; see log for details.", file=sys.stderr)
        return 1

    view_model = DirectoryViewModel(registry, settings=settings)
    view_model.on_users_loaded()
    view_model.on_query_changed(args.query)
    for _ in range(args.pages):
        view_model.on_near_bottom()

    page = view_model.revealed()
    for user in page.users:
        top = user.highest_ranking_friend or "-"
        print(f"id={user.id} rank={user.rank} name={user.name} friends={', '.join(user.friend_names)} top={top}")
    print(f"{page.visible_count} of {page.total} shown{' (more available)' if page.has_more else ''}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
