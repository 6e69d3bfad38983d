from fantasy_football_manager.league.snapshot import Snapshot, SnapshotError, load_snapshot, parse_snapshot

__all__ = ["Snapshot", "SnapshotError", "load_snapshot", "parse_snapshot"]
