from .records import PlayRecord, PlayStats, compute_stats, pretty_stats

__all__ = ["PlayRecord", "PlayStats", "compute_stats", "pretty_stats"]
