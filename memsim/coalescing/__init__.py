"""Partitions with coalescing and compaction, placement strategies and timing settings."""