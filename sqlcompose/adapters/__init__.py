"""Reference executors for concrete database drivers."""
