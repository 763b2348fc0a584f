"""Core naming pipeline, collision resolution and batch execution."""
