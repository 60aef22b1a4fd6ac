"""Engine configuration and logging."""
