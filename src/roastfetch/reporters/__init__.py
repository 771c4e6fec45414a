"""Output sinks for a run."""
