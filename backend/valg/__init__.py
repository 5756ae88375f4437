"""Norwegian party palette service."""
