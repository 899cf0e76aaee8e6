"""Chart sections of the dashboard."""
