"""Settings, config-file discovery and logging setup."""
