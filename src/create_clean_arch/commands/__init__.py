"""Click plumbing shared by the CLI: command class and app context."""
