"""CLI entry point and subcommands for swift-format-plugin."""
