"""Configuration — settings (with postrail.toml discovery) and logging setup."""
