"""Infrastructure: configuration and logging setup."""
