"""tinysh - a small interactive command interpreter."""
