"""Project scaffolding: resolve configuration, render templates, write files."""
