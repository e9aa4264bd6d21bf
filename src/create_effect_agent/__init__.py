"""create-effect-agent: scaffold Effect-TS libraries with agentic tooling."""

__version__ = "0.1.0"
