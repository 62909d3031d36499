"""Prompt Architect: turns short ideas into structured, framework-driven prompts."""

__version__ = "0.1.0"
