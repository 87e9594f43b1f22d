"""Character sheet model, rules, content and state helpers for fifth edition role-playing games."""

__version__ = "0.1.0"