"""
roster_core package: team/player models, live validation, roster editing, diff-and-sync
against the registration service, and list exports.
"""
__all__ = [
    "models",
    "errors",
    "config",
    "api",
    "validation",
    "editor",
    "diff",
    "sync",
    "session",
    "teams",
    "export",
    "ui_helpers",
]
