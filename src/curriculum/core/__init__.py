"""Core logic for curriculum setup.

Modules:
- models: ProgrammingLanguage and StudentProfile records
- profile_codec: Base64 line format for stored profiles
- language_repository / profile_repository: flat-file persistence
- search: AND-composed profile filters
- reports: whitelist/blacklist reports and comment entries
- roster: in-memory state and form validation
"""

__all__ = [
    "errors",
    "models",
    "profile_codec",
    "language_repository",
    "profile_repository",
    "search",
    "reports",
    "roster",
]
