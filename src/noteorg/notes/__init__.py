"""Note storage and in-memory repository.

Layout:
    ~/.noteorg/
    ├── notes.json                     # JSON array: title, body, time_added
    ├── noteorg.toml                   # Optional configuration
    └── export/
        └── Groceries.md              # Markdown export (frontmatter + body)
"""
