"""Built-in settings; any key missing from mobile-cli.toml falls back to these."""

DEFAULT_CONFIG = {
    "project_roots": [],
    "asset_roots": [],
    "asset_exts": [],
    "source_exts": ["js", "json"],
    "platforms": ["ios", "android"],
    "transformer_path": "",
    # Command lines for the external tools behind each command.
    "tools": {
        "start": "mobile-packager start",
        "bundle": "mobile-packager bundle",
        "unbundle": "mobile-packager unbundle",
        "dependencies": "mobile-packager dependencies",
        "new-library": "mobile-library",
        "generate": "mobile-generate",
        "run-android": "mobile-android run",
        "log-android": "mobile-android log",
        "run-ios": "mobile-ios run",
        "log-ios": "mobile-ios log",
        "upgrade": "mobile-upgrade",
        "link": "mobile-link",
    },
}
