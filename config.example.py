# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional; the defaults match the standard project layout:

    bower_components/bootstrap/dist/{css,js,fonts}  ->  src/{styles,scripts,fonts}
    src/scripts/tictactoe.elm                       ->  src/scripts/tictactoe.js
"""

ENV_VARS = {
    # App / logging
    "TTT_APP_NAME": "Display name used in logs (default: tictactoe-build).",
    "TTT_LOG_LEVEL": "Console logging level (default: INFO).",
    "TTT_LOG_DIR": "Directory for build.log (default: <root>/.local/tictactoe-build).",
    # Layout
    "TTT_PROJECT_ROOT": "Project root (default: current directory).",
    "TTT_BOOTSTRAP_DIST": "Bootstrap dist directory (default: <root>/bower_components/bootstrap/dist).",
    "TTT_WEBROOT": "Web source tree receiving the assets (default: <root>/src).",
    "TTT_ELM_SOURCE": "Elm program to compile (default: <webroot>/scripts/tictactoe.elm).",
    # Tools
    "TTT_ELM_COMMAND": "Compiler command line, shell-quoted (default: elm-make).",
    "TTT_STRICT_COPY": "Fail when a copy glob matches nothing (true/false, default: false).",
}
