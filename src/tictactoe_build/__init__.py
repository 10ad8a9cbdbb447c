"""
tictactoe-build: asset copy + Elm compile for the tic-tac-toe web project.

Components:
- tasks/: task models, registry, async runner and the copy/compile actions
- compiler.py: elm-make adapter
- build.py: the project task graph
- config.py / logging_setup.py: settings and logging
- cli/: command line entrypoint
"""

__version__ = "0.1.0"
