"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, CopySpec, CompileSpec, RunReport)
- task_registry.py: named tasks + prerequisite graph, cycle checks
- task_runner.py: async runner (memoized DFS, concurrent prerequisites)
- task_actions.py: copy and compile actions
"""
