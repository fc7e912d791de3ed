"""
Schedule subsystem.

Components:
- models.py: data structures (Task, ScheduleResult, TaskEvent)
- errors.py: rejected-input exceptions, each mapped to a ResultKind
- task_factory.py: strict "HH:MM" parsing and Task construction
- conflicts.py: inclusive interval overlap check
- task_store.py: in-memory, start-time ordered task collection
- observers.py: listener registry with synchronous fan-out
- listeners.py: log sink and console notification listeners
- manager.py: the locked facade callers talk to
"""
