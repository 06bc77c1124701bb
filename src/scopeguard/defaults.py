DEFAULT_WARN_ON_UNFINALIZED = True
"""Emit a ``ResourceWarning`` when an armed guard is collected before finalization."""
