"""Framework-agnostic domain types, configuration, and logging."""
