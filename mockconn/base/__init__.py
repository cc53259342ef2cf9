"""Base layer: actions, scenario, errors, DTOs, protocols and logging."""
