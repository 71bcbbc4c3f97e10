"""Observer: notify dependents automatically when a subject changes."""
