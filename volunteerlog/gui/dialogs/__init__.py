"""Modal dialogs for registering volunteers and logging hours."""
