"""Reference collaborators for the home view."""
