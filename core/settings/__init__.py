"""Host settings collaborators."""
