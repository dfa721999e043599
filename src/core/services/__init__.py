"""Application services: command routing and the interactive session."""
