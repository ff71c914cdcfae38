"""Game data: records and loaders."""
