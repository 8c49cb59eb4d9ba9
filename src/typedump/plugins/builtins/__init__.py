"""Built-in plugins shipped with typedump."""
