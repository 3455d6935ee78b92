"""Version parsing, constraint matching and release resolution."""
