"""Score and profile backend for the StartAI games."""
