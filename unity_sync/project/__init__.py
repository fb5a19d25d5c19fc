"""Project loading — the declared dependency set and where everything lives."""
