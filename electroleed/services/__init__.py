"""Account services: credential store, principal resolution, login and registration."""
