"""FastAPI bridge for browser front-ends."""
