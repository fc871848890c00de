"""Configuration, logging and in‑memory storage for the Todo BFF."""
