"""Configuration, logging, errors and persistence primitives."""
