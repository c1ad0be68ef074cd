"""Configuration, logging, storage and error handling primitives."""
