"""Application layer orchestrating identity use cases."""
