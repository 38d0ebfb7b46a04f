"""Hashing, ABI encoding, validation and loading helpers."""
