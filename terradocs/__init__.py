"""Data model, orderings and loading helpers for documenting Terraform modules."""

__version__ = "0.16.0a0"