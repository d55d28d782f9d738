"""Shared interfaces and dispatch plumbing."""
