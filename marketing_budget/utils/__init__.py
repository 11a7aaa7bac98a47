"""Shared utilities for the marketing budget engine."""
