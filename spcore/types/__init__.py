"""Shared scalar types and enums used across spcore."""
