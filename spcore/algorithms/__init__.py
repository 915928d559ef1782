"""Shortest-path algorithms: frontier, relaxation loop and path queries."""
