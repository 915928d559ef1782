"""Result models for shortest-path queries."""
