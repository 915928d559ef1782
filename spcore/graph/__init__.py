"""Graph primitives and helpers.

This package provides the static directed weighted `Graph` (`digraph`) and
helper modules for NetworkX interop (`convert`) and file loading (`io`).
"""
