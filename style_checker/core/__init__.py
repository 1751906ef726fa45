"""style_checker.core — Foundation layer.

Contains the check types, colour parsing, source patterns, artifact readers,
the rendering accessor, the evaluation engine and the reporter.
This module has NO dependencies on style_checker.exercises or style_checker.registry.
"""
