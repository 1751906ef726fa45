"""Exercise definitions.

Every module in this package that defines an `exercise` object is
auto-registered by style_checker.registry.discover().
"""
