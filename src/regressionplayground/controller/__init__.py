"""
Controllers
===========
Glue between the MODEL and the VIEW.

Note: This package should NOT import PySide6. The window is reached only
through the PlaygroundView protocol, so controllers can be tested with a fake.
"""
