"""Record storage layer.

This module persists the ordered record container as one JSON file.
It powers every create, list, find, update and delete command.
"""
