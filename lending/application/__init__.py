"""
Application layer.

Use cases that orchestrate the lending domain on behalf of a caller
(usually a web layer that has already loaded the entities involved).
"""
