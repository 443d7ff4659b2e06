"""Domain models and errors.

Pure data structures (Pydantic v2) and the exception taxonomy. Nothing here
runs commands or touches the host.
"""
