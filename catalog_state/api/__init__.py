"""
==============================================================================
API Package
==============================================================================

REST endpoints of the HTTP shell.

==============================================================================
"""
