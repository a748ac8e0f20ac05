"""Presentation layer - rendering client outcomes.

This layer turns Result values produced by the albums API client into text
for a display sink. It is thin: it dispatches on Success/Failure and
formats, it never inspects errors further and never retries.

Structure:
- console/: Result presenter and display sinks (console, in-memory)

The presentation layer depends on the domain layer (entities, protocols) but
contains NO request logic.
"""
