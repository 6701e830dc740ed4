"""
Archive Client - bearer-authenticated HTTP adapter for a remote archival service.

Forwards case, document, sign-off and enterprise/person synchronization
requests as JSON envelopes and surfaces remote failures as structured errors.
"""

__version__ = "1.0.0"
