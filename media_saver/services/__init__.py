"""Service layer modules (filesystem and media-library I/O).

Currently includes the flat media copier and the metadata probe.
"""

__all__ = [
    "copier",
    "probe",
    "errors",
]
