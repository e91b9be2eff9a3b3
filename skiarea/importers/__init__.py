"""Importers for bulk-loading a SkiArea from text files.

Provides the LiftImporter for semicolon-delimited lift type and lift records.
"""

from skiarea.importers.lift_importer import (
    ImportSummary,
    LiftImporter,
)

__all__ = [
    "LiftImporter",
    "ImportSummary",
]
