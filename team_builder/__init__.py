# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Team Builder: single-page team roster with an add-member form."""

__version__ = "1.0.0"
