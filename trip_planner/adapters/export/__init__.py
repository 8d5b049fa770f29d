"""Export adapters - Implementations of ExportEncoderPort.

Available implementations:
- ReportLabPdfEncoder: PDF documents via ReportLab
"""

from .reportlab_encoder import ReportLabPdfEncoder, summary_rows

__all__ = ["ReportLabPdfEncoder", "summary_rows"]
