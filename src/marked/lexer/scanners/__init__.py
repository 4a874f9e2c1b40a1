"""Mode-specific line scanners for the Marked lexer."""

from marked.lexer.scanners.block import BlockScannerMixin
from marked.lexer.scanners.fence import FenceScannerMixin

__all__ = ["BlockScannerMixin", "FenceScannerMixin"]
