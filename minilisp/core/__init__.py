"""
minilisp.core: location and diagnostic types shared by the driver and CLI.

Modules:
  - span: source span (file/line/column)
  - diagnostics: Diagnostic record and exception conversion
"""

__all__ = [
	"diagnostics",
	"span",
]
