#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Internal helpers shared by parsers and renderers."""
