"""
Core Package.

Contains the stripping backend:
- Dialect profiles and tree-sitter parsing
- Node classification and the type eraser
- Identifier usage scanning and the import fixer
- The orchestration engine
"""
