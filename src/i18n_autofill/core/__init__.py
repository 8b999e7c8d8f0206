"""
Core Package.

Contains the autofill pass:
- Import binding tracking and call site matching
- Locale manifest resolution and id generation
- Code synthesis and the virtual module registry
- The per-build `Compilation` context and the plugin facade
"""
