"""Runtime package.

Keep this module dependency-light: importing `livescribe.runtime.*` from the
capture client and unit tests should not pull in the server stack.
"""

__all__: list[str] = []
