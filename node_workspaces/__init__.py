"""node-workspaces: Package manager and workspace awareness for Node.js monorepos."""

from __future__ import annotations

__version__ = "0.1.0"
