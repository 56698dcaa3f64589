"""Allow ``python -m gpt5_mcp``."""

from gpt5_mcp.cli import main

raise SystemExit(main())
