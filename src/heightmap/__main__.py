"""Allow ``python -m heightmap``."""

from .cli import main

raise SystemExit(main())
