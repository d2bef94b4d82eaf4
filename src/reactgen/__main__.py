"""Run the reactgen shell with ``python -m reactgen``."""

from reactgen.shell import main

raise SystemExit(main())
