"""``python -m mocklight`` runs the same console script as ``mocklight``."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
