"""Entry-point script delegating to irta_admin.scripts.create_admin_user."""

from __future__ import annotations

from irta_admin.scripts.create_admin_user import main


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
