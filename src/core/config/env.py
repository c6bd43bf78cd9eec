import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def load_default_env(project_root: Path | None = None) -> Path | None:
    """Load the first .env found under config/env/ or the project root. Real env vars win."""
    root = project_root or PROJECT_ROOT
    for p in (root / "config" / "env" / ".env", root / ".env"):
        if p.exists():
            load_dotenv(p, override=False)
            return p
    return None


def get_env_vars(project_root: Path | None = None) -> dict[str, str]:
    load_default_env(project_root)
    return dict(os.environ)
