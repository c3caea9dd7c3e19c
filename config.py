import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

GITHUB_API_URL = "https://api.github.com"
DISPATCH_EVENT_TYPE = "add-nip05"
USER_AGENT = "NIP05-Submission-Service"

DEFAULT_GITHUB_OWNER = "bitkarrot"
DEFAULT_GITHUB_REPO = "nip05-service"
DEFAULT_ALLOWED_ORIGIN = "*"
DEFAULT_TIMEOUT = 30.0

HOST = os.getenv("HOST") or "0.0.0.0"
PORT = int(os.getenv("PORT") or "8000")


@dataclass(frozen=True)
class Settings:
    github_token: str = ""
    github_owner: str = DEFAULT_GITHUB_OWNER
    github_repo: str = DEFAULT_GITHUB_REPO
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    github_timeout: float = DEFAULT_TIMEOUT

    @property
    def dispatch_url(self) -> str:
        return f"{GITHUB_API_URL}/repos/{self.github_owner}/{self.github_repo}/dispatches"

    @property
    def pr_url(self) -> str:
        return f"https://github.com/{self.github_owner}/{self.github_repo}/pulls"


def _getenv(name: str, default: str) -> str:
    # Unset and empty values both fall back to the default
    return os.getenv(name) or default


def load_settings() -> Settings:
    raw_timeout = _getenv("GITHUB_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as e:
        raise ValueError(f"Invalid GITHUB_TIMEOUT: {raw_timeout!r}") from e
    if timeout <= 0:
        raise ValueError(f"GITHUB_TIMEOUT must be positive, got: {raw_timeout!r}")

    return Settings(
        github_token=os.getenv("GITHUB_TOKEN", "").strip(),
        github_owner=_getenv("GITHUB_OWNER", DEFAULT_GITHUB_OWNER).strip(),
        github_repo=_getenv("GITHUB_REPO", DEFAULT_GITHUB_REPO).strip(),
        allowed_origin=_getenv("ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGIN).strip(),
        github_timeout=timeout,
    )