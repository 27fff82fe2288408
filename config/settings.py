"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Tuple
from dotenv import load_dotenv

from domain.exceptions import ConfigurationError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)
load_dotenv()


def _csv_tuple(value: str) -> Tuple[str, ...]:
    return tuple(v.strip() for v in value.split(',') if v.strip())


class Settings:
    """
    Process-wide settings for the FACEIT exporter.

    Per-run identifiers (organizer, championship, leaderboard, my team)
    live in ExportOptions; this object only carries credentials, HTTP
    behaviour, pacing and logging.
    """

    FACEIT_API_KEY:  str = os.getenv('FACEIT_API_KEY', '').strip()
    FACEIT_BASE_URL: str = os.getenv('FACEIT_BASE_URL', 'https://open.faceit.com/data/v4')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:        float = float(os.getenv('REQUEST_TIMEOUT', '30'))
    RATE_LIMIT_MAX_RETRIES: int   = int(os.getenv('RATE_LIMIT_MAX_RETRIES', '5'))
    RATE_LIMIT_FALLBACK_MS: int   = int(os.getenv('RATE_LIMIT_FALLBACK_MS', '500'))

    # ── Pacing between bulk fetches (seconds) ─────────────────────────────
    TEAM_DETAIL_DELAY_S: float = float(os.getenv('TEAM_DETAIL_DELAY_S', '0.15'))
    MATCH_STATS_DELAY_S: float = float(os.getenv('MATCH_STATS_DELAY_S', '0.2'))

    # ── Page sizes ─────────────────────────────────────────────────────────
    ORGANIZER_PAGE_SIZE:       int = 100
    CHAMPIONSHIP_PAGE_SIZE:    int = 100
    LEADERBOARD_PAGE_SIZE:     int = 200
    LEADERBOARD_STANDINGS_PAGE_SIZE: int = 20
    GROUP_STANDINGS_PAGE_SIZE: int = 100
    MATCH_PAGE_SIZE:           int = 100

    # ── Match payload conventions ──────────────────────────────────────────
    # Positional winner markers in competitor order (first, second).
    WINNER_MARKERS: Tuple[str, ...] = _csv_tuple(os.getenv('FACEIT_WINNER_MARKERS', 'faction1,faction2'))

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:    Path = Path(__file__).resolve().parent.parent
    DATA_DIR:    Path = BASE_DIR / 'data'
    LOG_DIR:     Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))
    CONFIG_FILE: str  = 'faceit.config.json'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.FACEIT_API_KEY or len(cls.FACEIT_API_KEY) < 10:
            raise ConfigurationError(
                "FACEIT_API_KEY missing or invalid. Set it in .env (dotenv) or environment."
            )


settings = Settings()
