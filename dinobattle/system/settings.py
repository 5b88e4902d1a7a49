from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from dinobattle.core.logging import logger
from dinobattle.battle.roster import TEAM_CAP
from dinobattle.battle.session import DEFAULT_MAX_ROUNDS

SETTINGS_FILENAME = ".dinobattle_settings.json"

def _is_count(value) -> bool:
    # JSON true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)

@dataclass
class SettingsData:
    log_level: str = "INFO"                 # DEBUG / INFO / WARN / ERROR
    max_rounds: int = DEFAULT_MAX_ROUNDS    # 0 disables the cap
    team_size: int = TEAM_CAP
    show_rounds: bool = False               # Print each round's rosters

    def normalize(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if not _is_count(self.max_rounds) or self.max_rounds < 0:
            self.max_rounds = DEFAULT_MAX_ROUNDS
        if not _is_count(self.team_size) or not 0 <= self.team_size <= TEAM_CAP:
            self.team_size = TEAM_CAP
        self.show_rounds = bool(self.show_rounds)

    def round_cap(self) -> Optional[int]:
        return self.max_rounds or None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Unknown keys are ignored so older files keep loading
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))
